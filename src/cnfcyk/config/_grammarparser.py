from __future__ import annotations
import re

from cnfcyk.grammar import CNFGrammar, TerminalProduction, BinaryProduction
from cnfcyk.config._exceptions import Exceptions, GrammarSourceError

def run(filename: str, alphabet: str = None) -> CNFGrammar:
    return GrammarParser.run(filename, alphabet)

class GrammarParser():
    """
    Reads grammars written one declaration per line:

        S:A,B       binary production S -> A B
        A:a         terminal production A -> a

    The left hand side of the first declaration is the start symbol.
    """

    declaration_separator = ":"
    binary_separator = ","

    nonterminal_regex_str = r"\w+"
    nonterminal_regex = re.compile(nonterminal_regex_str)

    comment_regex_str = r"[ \t]*#"
    comment_regex = re.compile(comment_regex_str)

    @classmethod
    def run(cls, filename: str, alphabet: str = None) -> CNFGrammar:
        with open(filename, 'r', encoding='utf-8') as f:
            txt = f.read()
        return cls.run_text(txt, alphabet, filename=filename)

    @classmethod
    def run_text(cls, txt: str, alphabet: str = None, filename: str = None) -> CNFGrammar:
        terminal_productions = []
        binary_productions = []
        start_symbol = None
        exceptions = []

        for line_number, line in enumerate(txt.split("\n"), start=1):
            if not line.strip():
                continue

            if cls.comment_regex.match(line):
                continue

            production = cls._try_parse_declaration(line, line_number, alphabet, exceptions)
            if production is None:
                continue

            if start_symbol is None:
                start_symbol = production.production_symbol

            if isinstance(production, TerminalProduction):
                terminal_productions.append(production)
            else:
                binary_productions.append(production)

        if exceptions:
            raise GrammarSourceError(exceptions, txt, filename)

        return CNFGrammar(terminal_productions, binary_productions, start_symbol)

    @classmethod
    def _is_nonterminal(cls, name: str) -> bool:
        return cls.nonterminal_regex.fullmatch(name) is not None

    @classmethod
    def _try_parse_declaration(cls,
            line: str,
            line_number: int,
            alphabet: str | None,
            exceptions: list):

        if cls.declaration_separator not in line:
            exceptions.append(Exceptions.MalformedDeclaration(
                msg=f"missing '{cls.declaration_separator}' in '{line.strip()}'",
                line_number=line_number))
            return None

        lhs, rhs = line.split(cls.declaration_separator, 1)
        lhs = lhs.strip()
        rhs = rhs.strip()

        if not lhs or not rhs:
            exceptions.append(Exceptions.MalformedDeclaration(
                msg=f"empty side in '{line.strip()}'",
                line_number=line_number))
            return None

        if not cls._is_nonterminal(lhs):
            exceptions.append(Exceptions.InvalidNonterminal(
                msg=f"'{lhs}' is not a valid nonterminal",
                line_number=line_number))
            return None

        if len(rhs) == 1:
            return cls._try_parse_terminal_rule(lhs, rhs, line_number, alphabet, exceptions)

        if cls.binary_separator in rhs:
            return cls._try_parse_binary_rule(lhs, rhs, line_number, exceptions)

        exceptions.append(Exceptions.NotChomskyNormalForm(
            msg=f"'{lhs} -> {rhs}' is neither A -> a nor A -> B C",
            line_number=line_number))
        return None

    @classmethod
    def _try_parse_terminal_rule(cls, lhs: str, rhs: str, line_number: int, alphabet, exceptions):
        if alphabet is not None and rhs not in alphabet:
            exceptions.append(Exceptions.UnknownTerminal(
                msg=f"'{rhs}' is not one of '{alphabet}'",
                line_number=line_number))
            return None

        return TerminalProduction(lhs, rhs)

    @classmethod
    def _try_parse_binary_rule(cls, lhs: str, rhs: str, line_number: int, exceptions):
        parts = [part.strip() for part in rhs.split(cls.binary_separator)]
        if len(parts) != 2 or not all(map(cls._is_nonterminal, parts)):
            exceptions.append(Exceptions.MalformedBinaryRule(
                msg=f"got '{rhs}'",
                line_number=line_number))
            return None

        return BinaryProduction(lhs, *parts)
