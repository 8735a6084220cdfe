import pytest

import cnfcyk
from cnfcyk.config import GrammarParser, GrammarSourceError, Exceptions
from cnfcyk.grammar import TerminalProduction, BinaryProduction, UndefinedSymbolError, EmptyGrammarError

def test_run_text():
    grammar = GrammarParser.run_text("S:A,B\nA:a\nB:b\n")
    assert grammar.start_symbol == "S"
    assert grammar.binary_productions == (BinaryProduction("S", "A", "B"),)
    assert grammar.terminal_productions == (TerminalProduction("A", "a"), TerminalProduction("B", "b"))

def test_run_reads_file(tmp_path):
    path = tmp_path / "grammar.txt"
    path.write_text("S:A,B\nS:C,D\nA:a\nB:b\nC:a\nD:a\n")
    grammar = cnfcyk.config.parser.run(str(path))
    assert grammar.binary_productions_for("S") == (("A", "B"), ("C", "D"))
    assert cnfcyk.recognize(grammar, "aa")
    assert cnfcyk.recognize(grammar, "ab")

def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        GrammarParser.run(str(tmp_path / "missing.txt"))

def test_start_symbol_is_first_declaration():
    grammar = GrammarParser.run_text("A:a\nS:A,A\n")
    assert grammar.start_symbol == "A"

def test_comments_blank_lines_and_whitespace_are_ignored():
    txt = "# a comment\n\n  S : A , B  \n\t# another\nA: a\nB :b\n"
    grammar = GrammarParser.run_text(txt)
    assert grammar.binary_productions_for("S") == (("A", "B"),)
    assert grammar.terminal_productions_for("A") == ("a",)

def test_any_single_character_is_a_terminal():
    grammar = GrammarParser.run_text("S:L,R\nL:(\nR:)\n")
    assert cnfcyk.recognize(grammar, "()")

def test_alphabet_restriction():
    with pytest.raises(GrammarSourceError) as e:
        GrammarParser.run_text("S:A,C\nA:a\nC:c\n", alphabet="ab")
    assert e.value.exceptions == [Exceptions.UnknownTerminal(msg="'c' is not one of 'ab'", line_number=3)]

@pytest.mark.parametrize("line, exception_type", [
    ("S", Exceptions.MalformedDeclaration),
    ("S:", Exceptions.MalformedDeclaration),
    (":a", Exceptions.MalformedDeclaration),
    ("S-1:a", Exceptions.InvalidNonterminal),
    ("S:A,B,C", Exceptions.MalformedBinaryRule),
    ("S:A,", Exceptions.MalformedBinaryRule),
    ("S:A,(", Exceptions.MalformedBinaryRule),
    ("S:ab", Exceptions.NotChomskyNormalForm),
    ("S:AB", Exceptions.NotChomskyNormalForm),
])
def test_malformed_lines(line, exception_type):
    with pytest.raises(GrammarSourceError) as e:
        GrammarParser.run_text(f"A:a\n{line}\n")
    assert len(e.value.exceptions) == 1
    assert type(e.value.exceptions[0]) is exception_type
    assert e.value.exceptions[0].line_number == 2

def test_all_malformed_lines_are_reported():
    txt = "S:A,B\nA:aa\nB\nB:b\n"
    with pytest.raises(GrammarSourceError) as e:
        GrammarParser.run_text(txt, filename="bad.txt")
    assert [x.line_number for x in e.value.exceptions] == [2, 3]
    msg = str(e.value)
    assert msg.startswith("2 error(s) in bad.txt")
    assert "bad.txt, Line 2:" in msg
    assert "NotChomskyNormalFormException" in msg
    assert ">> 3 \t| B" in msg

def test_construction_errors_propagate():
    with pytest.raises(UndefinedSymbolError):
        GrammarParser.run_text("S:A,C\nA:a\n")
    with pytest.raises(EmptyGrammarError):
        GrammarParser.run_text("# nothing\n")
