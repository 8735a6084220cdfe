from __future__ import annotations
from typing import Iterable
from functools import reduce

from cnfcyk.grammar._production import Symbol, TerminalProduction, BinaryProduction
from cnfcyk.grammar._exceptions import (ConstructionError, EmptyGrammarError,
    UndefinedSymbolError, MalformedProductionError)

class CNFGrammar():
    """
    A context free grammar in Chomsky Normal Form. Every production is either
    A -> a (TerminalProduction) or A -> B C (BinaryProduction).

    The grammar is validated once, here, and is read-only afterwards so that it can
    be shared between any number of recognition calls.
    """

    def __init__(self,
            terminal_productions: Iterable[TerminalProduction],
            binary_productions: Iterable[BinaryProduction],
            start_symbol: Symbol):

        # identical productions collapse; alternatives with different patterns are kept
        self._terminal_productions = tuple(dict.fromkeys(terminal_productions))
        self._binary_productions = tuple(dict.fromkeys(binary_productions))
        self._start_symbol = start_symbol

        self._validate()

        self._terminals_map: dict[Symbol, tuple[str, ...]] = {}
        self._binaries_map: dict[Symbol, tuple[tuple[Symbol, Symbol], ...]] = {}
        self._init_rules_maps()

    @property
    def start_symbol(self) -> Symbol:
        return self._start_symbol

    @property
    def terminal_productions(self) -> tuple[TerminalProduction, ...]:
        return self._terminal_productions

    @property
    def binary_productions(self) -> tuple[BinaryProduction, ...]:
        return self._binary_productions

    @property
    def nonterminals(self) -> frozenset[Symbol]:
        return frozenset(self._terminals_map) | frozenset(self._binaries_map)

    @property
    def terminals(self) -> frozenset[str]:
        return frozenset(p.terminal for p in self._terminal_productions)

    def terminal_productions_for(self, symbol: Symbol) -> tuple[str, ...]:
        return self._terminals_map.get(symbol, ())

    def binary_productions_for(self, symbol: Symbol) -> tuple[tuple[Symbol, Symbol], ...]:
        return self._binaries_map.get(symbol, ())

    def _init_rules_maps(self):
        terminals_map: dict[Symbol, list[str]] = {}
        for production in self._terminal_productions:
            terminals_map.setdefault(production.production_symbol, []).append(production.terminal)

        binaries_map: dict[Symbol, list[tuple[Symbol, Symbol]]] = {}
        for production in self._binary_productions:
            binaries_map.setdefault(production.production_symbol, []).append(production.pattern)

        self._terminals_map = {k: tuple(v) for k, v in terminals_map.items()}
        self._binaries_map = {k: tuple(v) for k, v in binaries_map.items()}

    @staticmethod
    def _is_nonterminal_name(name) -> bool:
        return isinstance(name, str) and name.strip() != ""

    @staticmethod
    def is_cnf_production(production) -> tuple[bool, str]:
        match production:
            case TerminalProduction(production_symbol=lhs, terminal=terminal):
                if not CNFGrammar._is_nonterminal_name(lhs):
                    return False, "left hand side must be a nonterminal name"
                if not isinstance(terminal, str) or len(terminal) != 1:
                    return False, "terminal must be exactly one character"
                return True, ""
            case BinaryProduction(production_symbol=lhs, left=left, right=right):
                if not all(map(CNFGrammar._is_nonterminal_name, (lhs, left, right))):
                    return False, "all symbols must be nonterminal names"
                return True, ""
            case _:
                return False, "not a terminal or binary production"

    def _validate(self):
        if not self._terminal_productions and not self._binary_productions:
            raise EmptyGrammarError()

        if not CNFGrammar._is_nonterminal_name(self._start_symbol):
            raise ConstructionError(f"start symbol {self._start_symbol!r} is not a nonterminal name")

        for production in self._terminal_productions + self._binary_productions:
            is_cnf, reason = CNFGrammar.is_cnf_production(production)
            if not is_cnf:
                raise MalformedProductionError(production, reason)

        defined_symbols = {p.production_symbol for p in self._terminal_productions} \
            | {p.production_symbol for p in self._binary_productions}

        for production in self._binary_productions:
            for symbol in production.pattern:
                if symbol not in defined_symbols:
                    raise UndefinedSymbolError(production, symbol)

    def __str__(self):
        return reduce(lambda s, rule: s + str(rule) + "\n",
            self._binary_productions + self._terminal_productions, "")
