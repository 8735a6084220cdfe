from __future__ import annotations
import itertools

from cnfcyk.grammar import CNFGrammar, Symbol
from cnfcyk.logging import Logger

class CYKTable():
    """
    Upper triangular table where cell (i, j) holds the set of nonterminals which derive
    text[i..j] inclusive. Cells are only ever added to.
    """

    def __init__(self, text: str, grammar: CNFGrammar):
        self.text = text
        self.n = len(text)
        self.grammar = grammar
        self._cells: list[list[set[Symbol]]] = [[set() for j in range(self.n)] for i in range(self.n)]

    def cell(self, i: int, j: int) -> frozenset[Symbol]:
        if not 0 <= i <= j < self.n:
            raise IndexError(f"({i}, {j}) is not a span of an input of length {self.n}")
        return frozenset(self._cells[i][j])

    def peek(self, i: int, j: int) -> set[Symbol]:
        # live cell, unchecked; only for the fill loop
        return self._cells[i][j]

    def add(self, i: int, j: int, symbols):
        self._cells[i][j].update(symbols)

    def accepts(self, start_symbol: Symbol) -> bool:
        if self.n == 0:
            return False
        return start_symbol in self._cells[0][self.n - 1]

    def splits_for(self, i: int, j: int, symbol: Symbol) -> list[tuple[int, Symbol, Symbol]]:
        """
        Every (k, B, C) such that symbol -> B C is a production, B derives text[i..k] and
        C derives text[k+1..j].
        """
        return [(k, left, right)
            for k in range(i, j)
            for left, right in self.grammar.binary_productions_for(symbol)
            if left in self._cells[i][k] and right in self._cells[k + 1][j]]

    def spans(self):
        for length in range(1, self.n + 1):
            for i in range(self.n - length + 1):
                yield i, i + length - 1

    def __str__(self) -> str:
        lines = []
        for i, j in self.spans():
            if self._cells[i][j]:
                lines.append(f"[{i},{j}]: {', '.join(sorted(self._cells[i][j]))}")
        return "\n".join(lines)

class RuleQuery():
    """
    Reverse index of the grammar: which nonterminals produce a given terminal, and which
    produce a given pair of nonterminals.
    """

    def __init__(self, grammar: CNFGrammar):
        self.grammar = grammar
        self._production_lookup_table: dict[tuple[Symbol, Symbol], list[Symbol]] = {}
        self._terminal_lookup_table: dict[str, list[Symbol]] = {}
        self._init_lookup_tables()

    def _init_lookup_tables(self):
        for production in self.grammar.terminal_productions:
            key = production.terminal
            if key in self._terminal_lookup_table:
                self._terminal_lookup_table[key].append(production.production_symbol)
            else:
                self._terminal_lookup_table[key] = [production.production_symbol]

        for production in self.grammar.binary_productions:
            key = production.pattern
            if key in self._production_lookup_table:
                self._production_lookup_table[key].append(production.production_symbol)
            else:
                self._production_lookup_table[key] = [production.production_symbol]

    def get_symbols_for_terminal(self, terminal: str) -> list[Symbol]:
        return self._terminal_lookup_table.get(terminal, [])

    def get_symbols(self, lname: Symbol, rname: Symbol) -> list[Symbol]:
        return self._production_lookup_table.get((lname, rname), [])

class CYKAlgo:
    def __init__(self, grammar: CNFGrammar):
        self.grammar = grammar
        self.query = RuleQuery(grammar)
        self._logger = Logger(file="cyk", tag="CYKAlgo")

    def fill(self, text: str) -> CYKTable:
        table = CYKTable(text, self.grammar)
        if table.n == 0:
            return table

        self._fill_first_diagonal(table)
        # spans of length 2..n, strictly in order, so every sub-span is complete before use
        for span_length in range(2, table.n + 1):
            self._fill_diagonal(table, span_length)
        return table

    def recognize(self, text: str) -> bool:
        if len(text) == 0:
            self._logger.log_debug("empty input rejected")
            return False

        table = self.fill(text)
        accepted = table.accepts(self.grammar.start_symbol)
        self._logger.log_debug(f"input of length {table.n} {'accepted' if accepted else 'rejected'}")
        return accepted

    @classmethod
    def _get_points_on_diagonal(cls, n: int, span_length: int) -> list[tuple[int, int]]:
        return [(i, i + span_length - 1) for i in range(n - span_length + 1)]

    def _fill_first_diagonal(self, table: CYKTable):
        for i, _ in CYKAlgo._get_points_on_diagonal(table.n, 1):
            table.add(i, i, self.query.get_symbols_for_terminal(table.text[i]))

    def _fill_diagonal(self, table: CYKTable, span_length: int):
        for point in CYKAlgo._get_points_on_diagonal(table.n, span_length):
            i, j = point
            for k in range(i, j):
                lnames = table.peek(i, k)
                rnames = table.peek(k + 1, j)
                for l_and_r_names in itertools.product(lnames, rnames):
                    table.add(i, j, self.query.get_symbols(*l_and_r_names))
