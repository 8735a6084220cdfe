from __future__ import annotations
from dataclasses import dataclass

# Nonterminals are plain names; terminals are single characters.
Symbol = str

@dataclass(frozen=True)
class TerminalProduction():
    """
    A CNF rule of the form A -> a, where 'a' is one character of the input alphabet.
    """
    production_symbol: Symbol
    terminal: str

    def __str__(self):
        return f"{self.production_symbol} -> {self.terminal}"

@dataclass(frozen=True)
class BinaryProduction():
    """
    A CNF rule of the form A -> B C, where both B and C are nonterminals.
    """
    production_symbol: Symbol
    left: Symbol
    right: Symbol

    @property
    def pattern(self) -> tuple[Symbol, Symbol]:
        return (self.left, self.right)

    def __str__(self):
        return f"{self.production_symbol} -> {self.left} {self.right}"
