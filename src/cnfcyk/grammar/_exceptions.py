from __future__ import annotations

class ConstructionError(Exception):
    """
    Raised when a CNFGrammar cannot be built from the productions it was given.
    """

class EmptyGrammarError(ConstructionError):
    def __init__(self):
        super().__init__("grammar has no terminal or binary productions")

class UndefinedSymbolError(ConstructionError):
    def __init__(self, production, symbol: str):
        self.production = production
        self.symbol = symbol
        super().__init__(f"'{symbol}' in '{production}' has no production of its own")

class MalformedProductionError(ConstructionError):
    def __init__(self, production, reason: str):
        self.production = production
        self.reason = reason
        super().__init__(f"'{production}' is not a CNF production: {reason}")
