from cnfcyk.grammar._production import Symbol, TerminalProduction, BinaryProduction
from cnfcyk.grammar._exceptions import (ConstructionError, EmptyGrammarError, UndefinedSymbolError,
    MalformedProductionError)
from cnfcyk.grammar._cnfgrammar import CNFGrammar
