# CNFCYK, membership testing for grammars in Chomsky Normal Form
import cnfcyk.logging as logging
import cnfcyk.concepts as concepts
import cnfcyk.grammar as grammar
import cnfcyk.parser as parser
import cnfcyk.config as config

from cnfcyk.grammar import (CNFGrammar, TerminalProduction, BinaryProduction, ConstructionError,
    EmptyGrammarError, UndefinedSymbolError, MalformedProductionError)
from cnfcyk.parser import recognize
