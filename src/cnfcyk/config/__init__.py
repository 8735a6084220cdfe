from cnfcyk.config._exceptions import Exceptions, GrammarSourceError
from cnfcyk.config._grammarparser import GrammarParser
import cnfcyk.config._grammarparser as parser
