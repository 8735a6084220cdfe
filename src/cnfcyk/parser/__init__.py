from cnfcyk.parser._run import run, recognize
from cnfcyk.parser.cyk import CYKAlgo, CYKTable, CYKRecognizer
