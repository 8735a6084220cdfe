from cnfcyk.parser.cyk._cykalgo import CYKAlgo, CYKTable, RuleQuery
from cnfcyk.parser.cyk._cykrecognizer import CYKRecognizer
