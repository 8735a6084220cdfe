from __future__ import annotations

from cnfcyk.grammar import CNFGrammar
from cnfcyk.parser.cyk._cykalgo import CYKAlgo

class CYKRecognizer():
    def __new__(cls, grammar: CNFGrammar, text: str) -> bool:
        algo = CYKAlgo(grammar)
        return algo.recognize(text)
