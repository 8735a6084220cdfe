from cnfcyk.grammar import CNFGrammar
from cnfcyk.parser.cyk import CYKRecognizer

def run(grammar: CNFGrammar, text: str) -> bool:
    """
    True iff [grammar] derives [text]. The empty string is never derived, as CNF has no
    empty productions.
    """
    return CYKRecognizer(grammar, text)

recognize = run
