from __future__ import annotations

from cnfcyk.concepts import AbstractException

class Exceptions():
    class MalformedDeclaration(AbstractException):
        type = "MalformedDeclaration"
        description = "a declaration must have the form LHS:RHS"

    class InvalidNonterminal(AbstractException):
        type = "InvalidNonterminal"
        description = "nonterminal names may only contain letters, digits and underscores"

    class UnknownTerminal(AbstractException):
        type = "UnknownTerminal"
        description = "terminal is not part of the declared alphabet"

    class MalformedBinaryRule(AbstractException):
        type = "MalformedBinaryRule"
        description = "a binary rule must name exactly two nonterminals separated by a comma"

    class NotChomskyNormalForm(AbstractException):
        type = "NotChomskyNormalForm"
        description = "right hand side must be a single terminal character or two nonterminals"

class GrammarSourceError(Exception):
    """
    Raised once a grammar source has been fully read, if any of its lines were malformed.
    """

    def __init__(self, exceptions: list[AbstractException], txt: str, filename: str = None):
        self.exceptions = exceptions
        self.txt = txt
        self.filename = filename
        super().__init__(self.report())

    def report(self) -> str:
        header = f"{len(self.exceptions)} error(s) in {self.filename or 'grammar source'}\n"
        return header + "".join(e.to_str_with_context(self.txt, self.filename) for e in self.exceptions)
