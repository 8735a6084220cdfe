from __future__ import annotations
import textwrap

class AbstractException():
    """
    A diagnostic about one line of a grammar source. Diagnostics are collected rather
    than raised so that every problem in a source is reported at once.

    Subclasses set [type] and [description]; [msg] says what was found on the line.
    """
    width = 56
    context_lines = 2
    delineator = "="*74+"\n"
    type = None
    description = None

    def __init__(self, msg: str, line_number: int):
        self.msg = msg
        self.line_number = line_number

    @classmethod
    def _wrap(cls, s: str, indent: str) -> str:
        lines = textwrap.wrap(s, cls.width) or [""]
        return ("\n" + indent).join(lines) + "\n"

    def _location(self, filename: str | None) -> str:
        if filename is None:
            return f"    Line {self.line_number}: "
        return f"    {filename}, Line {self.line_number}: "

    def render(self, filename: str = None) -> str:
        location = self._location(filename)
        indent = " "*len(location)
        info = " "*(len(location) - len("INFO: ")) + "INFO: "
        return (AbstractException.delineator
            + f"{self.type}Exception\n"
            + location + self._wrap(self.description, indent)
            + info + self._wrap(self.msg, indent))

    def __str__(self):
        return self.render()

    def source_context(self, txt: str) -> str:
        """
        The lines around the offending one, numbered, with the offending line marked.
        """
        lines = txt.split('\n')
        index_of_line_number = self.line_number - 1
        start = max(index_of_line_number - self.context_lines, 0)
        end = min(index_of_line_number + self.context_lines + 1, len(lines))

        marked = []
        for i in range(start, end):
            c = ">>" if i == index_of_line_number else "  "
            marked.append(f"       {c} {i+1} \t| {lines[i]}\n")
        return "".join(marked)

    def to_str_with_context(self, txt: str, filename: str = None) -> str:
        return self.render(filename) + self.source_context(txt)

    def __hash__(self) -> int:
        return hash((self.msg, self.line_number, type(self)))

    def __eq__(self, __value: object) -> bool:
        return (type(self) == type(__value)
            and self.msg == __value.msg
            and self.line_number == __value.line_number)
