"""
document.py — Line model of a text and the span replacement applied to it.

Text is split on any of \r\n, \r or \n. A Document remembers the terminator
it renders with (\r\n when the text has one) and whether the text
ended with one, so render() gives back the same layout with new lines.
"""
import re
from dataclasses import dataclass, field, replace
from typing import List

from .ranges import Span

_EOL = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Document:
    lines:        List[str] = field(default_factory=lambda: [""])
    eol:          str = "\n"
    trailing_eol: bool = False

    @classmethod
    def from_text(cls, text: str) -> "Document":
        eol = "\r\n" if "\r\n" in text else "\n"
        lines = _EOL.split(text)
        trailing = len(lines) > 1 and lines[-1] == ""
        if trailing:
            lines.pop()
        return cls(lines=lines, eol=eol, trailing_eol=trailing)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        return self.lines[index]

    def slice(self, span: Span) -> list:
        return self.lines[span.start:span.end + 1]

    def render(self) -> str:
        text = self.eol.join(self.lines)
        if self.trailing_eol:
            text += self.eol
        return text


def replace_span(document: Document, span: Span, new_lines: list) -> Document:
    """Return a copy of ``document`` with the lines in ``span`` swapped for ``new_lines``."""
    lines = document.lines[:span.start] + list(new_lines) + document.lines[span.end + 1:]
    if not lines:
        lines = [""]
    return replace(document, lines=lines)
