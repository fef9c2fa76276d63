"""
ranges.py — Decide which lines a sort request applies to.

Given what the host reports (is there a target, what is selected) and the
sortEntireFile flag, resolve_span either returns the Span to transform or
raises one of the RangeError subclasses. Nothing is read or written here.
"""
from dataclasses import dataclass
from typing import Optional

from .errors import EmptySelection, InvalidSelection, NoActiveTarget, SingleLineSelection


@dataclass(frozen=True)
class Selection:
    """Zero-based, inclusive line range of a selection."""
    start_line: int
    end_line:   int
    is_empty:   bool = False

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line

    @classmethod
    def empty(cls, line: int = 0) -> "Selection":
        return cls(line, line, is_empty=True)


@dataclass(frozen=True)
class EditingContext:
    line_count: int
    selection:  Optional[Selection] = None


@dataclass(frozen=True)
class Span:
    start: int
    end:   int

    def __len__(self) -> int:
        return self.end - self.start + 1


def resolve_span(context: Optional[EditingContext], sort_entire_file: bool = False) -> Span:
    if context is None:
        raise NoActiveTarget()

    sel = context.selection
    if sel is None or sel.is_empty:
        if sort_entire_file:
            return Span(0, max(context.line_count - 1, 0))
        raise EmptySelection()

    if not 0 <= sel.start_line <= sel.end_line < context.line_count:
        raise InvalidSelection(
            f"Lines {sel.start_line + 1}-{sel.end_line + 1} are outside the "
            f"document ({context.line_count} lines)"
        )
    if sel.is_single_line:
        raise SingleLineSelection()
    return Span(sel.start_line, sel.end_line)
