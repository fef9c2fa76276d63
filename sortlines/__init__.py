"""
sortlines — sort, shuffle and dedupe blocks of text lines.

    >>> from sortlines import transform_lines
    >>> transform_lines("natural", ["item10", "item2", "item1"])
    ['item1', 'item2', 'item10']
"""

from .config import Settings
from .document import Document, replace_span
from .errors import (
    ConfigError, EmptySelection, InvalidSelection, NoActiveTarget, RangeError,
    SingleLineSelection, SortLinesError, UnknownPolicy,
)
from .pipeline import POLICIES, STEPS, build_pipeline, run_pipeline, transform_lines
from .ranges import EditingContext, Selection, Span, resolve_span

__version__ = "1.9.2"
