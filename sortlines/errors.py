"""
errors.py — Exceptions raised by sortlines.

Every error carries a short ``kind`` string so the CLI and the run log can
report it without caring about the class hierarchy.
"""


class SortLinesError(Exception):
    kind = "error"


# ─── Range resolution ─────────────────────────────────────────────────────────

class RangeError(SortLinesError):
    """The request does not point at a block of lines that can be sorted."""


class NoActiveTarget(RangeError):
    kind = "NoActiveTarget"

    def __init__(self, message: str = "No active text to sort"):
        super().__init__(message)


class EmptySelection(RangeError):
    kind = "EmptySelection"

    def __init__(self, message: str = "You probably did not select any text to be sorted"):
        super().__init__(message)


class SingleLineSelection(RangeError):
    kind = "SingleLineSelection"

    def __init__(self, message: str = "Will not work with single line!"):
        super().__init__(message)


class InvalidSelection(RangeError):
    kind = "InvalidSelection"


# ─── Policies / config ────────────────────────────────────────────────────────

class UnknownPolicy(SortLinesError):
    kind = "UnknownPolicy"


class ConfigError(SortLinesError):
    kind = "ConfigError"
