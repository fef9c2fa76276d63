"""
comparators.py — Three-way line comparators.

Each comparator takes two lines and returns -1, 0 or 1, ready to be wrapped
with functools.cmp_to_key. Only the case-insensitive and natural comparators
look at the process locale; everything else is plain code-point order.
"""
import locale
import re
from typing import Callable, Optional

from .extractors import date_key, timestamp_key, variable_key

Comparator = Callable[[str, str], int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _cmp(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


# ─── Plain order ──────────────────────────────────────────────────────────────

def compare_ascending(a: str, b: str) -> int:
    return _cmp(a, b)


def compare_descending(a: str, b: str) -> int:
    return -_cmp(a, b)


def _strcoll(a: str, b: str) -> int:
    # strcoll rejects embedded NULs
    if "\0" in a or "\0" in b:
        return _cmp(a, b)
    return _sign(locale.strcoll(a, b))


def compare_case_insensitive(a: str, b: str) -> int:
    return _strcoll(a.casefold(), b.casefold())


# ─── Length ───────────────────────────────────────────────────────────────────

def compare_length(a: str, b: str) -> int:
    # code points, not glyphs: a letter plus a combining mark has length 2
    return _cmp(len(a), len(b))


def compare_length_reverse(a: str, b: str) -> int:
    return -compare_length(a, b)


def compare_variable_length(a: str, b: str) -> int:
    return compare_length(variable_key(a), variable_key(b))


def compare_variable_length_reverse(a: str, b: str) -> int:
    return -compare_variable_length(a, b)


# ─── Natural ──────────────────────────────────────────────────────────────────

class NaturalCollator:
    """
    Compare strings so that digit runs count by value: "item2" < "item10".

    Text runs go through locale.strxfrm, digit runs through int(). Splitting
    on a capturing group keeps text at even positions and digits at odd ones,
    so two keys always line up type for type.
    """

    _DIGITS = re.compile(r"(\d+)")

    def __init__(self):
        self._xfrm = locale.strxfrm

    def key(self, line: str) -> list:
        parts = self._DIGITS.split(line)
        return [int(p) if i % 2 else self._text_key(p) for i, p in enumerate(parts)]

    def _text_key(self, text: str) -> str:
        if "\0" in text:
            return text
        return self._xfrm(text)

    def compare(self, a: str, b: str) -> int:
        return _cmp(self.key(a), self.key(b))


_collator: Optional[NaturalCollator] = None


def natural_collator() -> NaturalCollator:
    """Return the shared collator, building it on first use."""
    global _collator
    if _collator is None:
        _collator = NaturalCollator()
    return _collator


def compare_natural(a: str, b: str) -> int:
    return natural_collator().compare(a, b)


# ─── Syslog keys ──────────────────────────────────────────────────────────────

def _compare_keys(ka: Optional[str], kb: Optional[str]) -> int:
    # A line without a '<' has no key and ties with everything
    if ka is None or kb is None:
        return 0
    return _cmp(ka, kb)


def compare_timestamp(a: str, b: str) -> int:
    return _compare_keys(timestamp_key(a), timestamp_key(b))


def compare_date(a: str, b: str) -> int:
    return _compare_keys(date_key(a), date_key(b))
