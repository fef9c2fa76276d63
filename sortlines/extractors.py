"""
extractors.py — Pull the sort key out of a line.

The timestamp and date keys are positional: a fixed-width window starting at
the first '<', as found in syslog-style lines such as

    host <2024-01-01T00:00:00.000+00:00> daemon: message

No date grammar is parsed or validated.
"""
from typing import Optional

TIMESTAMP_WIDTH = 30
DATE_WIDTH      = 10


def variable_key(line: str) -> str:
    """Text before the last '=' (``"A=B=C"`` -> ``"A=B"``), or the whole line."""
    idx = line.rfind("=")
    if idx < 0:
        return line
    return line[:idx]


def _window(line: str, width: int) -> Optional[str]:
    start = line.find("<")
    if start < 0:
        return None
    return line[start:start + width]


def timestamp_key(line: str) -> Optional[str]:
    return _window(line, TIMESTAMP_WIDTH)


def date_key(line: str) -> Optional[str]:
    return _window(line, DATE_WIDTH)
