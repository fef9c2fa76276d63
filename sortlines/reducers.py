"""
reducers.py — Steps that drop or reorder lines without comparing them.
"""
import random


def remove_duplicates(lines: list) -> list:
    """Drop exact repeats, keeping each first occurrence where it stands."""
    return list(dict.fromkeys(lines))


def remove_blanks(lines: list) -> list:
    return [ln for ln in lines if ln.strip()]


def shuffle(lines: list, rng=None) -> list:
    """
    Fisher-Yates shuffle of a copy of ``lines``.

    ``rng`` is anything with a ``randint`` method; the random module is used
    when none is given.
    """
    rng = rng or random
    out = list(lines)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out
