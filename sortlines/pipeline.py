"""
pipeline.py — Named line pipelines and the step registry they draw from.

A step is any callable ``list[str] -> list[str]``. A pipeline is a list of
steps applied left to right, so ["sort", "remove_duplicates"] sorts first and
then drops exact repeats from the sorted result.

The 14 built-in policies live in POLICIES. Extra chains can be declared in
sortlines.ini (see config.py) and are resolved against the same STEPS.
"""
import functools
from typing import Callable, Iterable, Optional

from . import comparators as cmp
from .errors import ConfigError, UnknownPolicy
from .reducers import remove_blanks, remove_duplicates, shuffle

Step = Callable[[list], list]


def make_sorter(compare: cmp.Comparator) -> Step:
    """Wrap a three-way comparator into a sorting step."""
    key = functools.cmp_to_key(compare)

    def sorter(lines: list) -> list:
        return sorted(lines, key=key)

    sorter.__name__ = f"sort_by_{compare.__name__}"
    return sorter


# ─── Step registry ────────────────────────────────────────────────────────────

STEPS = {
    "sort":                         make_sorter(cmp.compare_ascending),
    "sort_reverse":                 make_sorter(cmp.compare_descending),
    "sort_case_insensitive":        make_sorter(cmp.compare_case_insensitive),
    "sort_line_length":             make_sorter(cmp.compare_length),
    "sort_line_length_reverse":     make_sorter(cmp.compare_length_reverse),
    "sort_variable_length":         make_sorter(cmp.compare_variable_length),
    "sort_variable_length_reverse": make_sorter(cmp.compare_variable_length_reverse),
    "sort_natural":                 make_sorter(cmp.compare_natural),
    "sort_timestamp":               make_sorter(cmp.compare_timestamp),
    "sort_date":                    make_sorter(cmp.compare_date),
    "shuffle":                      shuffle,
    "remove_duplicates":            remove_duplicates,
    "remove_blanks":                remove_blanks,
}


# ─── Policies ─────────────────────────────────────────────────────────────────

POLICIES = {
    "ascending":                  ("sort",),
    "ascending-unique":           ("sort", "remove_duplicates"),
    "descending":                 ("sort_reverse",),
    "case-insensitive":           ("sort_case_insensitive",),
    "case-insensitive-unique":    ("sort_case_insensitive", "remove_duplicates"),
    "length-ascending":           ("sort_line_length",),
    "length-descending":          ("sort_line_length_reverse",),
    "variable-length-ascending":  ("sort_variable_length",),
    "variable-length-descending": ("sort_variable_length_reverse",),
    "natural":                    ("sort_natural",),
    "shuffle":                    ("shuffle",),
    "remove-duplicates":          ("remove_duplicates",),
    "timestamp":                  ("sort_timestamp",),
    "date":                       ("sort_date",),
}

TITLES = {
    "ascending":                  "Sort lines (ascending, case sensitive)",
    "ascending-unique":           "Sort lines (unique ascending, case sensitive)",
    "descending":                 "Sort lines (descending, case sensitive)",
    "case-insensitive":           "Sort lines (ascending, case insensitive)",
    "case-insensitive-unique":    "Sort lines (unique ascending, case insensitive)",
    "length-ascending":           "Sort lines (line length ascending)",
    "length-descending":          "Sort lines (line length descending)",
    "variable-length-ascending":  "Sort lines (variable length ascending)",
    "variable-length-descending": "Sort lines (variable length descending)",
    "natural":                    "Sort lines (natural)",
    "shuffle":                    "Sort lines (shuffle)",
    "remove-duplicates":          "Sort lines (remove duplicate lines)",
    "timestamp":                  "Sort lines (timestamp in Syslog)",
    "date":                       "Sort lines (sort by date in Syslog)",
}


def resolve_steps(names: Iterable[str]) -> list:
    steps = []
    for name in names:
        fn = STEPS.get(name)
        if fn is None:
            raise ConfigError(f"Unknown step '{name}' (known: {', '.join(sorted(STEPS))})")
        steps.append(fn)
    return steps


def build_pipeline(name: str, chains: Optional[dict] = None) -> list:
    """
    Look up a policy, or a user chain from the ini file, and return its steps.

    Chains is the dict produced by config.get_chains: name -> {"steps": [...]}
    """
    if name in POLICIES:
        return resolve_steps(POLICIES[name])
    chain = (chains or {}).get(name)
    if chain is None:
        raise UnknownPolicy(f"Unknown policy '{name}'")
    if not chain["steps"]:
        raise ConfigError(f"Chain '{name}' has no steps")
    return resolve_steps(chain["steps"])


def run_pipeline(steps: Iterable[Step], lines: Iterable[str]) -> list:
    current = list(lines)
    for step in steps:
        current = step(current)
    return current


def transform_lines(name: str, lines: Iterable[str], settings=None,
                    chains: Optional[dict] = None) -> list:
    """
    Apply a named policy to ``lines``.

    When ``settings.filter_blank_lines`` is set, blank lines are removed before
    the policy's first step.
    """
    steps = build_pipeline(name, chains)
    if settings is not None and settings.filter_blank_lines:
        steps = [remove_blanks] + steps
    return run_pipeline(steps, lines)
