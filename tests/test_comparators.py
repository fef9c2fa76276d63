import functools
import itertools
import locale

import pytest

from sortlines import comparators as cmp

SAMPLES = ["", "a", "A", "b", "ab", "aB", "item10", "item2", "\u00e9", "e\u0301", "z=1", "x=y=2"]


def test_descending_mirrors_ascending():
    for a, b in itertools.product(SAMPLES, repeat=2):
        asc = cmp.compare_ascending(a, b)
        desc = cmp.compare_descending(a, b)
        if a == b:
            assert asc == desc == 0
        else:
            assert asc != 0
            assert desc == -asc


def test_ascending_is_code_point_order():
    assert cmp.compare_ascending("B", "a") == -1
    assert cmp.compare_ascending("item10", "item2") == -1
    assert cmp.compare_ascending("b", "a") == 1


def test_case_insensitive_ignores_case_only():
    assert cmp.compare_case_insensitive("Apple", "apple") == 0
    assert cmp.compare_case_insensitive("Apple", "Banana") == cmp.compare_case_insensitive("apple", "banana")
    assert cmp.compare_case_insensitive("Apple", "Banana") < 0


def test_case_insensitive_keeps_accents():
    assert cmp.compare_case_insensitive("resume", "r\u00e9sum\u00e9") != 0


def test_length_counts_code_points():
    assert len("e\u0301") == 2
    assert cmp.compare_length("e\u0301", "ab") == 0
    assert cmp.compare_length("e\u0301", "a") == 1
    assert cmp.compare_length("\U0001F600", "a") == 0


def test_length_reverse_negates():
    assert cmp.compare_length("a", "abc") == -1
    assert cmp.compare_length_reverse("a", "abc") == 1
    assert cmp.compare_length_reverse("abc", "xyz") == 0


def test_variable_length_uses_key():
    # keys "LONGNAME" (8) and "AB" (2)
    assert cmp.compare_variable_length("LONGNAME=1", "AB=very long value") == 1
    assert cmp.compare_variable_length_reverse("LONGNAME=1", "AB=very long value") == -1
    assert cmp.compare_variable_length("A=B=C", "ABC") == 0


def test_natural_orders_digit_runs_by_value():
    assert cmp.compare_natural("item2", "item10") == -1
    assert cmp.compare_natural("item10", "item2") == 1
    assert cmp.compare_natural("file1.txt", "file1.txt") == 0
    assert cmp.compare_natural("v1.10", "v1.9") == 1


def test_natural_mixed_leading_digits_and_text():
    assert cmp.compare_natural("10 apples", "9 apples") == 1
    assert cmp.compare_natural("abc", "10") != 0


def test_natural_collator_is_built_once():
    first = cmp.natural_collator()
    cmp.compare_natural("a1", "a2")
    assert cmp.natural_collator() is first


def test_timestamp_orders_by_window():
    a = "x<2024-01-01T00:00:00Z> msg1"
    b = "x<2024-01-02T00:00:00Z> msg2"
    assert cmp.compare_timestamp(a, b) == -1
    assert cmp.compare_timestamp(b, a) == 1
    assert cmp.compare_timestamp(a, a) == 0


def test_timestamp_without_bracket_ties_with_everything():
    for other in ["x<2024-01-01T00:00:00Z>", "anything", ""]:
        assert cmp.compare_timestamp("no bracket", other) == 0
        assert cmp.compare_timestamp(other, "no bracket") == 0


def test_date_ignores_time_of_day():
    a = "<2024-01-01 23:59:59> late"
    b = "<2024-01-01 00:00:00> early"
    assert cmp.compare_date(a, b) == 0
    assert cmp.compare_timestamp(a, b) == 1


def test_comparators_work_with_cmp_to_key():
    lines = ["item10", "item2", "item1"]
    assert sorted(lines, key=functools.cmp_to_key(cmp.compare_natural)) == ["item1", "item2", "item10"]


def test_locale_comparators_survive_nul_characters():
    assert cmp.compare_case_insensitive("a\0b", "A\0B") == 0
    assert cmp.compare_natural("x\0 2", "x\0 10") == -1


def test_date_window_stops_before_last_day_digit():
    # ten code points from "<" cover "<2024-01-0"
    assert cmp.compare_date("<2024-01-01 x", "<2024-01-02 y") == 0
    assert cmp.compare_date("<2024-01-01 x", "<2024-01-11 y") == -1


UTF8_LOCALES = ["en_US.UTF-8", "en_US.utf8", "de_DE.UTF-8", "en_GB.UTF-8"]


@pytest.fixture
def utf8_locale():
    saved = locale.setlocale(locale.LC_ALL)
    for name in UTF8_LOCALES:
        try:
            locale.setlocale(locale.LC_ALL, name)
        except locale.Error:
            continue
        yield name
        locale.setlocale(locale.LC_ALL, saved)
        return
    pytest.skip("no UTF-8 language locale installed")


def test_natural_follows_locale_collation(utf8_locale):
    # code point order would put "B" first
    assert cmp.compare_natural("a", "B") == -1
    assert cmp.compare_natural("a1", "B1") == -1
    assert sorted(["B", "a", "c"], key=functools.cmp_to_key(cmp.compare_natural)) == ["a", "B", "c"]
    assert cmp.compare_case_insensitive("a", "B") == -1
