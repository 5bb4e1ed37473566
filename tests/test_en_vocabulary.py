import re

import pytest

from whenrules.en.vocabulary import (
    INTEGER_WORDS,
    INTEGER_WORDS_PATTERN,
    MONTH_OFFSET,
    MONTH_OFFSET_PATTERN,
    ORDINAL_WORDS,
    ORDINAL_WORDS_PATTERN,
    WEEKDAY_OFFSET,
    WEEKDAY_OFFSET_PATTERN,
    month_number,
    ordinal_day,
)


@pytest.mark.parametrize(
    "table, pattern",
    [
        (WEEKDAY_OFFSET, WEEKDAY_OFFSET_PATTERN),
        (MONTH_OFFSET, MONTH_OFFSET_PATTERN),
        (INTEGER_WORDS, INTEGER_WORDS_PATTERN),
        (ORDINAL_WORDS, ORDINAL_WORDS_PATTERN),
    ],
)
def test_every_word_is_matched_by_its_pattern(table, pattern):
    compiled = re.compile(pattern, re.IGNORECASE)
    unmatched = [word for word in table if compiled.fullmatch(word) is None]
    assert unmatched == []


def test_month_number_agrees_with_table():
    assert {word: month_number(word) for word in MONTH_OFFSET} == dict(MONTH_OFFSET)


def test_every_month_is_named():
    assert sorted(set(MONTH_OFFSET.values())) == list(range(1, 13))


def test_ordinal_day_agrees_with_table():
    assert {word: ordinal_day(word) for word in ORDINAL_WORDS} == dict(ORDINAL_WORDS)


def test_every_day_of_month_has_an_ordinal():
    assert sorted(set(ORDINAL_WORDS.values())) == list(range(1, 32))


def test_lookup_ignores_case_and_surrounding_space():
    assert month_number("  SEPT. ") == month_number("sept.")
    assert ordinal_day(" Twenty-First") == ordinal_day("21st")


def test_spelled_variants_agree():
    assert ordinal_day("twenty first") == ordinal_day("twenty-first") == 21
    assert month_number("sept.") == 9


def test_unknown_words_give_none():
    assert month_number("smarch") is None
    assert ordinal_day("zeroth") is None


def test_weekdays_cover_the_week():
    assert sorted(set(WEEKDAY_OFFSET.values())) == list(range(7))