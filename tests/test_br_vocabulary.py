import re

import pytest

from whenrules.br.vocabulary import (
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


def test_month_number_ignores_case_and_padding():
    assert month_number(" Dez. ") == 12


def test_month_number_unknown_word():
    assert month_number("brumário") is None


@pytest.mark.parametrize("word", sorted(MONTH_OFFSET))
def test_month_number_round_trip(word):
    assert month_number(f"  {word.upper()} ") == MONTH_OFFSET[word]


def test_month_numbers_cover_the_year():
    assert set(MONTH_OFFSET.values()) == set(range(1, 13))


def test_ordinal_day_compound_with_space():
    assert ordinal_day("décimo primeiro") == 11


def test_ordinal_day_digits():
    assert ordinal_day("31º") == 31


def test_ordinal_day_feminine_first_is_unknown():
    assert ordinal_day("primeira") is None
    assert ordinal_day("1ª") is None


@pytest.mark.parametrize("word", sorted(ORDINAL_WORDS))
def test_ordinal_day_round_trip(word):
    assert ordinal_day(f" {word} ") == ORDINAL_WORDS[word]


def test_ordinal_days_cover_a_month():
    assert set(ORDINAL_WORDS.values()) == set(range(1, 32))


@pytest.mark.parametrize(
    "hyphenated, spaced",
    [
        ("vigésima-terceira", "vigésimo terceiro"),
        ("décimo-quinto", "décima quinta"),
        ("trigésimo-primeiro", "trigésima primeira"),
    ],
)
def test_compound_ordinals_have_both_separators(hyphenated, spaced):
    assert ordinal_day(hyphenated) == ordinal_day(spaced)
    assert ordinal_day(hyphenated) is not None


def test_compound_ordinal_value():
    assert ordinal_day("vigésima-terceira") == 23
    assert ordinal_day("vigésimo terceiro") == 23


def test_weekday_offsets_cover_the_week():
    assert set(WEEKDAY_OFFSET.values()) == set(range(7))


@pytest.mark.parametrize(
    "table, pattern",
    [
        (MONTH_OFFSET, MONTH_OFFSET_PATTERN),
        (WEEKDAY_OFFSET, WEEKDAY_OFFSET_PATTERN),
        (INTEGER_WORDS, INTEGER_WORDS_PATTERN),
    ],
)
def test_every_word_matches_its_pattern(table, pattern):
    compiled = re.compile(pattern)
    assert [word for word in table if not compiled.fullmatch(word)] == []


@pytest.mark.parametrize(
    "word, expected",
    [("1º", 1)]
    + [(f"{number}{mark}", number) for number in range(2, 32) for mark in "ªº"],
)
def test_digit_ordinals_match_pattern_and_resolve(word, expected):
    assert re.fullmatch(ORDINAL_WORDS_PATTERN, word)
    assert ordinal_day(word) == expected