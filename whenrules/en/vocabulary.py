"""English words for weekdays, months, small numbers and ordinal days."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping


def _alternation(parts: Iterable[str]) -> str:
    return "(?:" + "|".join(parts) + ")"


_WEEKDAYS = (
    ("sunday", "sun"),
    ("monday", "mon"),
    ("tuesday", "tue"),
    ("wednesday", "wed"),
    ("thursday", "thur", "thu"),
    ("friday", "fri"),
    ("saturday", "sat"),
)

WEEKDAY_OFFSET: Mapping[str, int] = MappingProxyType(
    {word: offset for offset, words in enumerate(_WEEKDAYS) for word in words}
)

WEEKDAY_OFFSET_PATTERN = _alternation(word for words in _WEEKDAYS for word in words)

# Full name first, then abbreviations (longest first); each abbreviation
# may be followed by a period.
_MONTHS = (
    ("january", "jan"),
    ("february", "feb"),
    ("march", "mar"),
    ("april", "apr"),
    ("may",),
    ("june", "jun"),
    ("july", "jul"),
    ("august", "aug"),
    ("september", "sept", "sep"),
    ("october", "oct"),
    ("november", "nov"),
    ("december", "dec"),
)


def _month_table() -> dict[str, int]:
    table: dict[str, int] = {}
    for number, (full, *abbreviations) in enumerate(_MONTHS, start=1):
        table[full] = number
        for abbreviation in abbreviations:
            table[abbreviation] = number
            table[abbreviation + "."] = number
    return table


MONTH_OFFSET: Mapping[str, int] = MappingProxyType(_month_table())

MONTH_OFFSET_PATTERN = _alternation(
    part
    for full, *abbreviations in _MONTHS
    for part in (full, *(rf"{abbreviation}\.?" for abbreviation in abbreviations))
)

_NUMBER_WORDS = (
    "one", "two", "three", "four", "five", "six",
    "seven", "eight", "nine", "ten", "eleven", "twelve",
)

INTEGER_WORDS: Mapping[str, int] = MappingProxyType(
    {word: number for number, word in enumerate(_NUMBER_WORDS, start=1)}
)

INTEGER_WORDS_PATTERN = _alternation(_NUMBER_WORDS)

_ORDINAL_NAMES = (
    "first", "second", "third", "fourth", "fifth", "sixth", "seventh",
    "eighth", "ninth", "tenth", "eleventh", "twelfth", "thirteenth",
    "fourteenth", "fifteenth", "sixteenth", "seventeenth", "eighteenth",
    "nineteenth",
)

# tens digit -> (ordinal of the round number, prefix of compounds)
_TENS = {2: ("twentieth", "twenty"), 3: ("thirtieth", "thirty")}


def _suffix(number: int) -> str:
    if 11 <= number % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def _ordinal_forms(number: int) -> tuple[list[str], str]:
    """Spelled names of ``number`` and the pattern that matches them."""
    if number < 20:
        name = _ORDINAL_NAMES[number - 1]
        return [name], name
    tens, unit = divmod(number, 10)
    round_name, prefix = _TENS[tens]
    if unit == 0:
        return [round_name], round_name
    unit_name = _ORDINAL_NAMES[unit - 1]
    return (
        [f"{prefix} {unit_name}", f"{prefix}-{unit_name}"],
        f"{prefix}[ -]{unit_name}",
    )


def _ordinal_table() -> dict[str, int]:
    table: dict[str, int] = {}
    for number in range(1, 32):
        names, _ = _ordinal_forms(number)
        for name in names:
            table[name] = number
        table[f"{number}{_suffix(number)}"] = number
    return table


ORDINAL_WORDS: Mapping[str, int] = MappingProxyType(_ordinal_table())

ORDINAL_WORDS_PATTERN = _alternation(
    part
    for number in range(1, 32)
    for part in (f"{number}{_suffix(number)}", _ordinal_forms(number)[1])
)


def ordinal_day(word: str) -> int | None:
    """Day of month named by an ordinal such as ``"third"`` or ``"21st"``."""
    return ORDINAL_WORDS.get(word.strip().lower())


def month_number(word: str) -> int | None:
    """Month number (1-12) named by ``word``, or ``None`` if it names no month."""
    return MONTH_OFFSET.get(word.strip().lower())