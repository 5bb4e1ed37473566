"""Portuguese words for weekdays, months, small numbers and ordinal days."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping


def _alternation(parts: Iterable[str]) -> str:
    return "(?:" + "|".join(parts) + ")"


_WEEKDAYS = (
    ("domingo", "dom"),
    ("segunda-feira", "segunda", "seg"),
    ("terça-feira", "terça", "ter"),
    ("quarta-feira", "quarta", "qua"),
    ("quinta-feira", "quinta", "qui"),
    ("sexta-feira", "sexta", "sex"),
    ("sábado", "sab"),
)

WEEKDAY_OFFSET: Mapping[str, int] = MappingProxyType(
    {word: offset for offset, words in enumerate(_WEEKDAYS) for word in words}
)

WEEKDAY_OFFSET_PATTERN = _alternation(word for words in _WEEKDAYS for word in words)

_MONTHS = (
    ("janeiro", "jan"),
    ("fevereiro", "fev"),
    ("março", "mar"),
    ("abril", "abr"),
    ("maio", "mai"),
    ("junho", "jun"),
    ("julho", "jul"),
    ("agosto", "ago"),
    ("setembro", "set"),
    ("outubro", "out"),
    ("novembro", "nov"),
    ("dezembro", "dez"),
)


def _month_table() -> dict[str, int]:
    table: dict[str, int] = {}
    for number, (full, abbreviation) in enumerate(_MONTHS, start=1):
        table[full] = number
        table[abbreviation + "."] = number
        table[abbreviation] = number
    return table


MONTH_OFFSET: Mapping[str, int] = MappingProxyType(_month_table())

MONTH_OFFSET_PATTERN = _alternation(
    part
    for full, abbreviation in _MONTHS
    for part in (full, rf"{abbreviation}\.?", abbreviation)
)

_NUMBER_WORDS = (
    ("uma", "um"),
    ("duas", "dois"),
    ("três",),
    ("quatro",),
    ("cinco",),
    ("seis",),
    ("sete",),
    ("oito",),
    ("nove",),
    ("dez",),
    ("onze",),
    ("doze",),
)

INTEGER_WORDS: Mapping[str, int] = MappingProxyType(
    {
        word: number
        for number, words in enumerate(_NUMBER_WORDS, start=1)
        for word in words
    }
)

INTEGER_WORDS_PATTERN = _alternation(
    word for words in _NUMBER_WORDS for word in words
)

# Stems take "a" for the feminine and "o" for the masculine form.
_UNIT_STEMS = (
    "primeir", "segund", "terceir", "quart", "quint",
    "sext", "sétim", "oitav", "non",
)
_TEN_STEMS = {1: "décim", 2: "vigésim", 3: "trigésim"}


def _genders(stem: str) -> tuple[str, str]:
    return stem + "a", stem + "o"


def _ordinal_words() -> dict[str, int]:
    words: dict[str, int] = {}
    for number in range(1, 32):
        tens, unit = divmod(number, 10)
        if unit == 0:
            names: list[str] = list(_genders(_TEN_STEMS[tens]))
        elif tens == 0:
            names = list(_genders(_UNIT_STEMS[unit - 1]))
        else:
            names = [
                f"{ten}{separator}{one}"
                for ten, one in zip(
                    _genders(_TEN_STEMS[tens]), _genders(_UNIT_STEMS[unit - 1])
                )
                for separator in "- "
            ]
        for name in names:
            words[name] = number
        words[f"{number}ª"] = number
        words[f"{number}º"] = number
    # The first day is only known in its masculine form.
    del words["primeira"], words["1ª"]
    return words


ORDINAL_WORDS: Mapping[str, int] = MappingProxyType(_ordinal_words())

# The spelled twelfth is matched only with a doubled vowel ("décimaa", "décimao");
# that is how the recogniser has always behaved, so it is kept.
_ORDINAL_PATTERN_EXCEPTIONS = {12: "décima[ao][- ]segund[ao]"}


def _ordinal_word_pattern(number: int) -> str:
    if number in _ORDINAL_PATTERN_EXCEPTIONS:
        return _ORDINAL_PATTERN_EXCEPTIONS[number]
    tens, unit = divmod(number, 10)
    if unit == 0:
        return f"{_TEN_STEMS[tens]}[ao]"
    if tens == 0:
        return f"{_UNIT_STEMS[unit - 1]}[ao]"
    return f"{_TEN_STEMS[tens]}[ao][- ]{_UNIT_STEMS[unit - 1]}[ao]"


ORDINAL_WORDS_PATTERN = _alternation(
    part
    for number in range(1, 32)
    for part in (_ordinal_word_pattern(number), f"{number}[ªº]")
)


def ordinal_day(word: str) -> int | None:
    """Day of month named by an ordinal such as ``"terceiro"`` or ``"21º"``."""
    return ORDINAL_WORDS.get(word.strip().lower())


def month_number(word: str) -> int | None:
    """Month number (1-12) named by ``word``, or ``None`` if it names no month."""
    return MONTH_OFFSET.get(word.strip().lower())