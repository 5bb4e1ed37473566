"""English calendar phrases: month names with days, M/D/Y dates and weekdays."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from whenrules.context import Context, Match, Options, Rule, Strategy
from whenrules.en.vocabulary import (
    MONTH_OFFSET,
    MONTH_OFFSET_PATTERN,
    ORDINAL_WORDS,
    ORDINAL_WORDS_PATTERN,
    WEEKDAY_OFFSET,
    WEEKDAY_OFFSET_PATTERN,
)

# The vocabulary patterns open with "(?:"; dropping it turns each into a capture group.
_ORDINALS = ORDINAL_WORDS_PATTERN[3:]
_MONTHS = MONTH_OFFSET_PATTERN[3:]
_WEEKDAYS = WEEKDAY_OFFSET_PATTERN[3:]

_EXACT_MONTH_DATE = re.compile(
    "".join(
        (
            r"(?:\W|^)",
            r"(?:(?:(",
            _ORDINALS,
            r"(?:\s+of)?|([0-9]+))\s*)?",
            r"(",
            _MONTHS,
            r"(?:\s*(?:(",
            _ORDINALS,
            r"|([0-9]+)))?",
            r"(?:\W|$)",
        )
    ),
    re.IGNORECASE | re.ASCII,
)

_SLASH_MDY = re.compile(
    r"(?:\W|^)"
    r"(0{0,1}[1-9]|1[0-2])"
    r"[/\\]"
    r"(0{0,1}[1-9]|1[0-9]|2[0-9]|3[01])"
    r"(?:[/\\]"
    r"((?:1|2)[0-9]{3})\s*)?"
    r"(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_WEEKDAY = re.compile(
    "".join(
        (
            r"(?:\W|^)",
            r"(?:on\s*?)?",
            r"(?:(this|last|past|next)\s*)?",
            r"(",
            _WEEKDAYS,
            r"(?:\s*(this|last|past|next)\s*week)?",
            r"(?:\W|$)",
        )
    ),
    re.IGNORECASE | re.ASCII,
)

_MONTH_DAYS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_INT8_MAX = 127


def _days_in_month(year: int, month: int) -> int:
    # Naive leap-year check, kept deliberately simple.
    if (year - 2000) % 4 == 0 and month == 2:
        return 29
    return _MONTH_DAYS[month]


def _weekday_number(moment: datetime) -> int:
    """Weekday numbered from Sunday = 0."""
    return (moment.weekday() + 1) % 7


def _small_number(text: str) -> int | None:
    """The day written in digits, or ``None`` if it does not fit a signed byte."""
    value = int(text)
    return value if value <= _INT8_MAX else None


def exact_month_date(strategy: Strategy) -> Rule:
    """Rule for a month name with an optional ordinal or numeric day on either side."""

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        ord1, num1, mon, ord2, num2 = (part.strip().lower() for part in match.captures)

        month = MONTH_OFFSET.get(mon)
        if month is None:
            return False
        ctx.month = month

        for ordinal, number in ((ord1, num1), (ord2, num2)):
            if ordinal:
                day = ORDINAL_WORDS.get(ordinal)
                if day is None:
                    return False
                ctx.day = day
            if number:
                day = _small_number(number)
                if day is None:
                    return False
                ctx.day = day
        return True

    return Rule(_EXACT_MONTH_DATE, apply)


def slash_mdy(strategy: Strategy) -> Rule:
    """Rule for MM/DD[/YYYY]; a backslash works as the separator too."""

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        already_set = any(value is not None for value in (ctx.day, ctx.month, ctx.year))
        if already_set and strategy is not Strategy.OVERRIDE:
            return False

        month = int(match.captures[0])
        day = int(match.captures[1])
        year = int(match.captures[2]) if match.captures[2] else None

        if day == 0:
            return False

        if year is None:
            if ref.month > month:
                year = ref.year + 1
            elif ref.month == month:
                if _days_in_month(ref.year, month) < day:
                    return False
                if day > ref.day:
                    year = ref.year
                elif day < ref.day:
                    year = ref.year + 1
                else:
                    return False
            else:
                return True

        if _days_in_month(year, month) < day:
            return False
        ctx.year, ctx.month, ctx.day = year, month, day
        return True

    return Rule(_SLASH_MDY, apply)


def _days_back(diff: int) -> timedelta:
    if diff == 0:
        return -timedelta(days=7)
    return -timedelta(days=7 + diff)


def _days_ahead(diff: int) -> timedelta:
    if diff > 0:
        return timedelta(days=diff)
    if diff < 0:
        return timedelta(days=7 + diff)
    return timedelta(days=7)


def weekday(strategy: Strategy) -> Rule:
    """Rule for weekday names qualified by "this", "next", "last" or "past"."""
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        day = match.captures[1].strip().lower()
        norm = (match.captures[0] + match.captures[2]).strip().lower() or "next"

        target = WEEKDAY_OFFSET.get(day)
        if target is None:
            return False
        if ctx.duration and not overwrite:
            return False

        current = _weekday_number(ref)
        if "past" in norm or "last" in norm:
            ctx.duration = _days_back(current - target)
        elif "next" in norm:
            ctx.duration = _days_ahead(target - current)
        elif "this" in norm:
            if current < target:
                ctx.duration = timedelta(days=target - current)
            elif current > target:
                ctx.duration = -timedelta(days=current - target)
        return True

    return Rule(_WEEKDAY, apply)