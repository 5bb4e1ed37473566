"""Portuguese calendar phrases: month names with days, and weekdays."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from whenrules.br.vocabulary import (
    MONTH_OFFSET,
    MONTH_OFFSET_PATTERN,
    ORDINAL_WORDS,
    ORDINAL_WORDS_PATTERN,
    WEEKDAY_OFFSET,
    WEEKDAY_OFFSET_PATTERN,
)
from whenrules.context import Context, Match, Options, Rule, Strategy

# The vocabulary patterns open with "(?:"; dropping it turns each into a capture group.
_ORDINALS = ORDINAL_WORDS_PATTERN[3:]
_MONTHS = MONTH_OFFSET_PATTERN[3:]
_WEEKDAYS = WEEKDAY_OFFSET_PATTERN[3:]

_EXACT_MONTH_DATE = re.compile(
    r"(?:\W|^)"
    r"(?:(?:(\d{1,2})|(" + _ORDINALS + r")(?:\sdia\sde\s|\sde\s|\s))*"
    r"(" + _MONTHS + r"(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_WEEKDAY = re.compile(
    r"(?:\W|^)"
    r"(?:n[ao]\s*?)?"
    r"(?:(nest[ae]|ess[ae]|últim[a|o]|próxim[ao])\s*)?"
    r"(" + _WEEKDAYS + r"(?:\s*(passad[ao]|que\svem))?"
    r"(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)


def _weekday_number(moment: datetime) -> int:
    """Weekday numbered from Sunday = 0."""
    return (moment.weekday() + 1) % 7


def _days_until(diff: int) -> timedelta:
    """Days to the next occurrence; the same weekday counts as a week away."""
    return timedelta(days=diff if diff > 0 else 7 + diff)


def exact_month_date(strategy: Strategy) -> Rule:
    """Rule for a month name, optionally after a numeric or ordinal day."""

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        num, ordinal, mon = (part.strip().lower() for part in match.captures)

        month = MONTH_OFFSET.get(mon)
        if month is None:
            return False
        ctx.month = month

        if ordinal:
            day = ORDINAL_WORDS.get(ordinal)
            if day is None:
                return False
            ctx.day = day
        if num:
            ctx.day = int(num)
        return True

    return Rule(_EXACT_MONTH_DATE, apply)


def weekday(strategy: Strategy) -> Rule:
    """Rule for weekday names with "nesta", "próxima", "passada", "que vem" and the like."""
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        day = match.captures[1].strip().lower()
        norm = (match.captures[0] + match.captures[2]).strip().lower() or "próxim[ao]"

        target = WEEKDAY_OFFSET.get(day)
        if target is None:
            return False
        if ctx.duration and not overwrite:
            return False

        current = _weekday_number(ref)
        if "passad" in norm or "últim" in norm:
            ctx.duration = -_days_until(current - target)
        elif "próxim" in norm or "que vem" in norm:
            ctx.duration = _days_until(target - current)
        elif "nest" in norm or "ess" in norm:
            if current != target:
                ctx.duration = timedelta(days=target - current)
        return True

    return Rule(_WEEKDAY, apply)