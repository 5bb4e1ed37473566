"""English relative spans: "in 5 minutes", "within a week", "two days ago"."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta

from whenrules.context import Context, Match, Options, Rule, RuleError, Strategy
from whenrules.en.vocabulary import INTEGER_WORDS, INTEGER_WORDS_PATTERN

_COUNT = r"(" + INTEGER_WORDS_PATTERN + r"|[0-9]+|an?(?:\s*few)?|half(?:\s*an?)?)"
_UNIT = r"(seconds?|min(?:ute)?s?|hours?|days?|weeks?|months?|years?)"

_DEADLINE = re.compile(
    r"(?:\W|^)(within|in)\s*" + _COUNT + r"\s*" + _UNIT + r"\s*(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_PAST_TIME = re.compile(
    r"(?:\W|^)\s*" + _COUNT + r"\s*" + _UNIT + r" (ago)\s*(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_WHOLE_STEPS = (
    ("second", timedelta(seconds=1)),
    ("min", timedelta(minutes=1)),
    ("hour", timedelta(hours=1)),
    ("day", timedelta(days=1)),
    ("week", timedelta(weeks=1)),
)

_HALF_STEPS = (
    ("hour", timedelta(minutes=30)),
    ("day", timedelta(hours=12)),
    ("week", timedelta(hours=7 * 12)),
    ("month", timedelta(days=14)),
)


def _truncated_rem(value: int, divisor: int) -> int:
    """Remainder with the sign of ``value``; month 0 or below rolls into past years."""
    return int(math.fmod(value, divisor))


def _count(num_str: str) -> int | None:
    """How many units the words name; ``None`` stands for "half"."""
    if num_str in INTEGER_WORDS:
        return INTEGER_WORDS[num_str]
    if num_str in ("a", "an"):
        return 1
    if "few" in num_str:
        return 3
    if "half" in num_str:
        return None
    try:
        return int(num_str)
    except ValueError as exc:
        raise RuleError(f"convert '{num_str}' to int") from exc


def _apply_whole(
    ctx: Context, unit: str, count: int, sign: int, ref: datetime, overwrite: bool
) -> None:
    for key, step in _WHOLE_STEPS:
        if key in unit:
            if not ctx.duration or overwrite:
                ctx.duration = step * (sign * count)
            return
    if "month" in unit:
        if ctx.month is None or overwrite:
            ctx.month = _truncated_rem(ref.month + sign * count, 12)
    elif "year" in unit:
        if ctx.year is None or overwrite:
            ctx.year = ref.year + sign * count


def _apply_half(
    ctx: Context, unit: str, sign: int, ref: datetime, overwrite: bool
) -> None:
    for key, step in _HALF_STEPS:
        if key in unit:
            if not ctx.duration or overwrite:
                ctx.duration = step * sign
            return
    if "year" in unit:
        if ctx.month is None or overwrite:
            ctx.month = _truncated_rem(ref.month + sign * 6, 12)


def _span_rule(
    pattern: re.Pattern[str], count_group: int, sign: int, strategy: Strategy
) -> Rule:
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        num_str = match.captures[count_group].strip()
        count = _count(num_str)
        unit = match.captures[count_group + 1].strip()
        if count is None:
            _apply_half(ctx, unit, sign, ref, overwrite)
        else:
            _apply_whole(ctx, unit, count, sign, ref, overwrite)
        return True

    return Rule(pattern, apply)


def deadline(strategy: Strategy) -> Rule:
    """Rule for spans ahead of the reference: "in 5 minutes", "within a week"."""
    return _span_rule(_DEADLINE, 1, 1, strategy)


def past_time(strategy: Strategy) -> Rule:
    """Rule for spans before the reference: "5 minutes ago", "a few months ago"."""
    return _span_rule(_PAST_TIME, 0, -1, strategy)