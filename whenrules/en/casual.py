"""English casual expressions: "today", "tomorrow", "last year", "this afternoon"."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from whenrules.context import Context, Match, Options, Rule, Strategy

_CASUAL_DATE = re.compile(
    r"(?:\W|^)(now|today|tonight|last\s*night|last\s*year|next\s*year"
    r"|(?:tomorrow|tmr|yesterday)\s*|tomorrow|tmr|yesterday)(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_CASUAL_TIME = re.compile(
    r"(?:\W|^)((this)?\s*(morning|afternoon|evening|noon))",
    re.IGNORECASE | re.ASCII,
)

_DAY = timedelta(hours=24)


def _start_of_year(ctx: Context, year: int, overwrite: bool) -> None:
    if ctx.year is None or overwrite:
        ctx.year = year
    if ctx.month is None or overwrite:
        ctx.month = 1
    if ctx.day is None or overwrite:
        ctx.day = 1
    if ctx.hour is None or overwrite:
        ctx.hour = 0
    if ctx.minute is None or overwrite:
        ctx.minute = 0
    if ctx.second is None or overwrite:
        ctx.second = 0


def casual_date(strategy: Strategy) -> Rule:
    """Rule for "now", "today", "tonight", "tomorrow", "yesterday" and the like."""
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        lower = str(match).strip().lower()

        if "tonight" in lower:
            if (ctx.hour is None and ctx.minute is None) or overwrite:
                ctx.hour = 23
                ctx.minute = 0
        elif "today" in lower:
            pass
        elif "last year" in lower:
            _start_of_year(ctx, ref.year - 1, overwrite)
        elif "next year" in lower:
            _start_of_year(ctx, ref.year + 1, overwrite)
        elif "tomorrow" in lower or "tmr" in lower:
            if not ctx.duration or overwrite:
                ctx.duration += _DAY
        elif "yesterday" in lower:
            if not ctx.duration or overwrite:
                ctx.duration -= _DAY
        elif "last night" in lower:
            if (ctx.hour is None and not ctx.duration) or overwrite:
                ctx.hour = 23
                ctx.duration -= _DAY
        return True

    return Rule(_CASUAL_DATE, apply)


def casual_time(strategy: Strategy) -> Rule:
    """Rule for "morning", "noon", "afternoon" and "evening", optionally after "this"."""
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        lower = str(match).strip().lower()

        if (ctx.hour is not None or ctx.minute is not None) and not overwrite:
            return False

        if "afternoon" in lower:
            hour = options.afternoon or 15
        elif "evening" in lower:
            hour = options.evening or 18
        elif "morning" in lower:
            hour = options.morning or 8
        elif "noon" in lower:
            hour = options.noon or 12
        else:
            return True

        ctx.hour = hour
        ctx.minute = 0
        return True

    return Rule(_CASUAL_TIME, apply)