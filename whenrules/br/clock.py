"""Portuguese clock times: "5pm", "11 P.M.", "5:30 pm", "19h35m"."""

from __future__ import annotations

import re
from datetime import datetime

from whenrules.context import Context, Match, Options, Rule, Strategy

_MERIDIEM = r"(A\.|P\.|A\.M\.|P\.M\.|AM?|PM?)"

_HOUR = re.compile(
    r"(?:\W|^)"
    r"(\d{1,2})"
    r"(?:\s*" + _MERIDIEM + r")"
    r"(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_HOUR_MINUTE = re.compile(
    r"(?:\W|^)"
    r"((?:[0-1]{0,1}[0-9])|(?:2[0-3]))"
    r"(?:\:|：|\-|h)"
    r"((?:[0-5][0-9]))m*"
    r"(?:\s*" + _MERIDIEM + r")?"
    r"(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)


def _twelve_hour(hour: int, meridiem: str) -> int:
    """Convert a 12-hour clock reading; 12 stays 12 in either half."""
    if meridiem[0] in "Pp" and hour < 12:
        return hour + 12
    return hour


def hour(strategy: Strategy) -> Rule:
    """Rule for an hour with a meridiem, such as "5pm" or "11 P.M."."""

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        if ctx.hour is not None and strategy is not Strategy.OVERRIDE:
            return False

        value = int(match.captures[0])
        if value > 12:
            return False

        ctx.hour = _twelve_hour(value, match.captures[1])
        ctx.minute = 0
        return True

    return Rule(_HOUR, apply)


def hour_minute(strategy: Strategy) -> Rule:
    """Rule for hour and minute, with an optional meridiem: "5:30pm", "19h35m"."""

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        already_set = ctx.hour is not None or ctx.minute is not None
        if already_set and strategy is not Strategy.OVERRIDE:
            return False

        value = int(match.captures[0])
        minutes = int(match.captures[1])
        if minutes > 59:
            return False
        ctx.minute = minutes

        meridiem = match.captures[2]
        if meridiem:
            if value > 12:
                return False
            ctx.hour = _twelve_hour(value, meridiem)
        else:
            if value > 23:
                return False
            ctx.hour = value
        return True

    return Rule(_HOUR_MINUTE, apply)