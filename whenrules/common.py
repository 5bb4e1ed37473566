"""Language-independent rules: ISO dates and day/month/year written with slashes."""

from __future__ import annotations

import re
from datetime import datetime

from whenrules.context import Context, Match, Options, Rule, Strategy

_ISO_RULE = re.compile(
    r"(?:\W|^)"
    r"((?:1|2)[0-9]{3}\-[0-1][0-9]\-[0-3][0-9]"
    r"(?:[Tt\s]+[0-9]{1,2}\:[0-5][0-9](?:\:[0-5][0-9])?"
    r"(?:\s*(?:A\.|P\.|A\.M\.|P\.M\.|AM?|PM?))?"
    r"(?:[\+\-][0-9]{1,2}\:[0-9]{2}|Z)?)?"
    r")(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_ISO_FULL = re.compile(
    r"((?:1|2)[0-9]{3}\-[0-1][0-9]\-[0-3][0-9]"
    r"(?:[Tt\s]+[0-9]{1,2}\:[0-5][0-9](?:\:[0-5][0-9])?"
    r"(?:\s*(?:A\.|P\.|A\.M\.|P\.M\.|AM?|PM?))?"
    r"(?:[\+\-][0-9]{1,2}\:[0-9]{2}|Z)?)?)",
    re.ASCII,
)

_ISO_PARTS = (
    r"((?:1|2)[0-9]{3})\-([0-1][0-9])\-([0-3][0-9])"
    r"(?:[Tt\s]+([0-9]{1,2})\:([0-5][0-9])(?:\:([0-5][0-9]))?"
    r"(?:\s*(AM|PM|A\.M\.|P\.M\.|A\.|P\.))?"
    r"(?:([\+\-])([0-9]{2})\:([0-9]{2})|Z)?)?"
)
_ISO_ANCHORED = re.compile("^" + _ISO_PARTS + "$", re.ASCII)
_ISO_LOOSE = re.compile(_ISO_PARTS, re.ASCII)

_FALLBACK_LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %I:%M:%S %p",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %I:%M %p",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)

_SLASH_DMY = re.compile(
    r"(?:\W|^)"
    r"(0{0,1}[1-9]|1[0-9]|2[0-9]|3[01])"
    r"[/\\]"
    r"(0{0,1}[1-9]|1[0-2])"
    r"(?:[/\\]"
    r"((?:1|2)[0-9]{3})\s*)?"
    r"(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_MONTH_DAYS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _days_in_month(year: int, month: int) -> int:
    # Naive leap-year check, kept deliberately simple.
    if (year - 2000) % 4 == 0 and month == 2:
        return 29
    return _MONTH_DAYS[month]


def _components(text: str) -> tuple[int, int, int, int, int, int] | None:
    parts = _ISO_ANCHORED.match(text) or _ISO_LOOSE.search(text)
    if parts is not None:
        year, month, day = (int(parts.group(i)) for i in (1, 2, 3))
        hour, minute, second = (int(parts.group(i) or 0) for i in (4, 5, 6))
        meridiem = parts.group(7)
        if meridiem:
            if meridiem[0] in "Pp":
                if hour < 12:
                    hour += 12
            elif hour == 12:
                hour = 0
        return year, month, day, hour, minute, second

    for layout in _FALLBACK_LAYOUTS:
        try:
            parsed = datetime.strptime(text, layout)
        except ValueError:
            continue
        return (
            parsed.year,
            parsed.month,
            parsed.day,
            parsed.hour,
            parsed.minute,
            parsed.second,
        )
    return None


def iso_date(strategy: Strategy) -> Rule:
    """Rule for ISO dates with optional time, meridiem and zone (the zone is ignored)."""

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        already_set = any(
            value is not None
            for value in (ctx.year, ctx.month, ctx.day, ctx.hour, ctx.minute)
        )
        if already_set and strategy is not Strategy.OVERRIDE:
            return False

        text = match.text
        full = _ISO_FULL.search(ctx.text)
        if full is not None:
            text = full.group(1)
        parts = _components(text.strip())
        if parts is None:
            return False

        (
            ctx.year,
            ctx.month,
            ctx.day,
            ctx.hour,
            ctx.minute,
            ctx.second,
        ) = parts
        return True

    return Rule(_ISO_RULE, apply)


def slash_dmy(strategy: Strategy) -> Rule:
    """Rule for DD/MM[/YYYY]; a backslash works as the separator too."""

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        already_set = any(value is not None for value in (ctx.day, ctx.month, ctx.year))
        if already_set and strategy is not Strategy.OVERRIDE:
            return False

        day = int(match.captures[0])
        month = int(match.captures[1])
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

    return Rule(_SLASH_DMY, apply)


def all_rules() -> list[Rule]:
    """Every common rule, each overriding values set before it."""
    return [iso_date(Strategy.OVERRIDE), slash_dmy(Strategy.OVERRIDE)]