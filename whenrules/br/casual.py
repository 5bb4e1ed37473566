"""Portuguese casual expressions: "hoje", "amanhã", "esta noite", "à tarde"."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from whenrules.context import Context, Match, Options, Rule, Strategy

_CASUAL_DATE = re.compile(
    r"(?:\W|^)(agora|hoje|(?:de\s|nesta\s|esta\s)noite|última(?:s|)\s*noite"
    r"|(?:amanhã|ontem)\s*|amanhã|ontem)(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_TONIGHT = re.compile(r"(nesta|esta|hoje)(\s|\s([aà]|de)\s)noite", re.ASCII)
_LAST_NIGHT = re.compile(r"(ontem|última)(\s|\s([aà]|de)\s)noite", re.ASCII)

_CASUAL_TIME = re.compile(
    r"(?:\W|^)(((?:nesta|esta|ao|à))?\s*(manhã|tarde|noite|meio[- ]dia))",
    re.IGNORECASE | re.ASCII,
)

_DAY = timedelta(hours=24)


def casual_date(strategy: Strategy) -> Rule:
    """Rule for "agora", "hoje", "esta noite", "amanhã", "ontem" and the like."""
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        lower = str(match).strip().lower()

        if _TONIGHT.search(lower):
            if (ctx.hour is None and ctx.minute is None) or overwrite:
                ctx.hour = 23
                ctx.minute = 0
        elif "hoje" in lower:
            pass
        elif "amanhã" in lower:
            if not ctx.duration or overwrite:
                ctx.duration += _DAY
        elif "ontem" in lower:
            if not ctx.duration or overwrite:
                ctx.duration -= _DAY
        elif _LAST_NIGHT.search(lower):
            if (ctx.hour is None and not ctx.duration) or overwrite:
                ctx.hour = 23
                ctx.duration -= _DAY
        return True

    return Rule(_CASUAL_DATE, apply)


def casual_time(strategy: Strategy) -> Rule:
    """Rule for "manhã", "tarde", "noite" and "meio-dia", optionally after "esta"."""
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        lower = str(match).strip().lower()

        if (ctx.hour is not None or ctx.minute is not None) and not overwrite:
            return False

        if "tarde" in lower:
            hour = options.afternoon or 15
        elif "noite" in lower:
            hour = options.evening or 18
        elif "manhã" in lower:
            hour = options.morning or 8
        elif "meio-dia" in lower or "meio dia" in lower:
            hour = options.noon or 12
        else:
            return True

        ctx.hour = hour
        ctx.minute = 0
        return True

    return Rule(_CASUAL_TIME, apply)