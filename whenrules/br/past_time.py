"""Portuguese spans before the reference: "5 minutos atrás", "há duas semanas"."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta

from whenrules.br.vocabulary import INTEGER_WORDS, INTEGER_WORDS_PATTERN
from whenrules.context import Context, Match, Options, Rule, RuleError, Strategy

_COUNT = (
    r"(" + INTEGER_WORDS_PATTERN
    + r"|[0-9]+|umas|uma|um|uns|pouc[ao]s*|algu(?:ns|m)|mei[oa]?)"
)
_UNIT = r"(segundos?|min(?:uto)?s?|hora?s?|dia?s?|semana?s?|mês?|meses?|ano?s?)"

_PAST_TIME = re.compile(
    r"(?:\W|^)\s*" + _COUNT + r"\s*" + _UNIT + r"(\satrás)\s*(?:\W|$)"
    r"|(?:há)\s*" + _COUNT + r"\s*" + _UNIT + r"(\satrás)*\s*(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

# Captures of the "há ..." alternative start after the three of the "... atrás" one.
_HA_OFFSET = 3

_WHOLE_STEPS = (
    ("segund", timedelta(seconds=1)),
    ("min", timedelta(minutes=1)),
    ("hora", timedelta(hours=1)),
    ("dia", timedelta(days=1)),
    ("semana", timedelta(weeks=1)),
)

_HALF_STEPS = (
    ("hora", timedelta(minutes=30)),
    ("dia", timedelta(hours=12)),
    ("semanas", timedelta(hours=7 * 12)),
    ("mês", timedelta(days=14)),
    ("meses", timedelta(days=14)),
)


def _truncated_rem(value: int, divisor: int) -> int:
    """Remainder with the sign of ``value``; month 0 or below rolls into past years."""
    return int(math.fmod(value, divisor))


def _count(num_str: str) -> int | None:
    """How many units the words name; ``None`` stands for "meio"/"meia"."""
    if num_str in INTEGER_WORDS:
        return INTEGER_WORDS[num_str]
    if num_str in ("umas", "uns") or "pouc" in num_str or "algu" in num_str:
        return 3
    if "mei" in num_str:
        return None
    try:
        return int(num_str)
    except ValueError as exc:
        raise RuleError(f"convert '{num_str}' to int") from exc


def _apply_whole(
    ctx: Context, unit: str, count: int, ref: datetime, overwrite: bool
) -> None:
    for key, step in _WHOLE_STEPS:
        if key in unit:
            if not ctx.duration or overwrite:
                ctx.duration = -(step * count)
            return
    if "mês" in unit or "meses" in unit:
        if ctx.month is None or overwrite:
            ctx.month = _truncated_rem(ref.month - count, 12)
    elif "ano" in unit:
        if ctx.year is None or overwrite:
            ctx.year = ref.year - count


def _apply_half(ctx: Context, unit: str, ref: datetime, overwrite: bool) -> None:
    for key, step in _HALF_STEPS:
        if key in unit:
            if not ctx.duration or overwrite:
                ctx.duration = -step
            return
    if "ano" in unit:
        if ctx.month is None or overwrite:
            ctx.month = _truncated_rem(ref.month - 6, 12)


def past_time(strategy: Strategy) -> Rule:
    """Rule for "5 minutos atrás", "há alguns dias", "meia hora atrás"."""
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        offset = 0 if match.captures[0].strip() else _HA_OFFSET
        num_str = match.captures[offset].strip()
        count = _count(num_str)
        unit = match.captures[offset + 1].strip()
        if count is None:
            _apply_half(ctx, unit, ref, overwrite)
        else:
            _apply_whole(ctx, unit, count, ref, overwrite)
        return True

    return Rule(_PAST_TIME, apply)