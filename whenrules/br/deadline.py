"""Portuguese spans ahead of the reference: "em 5 minutos", "dentro de uma semana"."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from whenrules.br.vocabulary import INTEGER_WORDS, INTEGER_WORDS_PATTERN
from whenrules.context import Context, Match, Options, Rule, RuleError, Strategy

_DEADLINE = re.compile(
    r"(?:\W|^)(dentro\sde|em)\s*"
    r"(?:(" + INTEGER_WORDS_PATTERN + r"|[0-9]+"
    r"|(?:\s*pouc[oa](?:s|)?|algu(?:mas|m|ns)?|mei[oa]?))\s*"
    r"(segundos?|min(?:uto)?s?|horas?|dias?|semanas?|mês|meses|anos?)\s*)"
    r"(?:\W|$)",
    re.IGNORECASE | re.ASCII,
)

_WHOLE_STEPS = (
    ("segundo", timedelta(seconds=1)),
    ("min", timedelta(minutes=1)),
    ("hora", timedelta(hours=1)),
    ("dia", timedelta(days=1)),
    ("semana", timedelta(weeks=1)),
)

_HALF_STEPS = (
    ("hora", timedelta(minutes=30)),
    ("dia", timedelta(hours=12)),
    ("semana", timedelta(hours=7 * 12)),
    ("mês", timedelta(days=14)),
    ("meses", timedelta(days=14)),
)


def _count(num_str: str) -> int | None:
    """How many units the words name; ``None`` stands for "meio"/"meia"."""
    if num_str in INTEGER_WORDS:
        return INTEGER_WORDS[num_str]
    if "pouc" in num_str or "algu" in num_str:
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
                ctx.duration = step * count
            return
    if "mês" in unit or "meses" in unit:
        if ctx.month is None or overwrite:
            ctx.month = (ref.month + count) % 12
    elif "ano" in unit:
        if ctx.year is None or overwrite:
            ctx.year = ref.year + count


def _apply_half(ctx: Context, unit: str, ref: datetime, overwrite: bool) -> None:
    for key, step in _HALF_STEPS:
        if key in unit:
            if not ctx.duration or overwrite:
                ctx.duration = step
            return
    if "ano" in unit:
        if ctx.month is None or overwrite:
            ctx.month = (ref.month + 6) % 12


def deadline(strategy: Strategy) -> Rule:
    """Rule for "em 5 minutos", "dentro de meia hora", "dentro de alguns meses"."""
    overwrite = strategy is Strategy.OVERRIDE

    def apply(match: Match, ctx: Context, options: Options, ref: datetime) -> bool:
        num_str = match.captures[1].strip()
        count = _count(num_str)
        unit = match.captures[2].strip()
        if count is None:
            _apply_half(ctx, unit, ref, overwrite)
        else:
            _apply_whole(ctx, unit, count, ref, overwrite)
        return True

    return Rule(_DEADLINE, apply)