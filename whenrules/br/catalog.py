"""The full set of Portuguese rules."""

from __future__ import annotations

from whenrules.br.calendar import exact_month_date, weekday
from whenrules.br.casual import casual_date, casual_time
from whenrules.br.clock import hour, hour_minute
from whenrules.br.deadline import deadline
from whenrules.br.past_time import past_time
from whenrules.context import Rule, Strategy


def all_rules() -> list[Rule]:
    """Every Portuguese rule, in evaluation order, each overriding earlier values."""
    return [
        weekday(Strategy.OVERRIDE),
        casual_date(Strategy.OVERRIDE),
        casual_time(Strategy.OVERRIDE),
        hour(Strategy.OVERRIDE),
        hour_minute(Strategy.OVERRIDE),
        deadline(Strategy.OVERRIDE),
        past_time(Strategy.OVERRIDE),
        exact_month_date(Strategy.OVERRIDE),
    ]