"""The full set of English rules."""

from __future__ import annotations

from whenrules.context import Rule, Strategy
from whenrules.en.calendar import exact_month_date, slash_mdy, weekday
from whenrules.en.casual import casual_date, casual_time
from whenrules.en.clock import hour, hour_minute
from whenrules.en.relative import deadline, past_time


def all_rules() -> list[Rule]:
    """Every English rule, in evaluation order, each overriding earlier values."""
    return [
        weekday(Strategy.OVERRIDE),
        casual_date(Strategy.OVERRIDE),
        casual_time(Strategy.OVERRIDE),
        hour(Strategy.OVERRIDE),
        hour_minute(Strategy.OVERRIDE),
        deadline(Strategy.OVERRIDE),
        past_time(Strategy.OVERRIDE),
        slash_mdy(Strategy.OVERRIDE),
        exact_month_date(Strategy.OVERRIDE),
    ]