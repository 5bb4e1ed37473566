"""Core types shared by every rule: strategies, options, matches and the context."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Callable


class Strategy(Enum):
    """How a rule treats values that an earlier rule already set."""

    SKIP = "skip"
    MERGE = "merge"
    OVERRIDE = "override"


@dataclass(frozen=True)
class Options:
    """Preferred hours for casual times; ``None`` means the rule's own default."""

    afternoon: int | None = None
    evening: int | None = None
    morning: int | None = None
    noon: int | None = None


class RuleError(ValueError):
    """Raised when a rule matched text it cannot interpret."""


@dataclass(frozen=True)
class Match:
    """A rule's match: the span covered by its capture groups and their texts."""

    source: str
    start: int
    end: int
    captures: tuple[str, ...]

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    @property
    def index(self) -> int:
        """Character offset of the match in the source text."""
        return self.start

    @property
    def byte_index(self) -> int:
        """Offset of the match in the UTF-8 encoding of the source text."""
        return len(self.source[: self.start].encode("utf-8"))

    def __str__(self) -> str:
        return self.text


def _go_weekday(moment: datetime) -> int:
    """Weekday numbered from Sunday = 0."""
    return (moment.weekday() + 1) % 7


def _normalized(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: int,
    zone: tzinfo | None,
) -> datetime:
    """Build a datetime, letting out-of-range fields roll over into larger ones."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    base = datetime(year, month, 1, tzinfo=zone)
    return base + timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        microseconds=microsecond,
    )


def _rebuild(moment: datetime, **changes: int) -> datetime:
    parts = {
        "year": moment.year,
        "month": moment.month,
        "day": moment.day,
        "hour": moment.hour,
        "minute": moment.minute,
        "second": moment.second,
        "microsecond": moment.microsecond,
    }
    parts.update(changes)
    return _normalized(zone=moment.tzinfo, **parts)


def _shift(moment: datetime, delta: timedelta) -> datetime:
    """Add an absolute duration, independent of wall-clock changes."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        return moment + delta
    return (moment.astimezone(timezone.utc) + delta).astimezone(moment.tzinfo)


@dataclass
class Context:
    """Values collected by the rules applied to one piece of text."""

    text: str = ""
    duration: timedelta = field(default_factory=timedelta)
    year: int | None = None
    month: int | None = None
    weekday: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    location: tzinfo | None = None

    def time(self, ref: datetime | None = None) -> datetime:
        """Resolve the collected values against ``ref`` (now when omitted)."""
        moment = datetime.now() if ref is None else ref

        if self.duration:
            moment = _shift(moment, self.duration)
        if self.year is not None:
            moment = _rebuild(moment, year=self.year)
        if self.month is not None:
            moment = _rebuild(moment, month=self.month)
        if self.weekday is not None:
            diff = self.weekday - _go_weekday(moment)
            moment = _rebuild(moment, day=moment.day + diff)
        if self.day is not None:
            moment = _rebuild(moment, day=self.day)
        if self.hour is not None:
            moment = _rebuild(moment, hour=self.hour)
        if self.minute is not None:
            moment = _rebuild(moment, minute=self.minute)
        if self.second is not None:
            moment = _rebuild(moment, second=self.second)
        if self.location is not None:
            moment = moment.replace(tzinfo=self.location)
        return moment


Applier = Callable[[Match, Context, Options, datetime], bool]


@dataclass(frozen=True)
class Rule:
    """A regular expression paired with the function that interprets its matches."""

    pattern: re.Pattern[str]
    applier: Applier

    def find(self, text: str) -> Match | None:
        """Return the first match in ``text``, spanning its capture groups."""
        found = self.pattern.search(text)
        if found is None or self.pattern.groups == 0:
            return None
        spans = [found.span(group) for group in range(1, self.pattern.groups + 1)]
        present = [span for span in spans if span[0] >= 0]
        if not present:
            return None
        return Match(
            source=text,
            start=min(start for start, _ in present),
            end=max(end for _, end in present),
            captures=tuple(value or "" for value in found.groups()),
        )

    def apply(
        self, match: Match, context: Context, options: Options, ref: datetime
    ) -> bool:
        """Let the rule write what the match means into ``context``."""
        return bool(self.applier(match, context, options, ref))

    def evaluate(
        self,
        text: str,
        ref: datetime | None = None,
        options: Options | None = None,
    ) -> tuple[Match, datetime] | None:
        """Find, apply and resolve this rule alone; ``None`` if nothing applies."""
        match = self.find(text)
        if match is None:
            return None
        moment = datetime.now() if ref is None else ref
        context = Context(text=match.text)
        if not self.apply(match, context, options or Options(), moment):
            return None
        return match, context.time(moment)