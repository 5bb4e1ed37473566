from datetime import datetime, timedelta, timezone

import pytest

from whenrules.context import Context, Options, RuleError, Strategy
from whenrules.en.relative import deadline, past_time

REF = datetime(2016, 1, 6, tzinfo=timezone.utc)
HOUR = timedelta(hours=1)
DAY = timedelta(hours=24)


def _run(rule, text):
    result = rule.evaluate(text, REF)
    assert result is not None
    match, moment = result
    return match.index, match.text, moment - REF


@pytest.mark.parametrize(
    "text, index, phrase, diff",
    [
        ("within half an hour", 0, "within half an hour", HOUR / 2),
        ("within 1 hour", 0, "within 1 hour", HOUR),
        ("in 5 minutes", 0, "in 5 minutes", timedelta(minutes=5)),
        ("In 5 minutes I will go home", 0, "In 5 minutes", timedelta(minutes=5)),
        ("we have to do something within 10 days.", 24, "within 10 days", 10 * DAY),
        ("we have to do something in five days.", 24, "in five days", 5 * DAY),
        ("we have to do something in 5 days.", 24, "in 5 days", 5 * DAY),
        ("In 5 seconds A car need to move", 0, "In 5 seconds", timedelta(seconds=5)),
        ("within two weeks", 0, "within two weeks", 14 * DAY),
        ("within a month", 0, "within a month", 31 * DAY),
        ("within a few months", 0, "within a few months", 91 * DAY),
        ("within one year", 0, "within one year", 366 * DAY),
        ("in a week", 0, "in a week", 7 * DAY),
    ],
)
def test_deadline(text, index, phrase, diff):
    assert _run(deadline(Strategy.SKIP), text) == (index, phrase, diff)


@pytest.mark.parametrize(
    "text, index, phrase, diff",
    [
        ("half an hour ago", 0, "half an hour ago", -(HOUR / 2)),
        ("1 hour ago", 0, "1 hour ago", -HOUR),
        ("5 minutes ago", 0, "5 minutes ago", -timedelta(minutes=5)),
        ("5 minutes ago I went to the zoo", 0, "5 minutes ago", -timedelta(minutes=5)),
        ("we did something 10 days ago.", 17, "10 days ago", -(10 * DAY)),
        ("we did something five days ago.", 17, "five days ago", -(5 * DAY)),
        ("we did something 5 days ago.", 17, "5 days ago", -(5 * DAY)),
        ("5 seconds ago a car was moved", 0, "5 seconds ago", -timedelta(seconds=5)),
        ("two weeks ago", 0, "two weeks ago", -(14 * DAY)),
        ("a month ago", 0, "a month ago", -(31 * DAY)),
        ("a few months ago", 0, "a few months ago", -(92 * DAY)),
        ("one year ago", 0, "one year ago", -(365 * DAY)),
        ("a week ago", 0, "a week ago", -(7 * DAY)),
    ],
)
def test_past_time(text, index, phrase, diff):
    assert _run(past_time(Strategy.SKIP), text) == (index, phrase, diff)


def test_deadline_and_past_time_mirror_each_other():
    _, _, ahead = _run(deadline(Strategy.SKIP), "in 3 hours")
    _, _, behind = _run(past_time(Strategy.SKIP), "3 hours ago")
    assert ahead == -behind


def test_deadline_rejects_unparsable_count():
    with pytest.raises(RuleError, match="convert 'A' to int"):
        deadline(Strategy.SKIP).evaluate("In A week", REF)


def test_past_time_rejects_capitalised_number_word():
    with pytest.raises(RuleError, match="convert 'Five' to int"):
        past_time(Strategy.SKIP).evaluate("Five days ago", REF)


def test_skip_keeps_existing_duration():
    rule = deadline(Strategy.SKIP)
    match = rule.find("in 5 minutes")
    ctx = Context(duration=HOUR)
    assert rule.apply(match, ctx, Options(), REF) is True
    assert ctx.duration == HOUR


def test_override_replaces_existing_duration():
    rule = deadline(Strategy.OVERRIDE)
    match = rule.find("in 5 minutes")
    ctx = Context(duration=HOUR)
    rule.apply(match, ctx, Options(), REF)
    assert ctx.duration == timedelta(minutes=5)


def test_no_span_without_ago():
    assert past_time(Strategy.SKIP).evaluate("5 minutes later", REF) is None