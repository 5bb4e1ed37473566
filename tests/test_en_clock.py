from datetime import datetime, timedelta, timezone

import pytest

from whenrules.context import Context, Options, Strategy
from whenrules.en.clock import hour, hour_minute

NULL = datetime(2016, 1, 6, tzinfo=timezone.utc)


def _check(rule, text, index, phrase, diff):
    result = rule.evaluate(text, NULL)
    assert result is not None
    match, moment = result
    assert match.index == index
    assert match.text == phrase
    assert moment - NULL == diff


@pytest.mark.parametrize(
    "text, index, phrase, hours",
    [
        ("5pm", 0, "5pm", 17),
        ("at 5 pm", 3, "5 pm", 17),
        ("at 5 P.", 3, "5 P.", 17),
        ("at 12 P.", 3, "12 P.", 12),
        ("at 1 P.", 3, "1 P.", 13),
        ("at 5 am", 3, "5 am", 5),
        ("at 5A", 3, "5A", 5),
        ("at 5A.", 3, "5A.", 5),
        ("5A.", 0, "5A.", 5),
        ("11 P.M.", 0, "11 P.M.", 23),
    ],
)
def test_hour(text, index, phrase, hours):
    _check(hour(Strategy.OVERRIDE), text, index, phrase, timedelta(hours=hours))


HOUR_MINUTE_OK = [
    ("5:30pm", 0, "5:30pm", timedelta(hours=17, minutes=30)),
    ("at 5:30 pm", 3, "5:30 pm", timedelta(hours=17, minutes=30)),
    ("at 5:59 pm", 3, "5:59 pm", timedelta(hours=17, minutes=59)),
    ("at 5-59 pm", 3, "5-59 pm", timedelta(hours=17, minutes=59)),
    ("at 17-59 pam", 3, "17-59", timedelta(hours=17, minutes=59)),
    ("up to 11:10 pm", 6, "11:10 pm", timedelta(hours=23, minutes=10)),
]

HOUR_MINUTE_NIL = ["28:30pm", "12:61pm", "24:10"]


@pytest.mark.parametrize("text, index, phrase, diff", HOUR_MINUTE_OK)
def test_hour_minute(text, index, phrase, diff):
    _check(hour_minute(Strategy.OVERRIDE), text, index, phrase, diff)


@pytest.mark.parametrize("text", HOUR_MINUTE_NIL)
def test_hour_minute_rejects(text):
    assert hour_minute(Strategy.OVERRIDE).evaluate(text, NULL) is None


@pytest.mark.parametrize("text", HOUR_MINUTE_NIL)
def test_hour_rejects_invalid_clock_readings(text):
    assert hour(Strategy.OVERRIDE).evaluate(text, NULL) is None


def test_hour_resets_minutes_and_seconds():
    ref = datetime(2016, 1, 6, 9, 45, 30, tzinfo=timezone.utc)
    result = hour(Strategy.OVERRIDE).evaluate("5pm", ref)
    assert result is not None
    assert result[1] == datetime(2016, 1, 6, 17, 0, 0, tzinfo=timezone.utc)


def test_hour_minute_truncates_seconds():
    ref = datetime(2016, 1, 6, 9, 45, 30, tzinfo=timezone.utc)
    result = hour_minute(Strategy.OVERRIDE).evaluate("5:30pm", ref)
    assert result is not None
    assert result[1] == datetime(2016, 1, 6, 17, 30, 0, tzinfo=timezone.utc)


def test_hour_minute_full_width_colon():
    _check(
        hour_minute(Strategy.OVERRIDE),
        "5：30pm",
        0,
        "5：30pm",
        timedelta(hours=17, minutes=30),
    )


def test_hour_over_twelve_with_meridiem_is_rejected():
    assert hour(Strategy.OVERRIDE).evaluate("13pm", NULL) is None


def test_hour_skip_keeps_existing_hour():
    rule = hour(Strategy.SKIP)
    match = rule.find("5pm")
    assert match is not None
    ctx = Context(hour=3)
    assert rule.apply(match, ctx, Options(), NULL) is False
    assert ctx.hour == 3


def test_hour_minute_skip_keeps_existing_minute():
    rule = hour_minute(Strategy.SKIP)
    match = rule.find("5:30pm")
    assert match is not None
    ctx = Context(minute=7)
    assert rule.apply(match, ctx, Options(), NULL) is False
    assert ctx.minute == 7


def test_hour_override_replaces_existing_hour():
    rule = hour(Strategy.OVERRIDE)
    match = rule.find("5pm")
    assert match is not None
    ctx = Context(hour=3)
    assert rule.apply(match, ctx, Options(), NULL) is True
    assert ctx.hour == 17