from datetime import datetime, timedelta, timezone

from whenrules.br.catalog import all_rules
from whenrules.context import Context, Options

REF = datetime(2016, 1, 6, tzinfo=timezone.utc)

PHRASES = [
    "sábado passado",
    "amanhã",
    "esta tarde",
    "5pm",
    "5:30pm",
    "em 5 minutos",
    "5 minutos atrás",
    "3 de março",
]


def test_catalog_has_one_rule_per_kind():
    assert len(all_rules()) == len(PHRASES)


def test_each_rule_recognises_its_phrase_in_order():
    found = [rule.find(phrase) for rule, phrase in zip(all_rules(), PHRASES)]
    assert [match.text for match in found] == PHRASES


def test_calls_return_independent_lists():
    first = all_rules()
    first.clear()
    assert len(all_rules()) == len(PHRASES)


def test_weekday_rule_comes_first():
    match, moment = all_rules()[0].evaluate("sábado passado", REF)
    assert match.text == "sábado passado"
    assert moment - REF == -timedelta(days=4)


def test_month_date_rule_comes_last():
    _, moment = all_rules()[-1].evaluate("3 de março", REF)
    assert moment - REF == timedelta(hours=1368)


def test_rules_override_earlier_values():
    rule = all_rules()[3]
    ctx = Context(hour=1)
    assert rule.apply(rule.find("5pm"), ctx, Options(), REF) is True
    assert ctx.hour == 17