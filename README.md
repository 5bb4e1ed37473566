# whenrules

Rules that find dates and times written in everyday language, such as
"tomorrow", "next tuesday", "5 minutes ago", "3 de março", "28/02/2017" or
"2020-05-22T15:55:00Z". Each rule turns what it finds into a concrete
`datetime` relative to a reference moment.

Only the Python standard library is used. Python 3.10 or later is required.

## Installation

```
pip install whenrules
```

## The building blocks

Everything the rules share lives in `whenrules.context`:

- `Rule` pairs a compiled regular expression with the function that reads
  its matches.
  - `find(text)` returns the first `Match` in the text, or `None`.
  - `apply(match, context, options, ref)` writes what the match means into a
    `Context` and returns whether the rule accepted it.
  - `evaluate(text, ref=None, options=None)` does both with a fresh context
    and returns `(match, datetime)`, or `None` when the rule finds nothing or
    rejects what it found. Without `ref` the current local time is used.
- `Match` holds the searched text (`source`), the span covered by the
  rule's capture groups (`start`, `end`), and the texts of those groups
  (`captures`, empty strings for groups that did not take part). `text` is
  the matched phrase, `index` its character offset and `byte_index` its
  offset in the UTF-8 encoding of the source.
- `Context` collects a relative `duration` (a `timedelta`) and optional
  absolute fields `year`, `month`, `weekday`, `day`, `hour`, `minute`,
  `second` and `location` (a `tzinfo`). `time(ref=None)` applies them to the
  reference in that order: first the duration, then each field that is set.
  Fields out of range roll over into the next larger unit, so month 0 means
  December of the year before. A `location` replaces the result's tzinfo.
- `Strategy` has the members `SKIP`, `MERGE` and `OVERRIDE`. Rules built
  with `OVERRIDE` replace values already present in the context; with the
  other strategies they leave such values alone, and most of them then
  decline the match.
- `Options` holds the hours used for casual words: `morning`, `noon`,
  `afternoon` and `evening`. Left unset they are 8, 12, 15 and 18.
- `RuleError` (a `ValueError`) is raised when a rule cannot read the
  number in a phrase it matched.

## Example

```python
from datetime import datetime

from whenrules.context import Strategy
from whenrules.en.clock import hour

ref = datetime(2016, 1, 6)
match, moment = hour(Strategy.OVERRIDE).evaluate("at 5 pm", ref)

assert match.text == "5 pm"
assert match.index == 3
assert moment == datetime(2016, 1, 6, 17, 0)
```

Several rules may write into the same context before it is resolved:

```python
from whenrules.context import Context, Options
from whenrules.en.catalog import all_rules

text = "next tuesday at 14:00"
ctx = Context(text=text)
for rule in all_rules():
    match = rule.find(text)
    if match is not None:
        rule.apply(match, ctx, Options(), ref)
moment = ctx.time(ref)  # 2016-01-12 14:00
```

## Rule sets

Language-independent rules, in `whenrules.common`:

- `iso_date(strategy)`: `2026-01-16`, `2026-01-16 04:00:00 AM`,
  `2020-05-22T15:55:00Z`. A zone offset is accepted but ignored.
- `slash_dmy(strategy)`: day/month with an optional year, such as
  `29/2/2016` or `28/07`; a backslash works as separator too.
- `all_rules()`: both of the above, with `Strategy.OVERRIDE`.

English, in `whenrules.en`:

- `whenrules.en.casual`: `casual_date` ("now", "today", "tonight",
  "tomorrow", "tmr", "yesterday", "last night", "last year", "next year")
  and `casual_time` ("morning", "noon", "afternoon", "evening", optionally
  after "this").
- `whenrules.en.relative`: `deadline` ("within half an hour", "in 5 days",
  "in a few months") and `past_time` ("two weeks ago", "a month ago").
- `whenrules.en.calendar`: `exact_month_date` ("third of march",
  "sept. 1st", "jan. 4"), `slash_mdy` ("5/20/2026") and `weekday`
  ("next tuesday", "past friday", "this saturday").
- `whenrules.en.clock`: `hour` ("5pm", "11 P.M.") and `hour_minute`
  ("5:30 pm", "17-59").
- `whenrules.en.vocabulary`: `ordinal_day(word)` and `month_number(word)`,
  each returning `None` for an unknown word, together with the word tables
  and patterns the rules use.
- `whenrules.en.catalog`: `all_rules()`, every English rule with
  `Strategy.OVERRIDE`.

Brazilian Portuguese, in `whenrules.br`:

- `whenrules.br.casual`: `casual_date` ("agora", "hoje", "esta noite",
  "amanhã", "ontem") and `casual_time` ("esta manhã", "ao meio-dia",
  "esta tarde", "nesta noite").
- `whenrules.br.deadline`: `deadline` ("dentro de meia hora",
  "em 5 minutos", "dentro de alguns meses").
- `whenrules.br.past_time`: `past_time` ("5 minutos atrás", "há um ano",
  "há alguns dias").
- `whenrules.br.calendar`: `exact_month_date` ("3 de março",
  "vigésimo dia de dezembro", "1º set.") and `weekday` ("próxima terça",
  "sábado passado", "sábado que vem", "nesta quarta").
- `whenrules.br.clock`: `hour` ("5pm") and `hour_minute` ("19h35m",
  "5:30 pm").
- `whenrules.br.vocabulary`: `ordinal_day(word)` and `month_number(word)`,
  with the Portuguese word tables and patterns.
- `whenrules.br.catalog`: `all_rules()`, every Portuguese rule with
  `Strategy.OVERRIDE`.

## Notes on behaviour

- A weekday without a qualifier ("friday") is read as the next such day;
  the same weekday as the reference counts as a week away.
- Slash dates without a year in a month before the reference month go to
  the next year. In the reference month, a later day stays in this year, an
  earlier day goes to the next year, and the reference day itself is
  rejected.
- Hours above 12 with an am/pm marker are rejected, and times such as
  `24:10` or `12:61pm` are not matched.
- "In a month" and "a year ago" style phrases set the month or year field
  rather than a duration.

## What the package does not do

There is no parser that runs a whole rule set over a text, groups nearby
matches into one phrase and merges their results; `Rule.evaluate` works on
one rule at a time, and combining rules is left to the caller as in the
example above. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```