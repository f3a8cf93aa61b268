# chartticks

Generates and formats tick labels for chart axes. Given a range and the space
available along an axis, it works out how many labels fit. It then formats
each label to a precision that keeps neighbouring labels distinguishable.

Two generators are included:

- `AlignedFloats` (in `chartticks.aligned_floats`) gives evenly spaced float
  ticks, first and last included. Labels are formatted to a power-of-ten
  precision.
- `Timestamps` (in `chartticks.timestamps`) gives `Timestamp` ticks aligned to
  calendar periods: years, months, days, hours, minutes, seconds, and down to
  nanoseconds. It tries the larger periods first. When the ticks of a period
  do not all fit, it keeps only every n-th one.

The package has no dependencies outside the standard library.

## Installation

```
pip install chartticks
```

## Spans

A span says how much room there is and how much a set of ticks uses. Both
span classes are in `chartticks.span`.

- `HorizontalSpan(font_width, min_chars, padding_width, avail_width, format)`:
  every label counts as wide as the widest one in the set. The widest label
  has `max(len(label), min_chars)` characters, each `font_width` wide, plus
  `padding_width` on both sides. `HorizontalSpan.identity_format()` gives a
  label function that uses the generator's own format.
- `VerticalSpan(line_height, avail_height)`: each label takes one line.

## Float ticks

```python
from chartticks.aligned_floats import AlignedFloats
from chartticks.span import HorizontalSpan

# font width 6, no minimum label width, padding 2, 250 available
span = HorizontalSpan(6.0, 0, 2.0, 250.0, HorizontalSpan.identity_format())
ticks = AlignedFloats().generate(0.0, 1.0, span)
print(ticks.labels())
# ['0.0', '0.1', '0.2', '0.3', '0.4', '0.5', '0.6', '0.7', '0.8', '0.9', '1.0']
```

`generate` returns a `GeneratedTicks` (in `chartticks.base`). It holds the
tick values in `ticks` and their format in `state`. Call `labels()` to get
the formatted strings. Two results compare equal when their ticks are equal.
`GeneratedTicks.none()` is an empty result.

When only one label fits, or the range is empty, the result is a single tick
at the midpoint. NaN values are labelled `-`.

The pieces can also be used on their own:

- `FloatFormat(scale)` formats to `-scale` decimal places when `scale` is
  negative. When `scale` is positive, it zeroes that many digits left of the
  point, always keeping the leading digit.
- `scale10(value)` gives the power of ten of `value`, and 0 for zero.
- `AlignedFloats.find_precision`, `AlignedFloats.mock_value_count` and
  `AlignedFloats.generate_count` are the steps `generate` takes.

## Timestamp ticks

```python
from datetime import datetime, timezone
from chartticks.timestamps import Period, Timestamp, Timestamps
from chartticks.span import HorizontalSpan

first = Timestamp.from_datetime(datetime(2014, 3, 1, tzinfo=timezone.utc), 0)
last = Timestamp.from_datetime(datetime(2018, 7, 5, tzinfo=timezone.utc), 0)
span = HorizontalSpan(6.0, 0, 2.0, 112.0, HorizontalSpan.identity_format())

ticks = Timestamps.from_periods(Period.all()).generate(first, last, span)
print(ticks.labels())  # ['2015', '2016', '2017', '2018']
```

A `Timestamp` is an instant with nanosecond precision, shown in a `tzinfo`
zone. You can build one in three ways:

- `Timestamp.from_datetime(dt, nanosecond)`: naive datetimes are taken as UTC.
- `Timestamp.from_unix(seconds, nanos, tz)`: from seconds and nanoseconds
  since the epoch.
- `with_nanosecond(n)`: replaces the sub-second part of an existing timestamp.

`strftime` accepts the usual directives, with a few changes:

- `%f` gives nine digits of nanoseconds.
- `%3f`, `%6f` and `%9f` give a fixed number of those digits.
- `%Z` gives the zone name. For fixed-offset zones it gives just the offset.

`Period` lists the periods and has these methods:

- `Period.all()` returns every period, largest first.
- `truncate_at(ts)` rounds down to the period in local time.
- `advance(ts)` steps forward by one period.
- `iter_aligned_range(start, stop)` yields the aligned timestamps from
  `start` up to, but not including, `stop`.

### Choosing periods and formats

Pick the periods a generator uses with `Timestamps.from_period(period)` or
`Timestamps.from_periods(periods)`. The periods are sorted and duplicates are
removed. With no periods, `generate` returns no ticks.

Choose how labels look with one of these:

- `with_short_format()`: the default, compact labels such as `HH:MM:SS`,
  `Mar` or `2015`.
- `with_long_format()`: the full date with the time zone, suited to tooltips.
- `with_strftime("%Y-%m")`: one fixed format for every label.
- `with_format(func)`: `func(period, timestamp)` is called to produce each
  label.

A tick that falls exactly on a larger period is labelled as that period. So
a tick at midnight on 1 January is shown as the year.

## Defaults per tick type

`chartticks.tick` picks generators and positions by tick type:

- `tick_label_generator(float)` returns `AlignedFloats()`.
- `tick_label_generator(Timestamp)` returns `Timestamps()` over all periods.
- `tooltip_generator(...)` is the same, except that it uses the long format
  for timestamps.
- `position(tick)` maps a tick to a number on the axis. A real number maps to
  itself as a float. A timestamp maps to its seconds since the epoch, with the
  fraction of a second included.

Any other type raises `TypeError`.

## What it does not do

The package only computes tick values and label strings. It does not draw
charts, axes or labels. It does not measure rendered text: label widths come
from character counts and the font width you pass to the span.