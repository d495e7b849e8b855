# chartkit

Small, dependency-free building blocks for drawing charts in Python.

## What is in it

- `chartkit.seq`: `Seq` wraps any sized sequence of numbers (or any object
  with `len()` and `get_value(index)`) and adds `values`, `each`, `map`,
  `fold_left`, `fold_right`, `min`, `max`, `min_max`, `sort`, `reverse`,
  `median`, `sum`, `average`, `variance`, `std_dev`, `percentile` and
  `normalize`. `value_sequence(*values)` builds one. `RandomSequence`,
  `random_values` and `random_values_with_max` produce random values.
- `chartkit.value_buffer`: `ValueBuffer`, a FIFO queue of floats with an
  explicit capacity that grows when full (`enqueue`, `dequeue`, `peek`,
  `peek_back`, `set_capacity`, `trim_excess`, `to_list`, `each`). Reading
  from an empty buffer returns `0.0`.
- `chartkit.timeutil`: `Times`, `time_millis`, `diff_hours`, `time_min`,
  `time_max`, `time_min_max`, `time_to_float64`, `time_from_float64`,
  `days`, `hours` and `hours_filled`. Times are turned into float
  nanoseconds since the Unix epoch; naive datetimes are treated as local time.
- `chartkit.value_formatter`: label formatters such as
  `float_value_formatter`, `float_value_formatter_with_format`,
  `int_value_formatter`, `percent_value_formatter`,
  `exponential_value_formatter`, `k_value_formatter` and the time
  formatters (`time_value_formatter`, `time_hour_value_formatter`,
  `time_minute_value_formatter`, `time_date_value_formatter`,
  `time_value_formatter_with_format`). Values they cannot format give `""`.
- `chartkit.value`: `Value`, `Values` and `Value2`, the labelled values
  used by bar charts. `Values.normalize()` keeps only positive values and
  turns each into its share of the total, rounded down to four places.
- `chartkit.series`: `SMASeries`, a simple moving average over an inner
  series, and `TimeSeries`. Their `validate()` raises `SeriesError` when the
  series is not set up.
- `chartkit.color`: `Color` (RGBA, all-zero meaning "unset") and the
  `viridis(v, vmin, vmax)` colour map.
- `chartkit.text`: the `TextHorizontalAlign`, `TextVerticalAlign` and
  `TextWrap` enums, plus `wrap_fit`, `wrap_fit_word`, `wrap_fit_rune`,
  `trim` and `measure_lines`. The wrapping functions take a `measure`
  callable that returns `(width, height)` for a piece of text.
- `chartkit.style`: `Style`, whose `get_*` methods fall back to a given
  default when an option is unset, and `inherit_from` merges two styles.
  `hidden()` and `shown()` return ready-made styles.
- `chartkit.tick`: `Tick` and `Ticks`.
- `chartkit.svg`: `SvgCanvas` and `SvgRenderer`, which write SVG documents
  with optional embedded CSS and CSP nonce.

## Install

```
pip install .
```

## Examples

```python
from chartkit.seq import value_sequence

s = value_sequence(1, 2, 3, 4, 5)
s.average()             # 3.0
s.variance()            # 2.0
s.normalize().values()  # [0.0, 0.25, 0.5, 0.75, 1.0]
```

```python
from chartkit.stringutil import split_csv

split_csv('foo, bar, "baz,buzz"')  # ['foo', 'bar', 'baz,buzz']
```

```python
from chartkit.value_buffer import ValueBuffer

buf = ValueBuffer(1, 2, 3)
buf.enqueue(4)
buf.dequeue()   # 1.0
buf.to_list()   # [2.0, 3.0, 4.0]
```

```python
import io
from chartkit.svg import SvgRenderer

r = SvgRenderer(100, 100)
r.move_to(0, 0)
r.line_to(100, 100)
r.line_to(0, 100)
r.close()
r.fill_stroke()
out = io.StringIO()
r.save(out)
out.getvalue()  # '<svg ...>...</svg>'
```

## What it does not do

chartkit is a set of parts, not a finished charting tool. It has no
ready-made chart types that lay out axes, ranges and legends, no PNG or
other raster output, and no font loading: text size is never measured
from a real font, so wrapping needs a `measure` function you supply.
There is no command-line program.

## Tests

```
pip install .[test]
pytest
```