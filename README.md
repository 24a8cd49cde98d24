# fluxtune

Building blocks for a small hand-held ham radio tuner device: time-of-day
keeping from a millisecond counter, a count-up/count-down timer, Morse code
patterns and timing, persisted user settings, animated panel LEDs and
speaker beeps. Hardware is modelled by plain Python objects, so everything
can be driven from code or tests.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Modules

- `fluxtune.utils` – `time_to_seconds`, `seconds_to_time` (returns
  `(second, minute, hour)`), `format_long` (thousands separators),
  `micros_to_ms`, `random_unique`.
- `fluxtune.morse` – `morse_code("A")` gives `".-"`; `unit_time(wpm)` is
  the length of one Morse unit in milliseconds; `char_timing` and
  `text_timing` return lists of `Signal(on, duration)` tones and gaps.
- `fluxtune.settings` – the `Settings` dataclass with `IdleMode` and
  `Chime` enums, `to_bytes` / `from_bytes` for a fixed binary layout, and
  `load_settings(path)` / `save_settings(settings, path)`. Loading a
  missing or invalid file writes and returns the defaults.
- `fluxtune.clock` – `Clock` keeps the time of day from a millisecond
  function you pass in; `render_clock_string` formats it for the display in
  12- or 24-hour style; `chime` returns the sound schedule for an hour.
- `fluxtune.timer` – `render_timer_string`, `increment_timer`,
  `decrement_timer` (stops at zero and reports whether time remains).
- `fluxtune.led_handler` – `LEDHandler` animates a run of LEDs in the
  `LEDStyle` styles (plain, random, blanking, mirror) or drives them
  directly; writes go to a `PinBank`, which records every level.
  `make_panel_leds` builds the handler for the two panel LEDs.
- `fluxtune.speaker` – `Speaker` with `beep`, `beep_gap`, `beeps` and
  `alert`; it waits through a `sleep` function you can replace.

## Example

```python
from fluxtune.clock import Clock, render_clock_string
from fluxtune.utils import seconds_to_time

now = [0]
clock = Clock(millis=lambda: now[0])
clock.establish_basis(0, 30, 9)
now[0] = 61_000
second, minute, hour = seconds_to_time(clock.time_in_seconds())
print(render_clock_string(second, minute, hour))  # "   9 31 01  "
```

## What this package does not do

There is no segment display driver, no rotary encoder input, no frequency
tuning (VFO) logic, no scrolling message billboards and no command-line
program. The package provides the library pieces listed above only.