import random

import pytest

from fluxtune.led_handler import (
    AMBER_PANEL_LED,
    DEFAULT_SHOW_TIME,
    GREEN_PANEL_LED,
    HIGH,
    LED_INTENSITY1,
    LED_INTENSITY2,
    LOW,
    LEDHandler,
    LEDStyle,
    PinBank,
    make_panel_leds,
)

FIRST = 2


def make(num=2, intensity=None):
    pins = PinBank()
    handler = LEDHandler(
        FIRST, num, intensity or (0,) * num, pins=pins, rng=random.Random(7)
    )
    return handler, pins


def lit(pins, num):
    return [pins.is_lit(FIRST + i) for i in range(num)]


def test_plain_style_cycles_in_order():
    handler, pins = make()
    handler.begin(0, LEDStyle.PLAIN, 100, 100)
    handler.step(0)
    assert lit(pins, 2) == [True, False]
    handler.step(50)
    assert lit(pins, 2) == [True, False]
    handler.step(100)
    assert lit(pins, 2) == [False, True]
    handler.step(200)
    assert lit(pins, 2) == [True, False]


def test_blanking_style_uses_blank_time():
    handler, pins = make()
    handler.begin(0, LEDStyle.BLANKING, 100, 40)
    handler.step(0)
    assert lit(pins, 2) == [True, False]
    handler.step(100)
    assert lit(pins, 2) == [False, False]
    handler.step(139)
    assert lit(pins, 2) == [False, False]
    handler.step(140)
    assert lit(pins, 2) == [False, True]


def test_zero_times_use_defaults():
    handler, pins = make()
    handler.begin(0, LEDStyle.PLAIN)
    handler.step(0)
    handler.step(DEFAULT_SHOW_TIME - 1)
    assert lit(pins, 2) == [True, False]
    handler.step(DEFAULT_SHOW_TIME)
    assert lit(pins, 2) == [False, True]


def test_panel_leds_use_analog_intensities():
    pins = PinBank()
    panel = make_panel_leds(pins, random.Random(1))
    panel.begin(0, LEDStyle.PLAIN, 10, 10)
    panel.step(0)
    assert pins.levels[GREEN_PANEL_LED] == LED_INTENSITY1
    panel.step(10)
    assert pins.levels[GREEN_PANEL_LED] == LOW
    assert pins.levels[AMBER_PANEL_LED] == LED_INTENSITY2


def test_mirror_lights_both_halves():
    handler, pins = make(4)
    handler.begin(0, LEDStyle.MIRROR, 10, 10)
    handler.step(0)
    assert lit(pins, 4) == [True, False, True, False]
    handler.step(10)
    assert lit(pins, 4) == [False, True, False, True]
    handler.step(20)
    assert lit(pins, 4) == [True, False, True, False]


def test_mirror_dropped_for_odd_count():
    handler, pins = make(3)
    handler.begin(0, LEDStyle.MIRROR, 10, 10)
    seen = []
    for t in (0, 10, 20):
        handler.step(t)
        seen.append(lit(pins, 3))
    assert seen == [[True, False, False], [False, True, False], [False, False, True]]


def test_random_never_repeats_with_three_leds():
    handler, pins = make(3)
    handler.begin(0, LEDStyle.RANDOM, 10, 10)
    previous = None
    for t in range(0, 500, 10):
        handler.step(t)
        states = lit(pins, 3)
        assert states.count(True) == 1
        current = states.index(True)
        assert current != previous
        previous = current


def test_random_dropped_for_single_led():
    handler, pins = make(1)
    handler.begin(0, LEDStyle.RANDOM, 10, 10)
    for t in (0, 10, 20):
        handler.step(t)
        assert lit(pins, 1) == [True]
    assert handler.style == LEDStyle.PLAIN


def test_enabled_limits_animation():
    handler, pins = make()
    handler.begin(0, LEDStyle.PLAIN, 10, 10, [False, True])
    for t in (0, 10, 20):
        handler.step(t)
        assert lit(pins, 2) == [False, True]


def test_all_disabled_is_ignored():
    handler, pins = make()
    handler.begin(0, LEDStyle.PLAIN, 10, 10, [False, False])
    handler.step(0)
    assert lit(pins, 2) == [True, False]
    handler.step(10)
    assert lit(pins, 2) == [False, True]


def test_activate_leds_skips_first_state():
    handler, pins = make()
    handler.activate_all(True)
    handler.activate_leds([False, True, False])
    assert lit(pins, 2) == [True, False]


def test_activate_all_and_deactivate_mirror():
    handler, pins = make(4)
    handler.activate_all(True)
    assert lit(pins, 4) == [True] * 4
    handler.deactivate_leds(mirror=True)
    assert lit(pins, 4) == [False] * 4


def test_flash_leds_turns_on_then_off():
    handler, pins = make(2, (30, 30))
    handler.flash_leds(time=1)
    assert [w for w in pins.writes if w[1] == HIGH] == [(FIRST, HIGH), (FIRST + 1, HIGH)]
    assert lit(pins, 2) == [False, False]


def test_non_blocking_flash():
    handler, pins = make()
    assert handler.step_flash(0) is False
    handler.begin_flash(False, 50, now=1000)
    assert lit(pins, 2) == [True, True]
    assert handler.step_flash(1049) is True
    assert lit(pins, 2) == [True, True]
    assert handler.step_flash(1050) is False
    assert lit(pins, 2) == [False, False]
    assert handler.step_flash(2000) is False


def test_invalid_construction():
    with pytest.raises(ValueError):
        LEDHandler(FIRST, 0, ())
    with pytest.raises(ValueError):
        LEDHandler(FIRST, 3, (0, 0))


def test_analog_range_checked():
    with pytest.raises(ValueError):
        PinBank().analog_write(FIRST, 256)