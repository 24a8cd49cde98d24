"""Animated and directly driven indicator LEDs on output pins."""

from __future__ import annotations

import random
import time as _time
from collections.abc import Sequence
from enum import IntFlag

LOW = 0
HIGH = 1

# Pins of the panel LEDs.
NUM_LEDS = 2
FIRST_LED = 9
LAST_LED = 10
NUM_PANEL_LEDS = 2
FIRST_PANEL_LED = 9
LAST_PANEL_LED = 10
GREEN_PANEL_LED = 9
AMBER_PANEL_LED = 10

# Brightness adjustments matching the panel LEDs to the display.
LED_INTENSITY1 = 32
LED_INTENSITY2 = 40
LED_INTENSITIES = (LED_INTENSITY1, LED_INTENSITY2)

DEFAULT_SHOW_TIME = 250
DEFAULT_BLANK_TIME = 250
DEFAULT_FLASH_TIME = 100


class LEDStyle(IntFlag):
    PLAIN = 0x00  # one LED at a time, in order
    RANDOM = 0x01  # one LED at a time, at random
    BLANKING = 0x02  # a dark period between activations
    MIRROR = 0x04  # upper half of the LEDs repeats the lower half


DEFAULT_ALL_LEDS_SHOW_TIME = 1000
DEFAULT_ALL_LEDS_BLANK_TIME = 1000
DEFAULT_PANEL_LEDS_SHOW_TIME = 1500
DEFAULT_PANEL_LEDS_BLANK_TIME = 700
DEFAULT_BUTTON_LEDS_SHOW_TIME = 800
DEFAULT_BUTTON_LEDS_BLANK_TIME = 400
BILLBOARD_PANEL_LEDS_SHOW_TIME = 750
BILLBOARD_PANEL_LEDS_BLANK_TIME = 350
BILLBOARD_PANEL_LEDS_STYLE = LEDStyle.RANDOM
TITLE_PANEL_LEDS_SHOW_TIME = 150
TITLE_PANEL_LEDS_BLANK_TIME = 0
TITLE_PANEL_LEDS_STYLE = LEDStyle.RANDOM
TITLE_PANEL_LEDS_SHOW_TIME2 = 550
TITLE_PANEL_LEDS_BLANK_TIME2 = 0
TITLE_PANEL_LEDS_STYLE2 = LEDStyle.PLAIN
ALERT_LEDS_SHOW_TIME = 250
ALERT_LEDS_BLANK_TIME = 0
ALERT_LEDS_STYLE = LEDStyle.MIRROR


class PinBank:
    """Output pins that remember their levels and every write made to them."""

    def __init__(self) -> None:
        self.levels: dict[int, int] = {}
        self.writes: list[tuple[int, int]] = []

    def digital_write(self, pin: int, value: int) -> None:
        level = HIGH if value else LOW
        self.levels[pin] = level
        self.writes.append((pin, level))

    def analog_write(self, pin: int, value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError("analog value must be within 0..255")
        self.levels[pin] = value
        self.writes.append((pin, value))

    def is_lit(self, pin: int) -> bool:
        return self.levels.get(pin, LOW) != LOW


class LEDHandler:
    """A run of LEDs on consecutive pins, animated one at a time or driven directly.

    ``intensity`` gives each LED's brightness: 0 switches it fully on,
    1..255 drives it at that analog level.
    """

    def __init__(
        self,
        first_pin: int,
        num_leds: int,
        intensity: Sequence[int],
        show_time: int = 0,
        blank_time: int = 0,
        pins: PinBank | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if num_leds < 1:
            raise ValueError("at least one LED is needed")
        if len(intensity) < num_leds:
            raise ValueError("an intensity is needed for every LED")
        self.first_pin = first_pin
        self.num_leds = num_leds
        self.intensity = tuple(intensity)
        self.show_time = show_time
        self.blank_time = blank_time
        self.pins = pins if pins is not None else PinBank()
        self._rng = rng if rng is not None else random.Random()

        self.style = LEDStyle.PLAIN
        self._frame = 0
        self._next_frame = 0
        self._num_frames = 0
        self._num_states = 0
        self.active = 0
        self._enabled: tuple[bool, ...] | None = None

        self._flash_mirror = False
        self._flash_on_time = 0
        self._flash_state = False
        self._flash_pins = 0
        self._next_flash_change = 0

    @property
    def _half(self) -> int:
        return self.num_leds // 2

    def _effective_pins(self, mirror: bool) -> int:
        return self._half if mirror else self.num_leds

    def begin(
        self,
        time: int,
        style: int,
        show_time: int = 0,
        blank_time: int = 0,
        enabled: Sequence[bool] | None = None,
    ) -> None:
        """Start an animation; ``enabled`` limits it to some LEDs unless none are enabled."""
        self.show_time = show_time or DEFAULT_SHOW_TIME
        self.blank_time = blank_time or DEFAULT_BLANK_TIME

        if enabled is not None and any(enabled[: self.num_leds]):
            self._enabled = tuple(bool(e) for e in enabled)
        else:
            self._enabled = None

        flags = int(style)
        if self.num_leds < 2:
            flags &= ~int(LEDStyle.RANDOM)
        if self.num_leds % 2:
            flags &= ~int(LEDStyle.MIRROR)
        self.style = LEDStyle(flags)

        self._frame = -1
        self._next_frame = time

        self._num_frames = self.num_leds
        if self.style & LEDStyle.BLANKING:
            self._num_frames *= 2
        if self.style & LEDStyle.MIRROR:
            self._num_frames //= 2

        self._num_states = self.num_leds
        if self.style & LEDStyle.MIRROR:
            self._num_states //= 2

        self.active = -1

    def _deactivate_led(self, virtual_pin: int, mirror: bool = False) -> None:
        self.pins.digital_write(virtual_pin + self.first_pin, LOW)
        if mirror:
            self._deactivate_led(virtual_pin + self._half)

    def _activate_led(self, virtual_pin: int, mirror: bool = False) -> None:
        level = self.intensity[virtual_pin]
        if level == 0:
            self.pins.digital_write(virtual_pin + self.first_pin, HIGH)
        else:
            self.pins.analog_write(virtual_pin + self.first_pin, level)
        if mirror:
            self._activate_led(virtual_pin + self._half)

    def _is_enabled(self, state: int) -> bool:
        return self._enabled is None or (state < len(self._enabled) and self._enabled[state])

    def _next_state(self) -> int:
        state = self.active
        while True:
            state += 1
            if state >= self._num_states:
                state = 0
            if self._is_enabled(state):
                return state

    def _random_state(self) -> int:
        # With just two LEDs a repeat is allowed.
        if self.num_leds == 2:
            return self._rng.randrange(self._num_states)
        while True:
            state = self._rng.randrange(self._num_states)
            if state != self.active:
                return state

    def step(self, time: int) -> None:
        """Advance the animation if its next frame is due."""
        if time < self._next_frame:
            return
        mirror = bool(self.style & LEDStyle.MIRROR)
        if self.active != -1:
            self._deactivate_led(self.active, mirror)

        self._frame += 1
        if self._frame >= self._num_frames:
            self._frame = 0

        blanking_period = bool(self.style & LEDStyle.BLANKING) and self._frame % 2 == 1
        if not blanking_period:
            if self.style & LEDStyle.RANDOM:
                self.active = self._random_state()
            else:
                self.active = self._next_state()
            if self._is_enabled(self.active):
                self._activate_led(self.active, mirror)

        self._next_frame = time + (self.blank_time if blanking_period else self.show_time)

    def activate_leds(self, states: Sequence[bool], mirror: bool = False) -> None:
        """Light the LEDs whose flags are set; ``states[0]`` is ignored."""
        for virtual_pin in range(self._effective_pins(mirror)):
            if states[1 + virtual_pin]:
                self._activate_led(virtual_pin, mirror)
            else:
                self._deactivate_led(virtual_pin, mirror)

    def activate_all(self, state: bool, mirror: bool = False) -> None:
        for virtual_pin in range(self._effective_pins(mirror)):
            if state:
                self._activate_led(virtual_pin, mirror)
            else:
                self._deactivate_led(virtual_pin, mirror)

    def deactivate_leds(self, mirror: bool = False) -> None:
        for virtual_pin in range(self._effective_pins(mirror)):
            self._deactivate_led(virtual_pin, mirror)

    def _write_all(self, count: int, mirror: bool, level: int) -> None:
        for virtual_pin in range(count):
            self.pins.digital_write(virtual_pin + self.first_pin, level)
            if mirror:
                self.pins.digital_write(virtual_pin + self.first_pin + self._half, level)

    def flash_leds(self, mirror: bool = False, time: int = 0) -> None:
        """Flash the LEDs at full brightness for ``time`` milliseconds, blocking."""
        effective_time = time or DEFAULT_FLASH_TIME
        count = self._effective_pins(mirror)
        self._write_all(count, mirror, HIGH)
        _time.sleep(effective_time / 1000)
        self._write_all(count, mirror, LOW)

    def begin_flash(self, mirror: bool, on_time: int = 0, now: int = 0) -> None:
        """Switch the LEDs fully on; :meth:`step_flash` switches them off when due."""
        self._flash_mirror = mirror
        self._flash_pins = self._effective_pins(mirror)
        self._write_all(self._flash_pins, mirror, HIGH)
        self._flash_on_time = on_time or DEFAULT_FLASH_TIME
        self._flash_state = True
        self._next_flash_change = now + self._flash_on_time

    def step_flash(self, time: int) -> bool:
        """Return True while the flash is still on."""
        if not self._flash_state:
            return False
        if time < self._next_flash_change:
            return True
        self._write_all(self._flash_pins, self._flash_mirror, LOW)
        self._flash_state = False
        return False


def make_panel_leds(pins: PinBank | None = None, rng: random.Random | None = None) -> LEDHandler:
    """The handler for the green and amber panel LEDs."""
    return LEDHandler(FIRST_PANEL_LED, NUM_PANEL_LEDS, LED_INTENSITIES, pins=pins, rng=rng)