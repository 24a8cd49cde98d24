"""Wall clock kept from a millisecond counter, and hourly chimes."""

from __future__ import annotations

import time as _time
from collections.abc import Callable

from .morse import Signal, text_timing
from .settings import Chime, Settings
from .utils import seconds_to_time, time_to_seconds

# 12:00:00 in milliseconds.
DEFAULT_TIME_BASIS = 1000 * 12 * 60 * 60
MAX_MS_PER_DAY = 1000 * 24 * 60 * 60

CHIME_BEEP_GAP = 1000
CHIME_BEEP_TIME = 60

_ULONG_MASK = 0xFFFFFFFF


def _millis() -> int:
    return int(_time.monotonic() * 1000)


class Clock:
    """Time of day derived from a millisecond counter.

    ``clock_basis`` is the counter value when the time was last set and
    ``time_basis`` the time of day, in milliseconds, that it was set to.
    """

    def __init__(self, settings: Settings | None = None, millis: Callable[[], int] | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.millis = millis if millis is not None else _millis
        self.clock_basis = 0
        self.time_basis = DEFAULT_TIME_BASIS

    def establish_basis(self, seconds: int, minutes: int, hours: int) -> None:
        """Set the time of day as of now."""
        self.clock_basis = self.millis()
        self.time_basis = time_to_seconds(seconds, minutes, hours) * 1000

    def time_in_seconds(self) -> int:
        """Seconds since midnight, rolling the basis over once a day has passed."""
        time_in_ms = (self.millis() - self.clock_basis + self.time_basis) & _ULONG_MASK
        if time_in_ms > MAX_MS_PER_DAY:
            time_in_ms -= MAX_MS_PER_DAY
            self.clock_basis = (self.clock_basis + MAX_MS_PER_DAY) & _ULONG_MASK
        return time_in_ms // 1000

    def increment_time_basis(self, seconds: int, minutes: int, hours: int) -> tuple[int, int, int]:
        """Move the set time forward and return the new (second, minute, hour)."""
        total = self.time_basis // 1000 + time_to_seconds(seconds, minutes, hours)
        second, minute, hour = seconds_to_time(total)
        if not self.settings.clock_24h and hour == 0:
            hour = 12
        self.time_basis = time_to_seconds(second, minute, hour) * 1000
        return second, minute, hour


def render_clock_string(seconds: int, minutes: int, hours: int, clock_24h: bool = False) -> str:
    if clock_24h:
        shown = hours
    else:
        shown = hours % 12 or 12
    return f"  {shown:2d} {minutes:02d} {seconds:02d}  "


def chime(count: int, settings: Settings) -> list[Signal]:
    """Sound schedule announcing hour ``count`` in the configured chime style."""
    if not settings.clock_24h:
        count = count % 12 or 12
    style = settings.clock_chime
    if style == Chime.BEEP:
        return [Signal(True, CHIME_BEEP_TIME)]
    if style == Chime.HOUR:
        return [Signal(True, CHIME_BEEP_TIME), Signal(False, CHIME_BEEP_GAP)] * count
    if style == Chime.CODE:
        return text_timing(str(count), 0, settings.wpm)
    return []