"""Timed beeps and alerts on the speaker coil."""

from __future__ import annotations

import time as _time
from collections.abc import Callable

# F6, the loudest and most pleasant resonance of the speaker in the cabinet.
BEEP_FREQUENCY = 1397
BEEP_TIME = 60
BEEPS_TIMES = 4
ALERT_TIMES = 4
ALERT_DELAY = 600


class Speaker:
    """Plays square-wave beeps; ``sleep`` waits the given number of seconds."""

    def __init__(self, sleep: Callable[[float], None] | None = None) -> None:
        self.sleep = sleep if sleep is not None else _time.sleep

    @staticmethod
    def _pulse_shape(freq: int, time: int) -> tuple[int, int]:
        """Return (half-period in microseconds, number of full pulses)."""
        if freq <= 0:
            raise ValueError("frequency must be positive")
        if time < 0:
            raise ValueError("time must not be negative")
        pulse_width = (1_000_000 // freq) // 2
        if pulse_width == 0:
            raise ValueError("frequency is too high to produce")
        pulses = (time * 1000) // (pulse_width * 2)
        return pulse_width, pulses

    def _wait_us(self, microseconds: int) -> None:
        if microseconds > 0:
            self.sleep(microseconds / 1_000_000)

    def beep(self, freq: int = BEEP_FREQUENCY, time: int = BEEP_TIME) -> int:
        """Sound a tone of ``freq`` Hz for about ``time`` ms; return its length in microseconds."""
        pulse_width, pulses = self._pulse_shape(freq, time)
        duration = pulses * pulse_width * 2
        self._wait_us(duration)
        return duration

    def beep_gap(self, freq: int = BEEP_FREQUENCY, time: int = BEEP_TIME) -> int:
        """Stay silent exactly as long as the matching beep; return that length in microseconds."""
        pulse_width, pulses = self._pulse_shape(freq, time)
        duration = pulses * pulse_width * 2
        self._wait_us(duration)
        return duration

    def beeps(self, times: int = BEEPS_TIMES, freq: int = BEEP_FREQUENCY, time: int = BEEP_TIME) -> None:
        """Beep ``times`` times, each followed by an equal pause."""
        for _ in range(times):
            self.beep(freq, time)
            self.beep_gap(freq, time)

    def alert(
        self,
        times: int = ALERT_TIMES,
        gap: int = ALERT_DELAY,
        beep_times: int = BEEPS_TIMES,
        freq: int = BEEP_FREQUENCY,
        time: int = BEEP_TIME,
    ) -> None:
        """Play ``times`` groups of beeps with ``gap`` ms between groups."""
        for _ in range(times):
            self.beeps(beep_times, freq, time)
            self.sleep(gap / 1000)