"""Count-up and count-down timer arithmetic and display text."""

from __future__ import annotations

from .utils import seconds_to_time, time_to_seconds


def render_timer_string(
    seconds: int, minutes: int, hours: int, running: bool, going_up: bool = False
) -> str:
    """Text for the display: the action the button takes, then the time."""
    indicator = "STOP" if running else " RUN"
    if hours < 1:
        return f"{indicator}{minutes:4d} {seconds:02d}  "
    if running:
        return f"{indicator}{hours:4d}.{minutes:02d}.{seconds:02d}"
    return f"{indicator}{hours:4d}. {minutes:02d}  "


def increment_timer(
    second: int, minute: int, hour: int, seconds: int = 1, minutes: int = 0, hours: int = 0
) -> tuple[int, int, int]:
    """Return (second, minute, hour) moved forward by the given amount."""
    total = time_to_seconds(second, minute, hour) + time_to_seconds(seconds, minutes, hours)
    return seconds_to_time(total)


def decrement_timer(
    second: int, minute: int, hour: int, seconds: int = 1, minutes: int = 0, hours: int = 0
) -> tuple[tuple[int, int, int], bool]:
    """Count down, stopping at zero; return the new time and whether any time remains."""
    total = time_to_seconds(second, minute, hour) - time_to_seconds(seconds, minutes, hours)
    total = max(total, 0)
    return seconds_to_time(total), total > 0