"""Time conversions, number formatting and random helpers."""

from __future__ import annotations

import random

# Marks a best time that has never been set.
NO_TIME = 0xFFFFFFFF


def micros_to_ms(micros: int) -> str:
    """Format a microsecond count as milliseconds."""
    if micros == NO_TIME:
        return "0.0000"
    ms_dec, ms_frac = divmod(micros, 1000)
    return f"{ms_dec}.{ms_frac:04d} ms"


def time_to_seconds(second: int, minute: int, hour: int) -> int:
    return second + 60 * minute + 3600 * hour


def seconds_to_time(seconds: int) -> tuple[int, int, int]:
    """Split a second count into (second, minute, hour)."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    hour, rest = divmod(seconds, 3600)
    minute, second = divmod(rest, 60)
    return second, minute, hour


def format_long(num: int, basis: int = 1) -> str:
    """Format ``num`` with thousands separators, scaling the lowest group by ``basis``."""
    if basis <= 0:
        raise ValueError("basis must be positive")
    sign = -1 if num < 0 else 1
    num = abs(num)

    basis_factor = 1000 // basis
    units = num % basis_factor
    num = (num - units) // basis_factor
    units *= basis

    thous = num % 1000
    mills = (num % 1_000_000 - thous) // 1000
    bills = (num % 1_000_000_000 - mills) // 1_000_000

    if bills > 0:
        return f"{bills * sign},{mills:03d},{thous:03d},{units:03d}"
    if mills > 0:
        return f"{mills * sign},{thous:03d},{units:03d}"
    if thous > 0:
        return f"{thous * sign},{units:03d}"
    return f"{units * sign}"


def random_unique(count: int, max_value: int, rng: random.Random | None = None) -> list[int]:
    """Draw ``count`` distinct values from ``range(max_value)``."""
    if count > max_value:
        raise ValueError("cannot draw more unique values than the range holds")
    rng = rng if rng is not None else random.Random()
    result: list[int] = []
    while len(result) < count:
        value = rng.randrange(max_value)
        if value not in result:
            result.append(value)
    return result