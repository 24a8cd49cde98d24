"""Persisted user options and best times."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from enum import IntEnum
from os import PathLike
from pathlib import Path

from .morse import DEFAULT_MORSE_WPM

SAVE_DATA_VERSION = 0

# The longest possible count of milliseconds; marks an unset best time.
DEFAULT_TIME = 0xFFFFFFFF
DEFAULT_IDLE_TIME = 5 * 60 * 1000
DEFAULT_WPM = DEFAULT_MORSE_WPM

# Display time for interstitial displays during games.
ROUND_DELAY = 750

# version, sound, vibrate, purse, best_time, clock_24h, idle_mode,
# best_time1..3, idle_time, vib_str, clock_chime, wpm, auto_play_enabled
_LAYOUT = struct.Struct("<B??LL?BLLLL?BB?")
SAVED_DATA_SIZE = _LAYOUT.size


class IdleMode(IntEnum):
    NONE = 0
    SLEEP = 1
    CLOCK = 2


class Chime(IntEnum):
    NONE = 0
    BEEP = 1
    HOUR = 2
    CODE = 3


@dataclass
class Settings:
    """User options; new instances hold the defaults restored by :meth:`reset`."""

    sound: bool = True
    vibrate: bool = True
    best_time: int = DEFAULT_TIME
    clock_24h: bool = False
    idle_mode: IdleMode = IdleMode.SLEEP
    best_time1: int = DEFAULT_TIME
    best_time2: int = DEFAULT_TIME
    best_time3: int = DEFAULT_TIME
    idle_time: int = DEFAULT_IDLE_TIME
    vib_str: bool = False
    clock_chime: Chime = Chime.NONE
    wpm: int = DEFAULT_WPM
    auto_play_enabled: bool = False

    def reset(self) -> None:
        """Restore every option to its default."""
        defaults = Settings()
        for field in fields(self):
            setattr(self, field.name, getattr(defaults, field.name))

    def to_bytes(self) -> bytes:
        try:
            return _LAYOUT.pack(
                SAVE_DATA_VERSION,
                self.sound,
                self.vibrate,
                0,
                self.best_time,
                self.clock_24h,
                int(self.idle_mode),
                self.best_time1,
                self.best_time2,
                self.best_time3,
                self.idle_time,
                self.vib_str,
                int(self.clock_chime),
                self.wpm,
                self.auto_play_enabled,
            )
        except struct.error as exc:
            raise ValueError(f"settings out of range: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> Settings:
        """Decode saved settings; raise ValueError if they are malformed or of another version."""
        if len(data) < SAVED_DATA_SIZE:
            raise ValueError("saved settings are too short")
        (
            version,
            sound,
            vibrate,
            _purse,
            best_time,
            clock_24h,
            idle_mode,
            best_time1,
            best_time2,
            best_time3,
            idle_time,
            vib_str,
            clock_chime,
            wpm,
            auto_play_enabled,
        ) = _LAYOUT.unpack_from(data)
        if version != SAVE_DATA_VERSION:
            raise ValueError(f"saved settings version {version} is not {SAVE_DATA_VERSION}")
        return cls(
            sound=sound,
            vibrate=vibrate,
            best_time=best_time,
            clock_24h=clock_24h,
            idle_mode=IdleMode(idle_mode),
            best_time1=best_time1,
            best_time2=best_time2,
            best_time3=best_time3,
            idle_time=idle_time,
            vib_str=vib_str,
            clock_chime=Chime(clock_chime),
            wpm=wpm,
            auto_play_enabled=auto_play_enabled,
        )


def save_settings(settings: Settings, path: str | PathLike[str]) -> None:
    Path(path).write_bytes(settings.to_bytes())


def load_settings(path: str | PathLike[str]) -> Settings:
    """Load settings, writing and returning defaults if none valid are stored."""
    try:
        return Settings.from_bytes(Path(path).read_bytes())
    except (FileNotFoundError, ValueError):
        settings = Settings()
        save_settings(settings, path)
        return settings