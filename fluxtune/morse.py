"""Morse code patterns and the timing of sending them."""

from __future__ import annotations

from typing import NamedTuple

DOT_FACTOR = 1
DASH_FACTOR = 3
ELEMENT_SPACE_FACTOR = 1
CHAR_SPACE_FACTOR = 3
WORD_SPACE_FACTOR = 7

DEFAULT_MORSE_WPM = 13
DEFAULT_MORSE_FREQ = 700

# Each byte holds the elements after a start bit, read from the low end:
# 1 is a dash, 0 is a dot. Letters A-Z come first, then digits 0-9.
_MORSE_DATA = bytes(
    (
        0b10100000, 0b00011000, 0b01011000, 0b00110000, 0b01000000,  # A-E
        0b01001000, 0b01110000, 0b00001000, 0b00100000, 0b11101000,  # F-J
        0b10110000, 0b00101000, 0b11100000, 0b01100000, 0b11110000,  # K-O
        0b01101000, 0b10111000, 0b01010000, 0b00010000, 0b11000000,  # P-T
        0b10010000, 0b10001000, 0b11010000, 0b10011000, 0b11011000,  # U-Y
        0b00111000,                                                  # Z
        0b11111100, 0b11110100, 0b11100100, 0b11000100, 0b10000100,  # 0-4
        0b00000100, 0b00001100, 0b00011100, 0b00111100, 0b01111100,  # 5-9
    )
)
_DIGIT_OFFSET = 26


class Signal(NamedTuple):
    """A stretch of tone (``on``) or silence lasting ``duration`` milliseconds."""

    on: bool
    duration: int


def _decode(byte: int) -> str:
    elements: list[str] = []
    started = False
    for _ in range(7):
        byte >>= 1
        bit = byte & 1
        if not started:
            started = bit == 1
            continue
        elements.append("-" if bit else ".")
    return "".join(elements)


def _index(c: str) -> int | None:
    if "0" <= c <= "9":
        return ord(c) - ord("0") + _DIGIT_OFFSET
    if "A" <= c <= "Z":
        return ord(c) - ord("A")
    if "a" <= c <= "z":
        return ord(c) - ord("a")
    return None


def morse_code(c: str) -> str:
    """Return the dots and dashes for a letter or digit."""
    index = _index(c) if len(c) == 1 else None
    if index is None:
        raise ValueError(f"no Morse code for {c!r}")
    return _decode(_MORSE_DATA[index])


def unit_time(wpm: int) -> int:
    """Length in milliseconds of one Morse unit at ``wpm`` words per minute."""
    if wpm <= 0:
        raise ValueError("words per minute must be positive")
    return 1000 // wpm


def char_timing(c: str, unit: int) -> list[Signal]:
    """Tones and gaps for one character; a space is a word gap, unknown characters are skipped."""
    if c == " ":
        return [Signal(False, unit * WORD_SPACE_FACTOR)]
    try:
        code = morse_code(c)
    except ValueError:
        return []
    signals: list[Signal] = []
    for element in code:
        factor = DASH_FACTOR if element == "-" else DOT_FACTOR
        signals.append(Signal(True, unit * factor))
        signals.append(Signal(False, unit * ELEMENT_SPACE_FACTOR))
    return signals


def text_timing(text: str, wpm: int = 0, default_wpm: int = DEFAULT_MORSE_WPM) -> list[Signal]:
    """Tones and gaps for ``text``; a ``wpm`` of 0 uses ``default_wpm``."""
    unit = unit_time(wpm or default_wpm)
    signals: list[Signal] = []
    for c in text:
        signals.extend(char_timing(c, unit))
        signals.append(Signal(False, unit * CHAR_SPACE_FACTOR))
    return signals