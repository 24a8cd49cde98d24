import string

import pytest

from fluxtune.morse import (
    CHAR_SPACE_FACTOR,
    WORD_SPACE_FACTOR,
    Signal,
    char_timing,
    morse_code,
    text_timing,
    unit_time,
)


def test_known_codes():
    assert morse_code("A") == ".-"
    assert morse_code("E") == "."
    assert morse_code("0") == "-----"


def test_lowercase_matches_uppercase():
    for c in string.ascii_lowercase:
        assert morse_code(c) == morse_code(c.upper())


def test_codes_are_distinct():
    symbols = string.ascii_uppercase + string.digits
    codes = [morse_code(c) for c in symbols]
    assert len(set(codes)) == len(symbols)


def test_digits_share_length():
    assert {len(morse_code(d)) for d in string.digits} == {len(morse_code("0"))}


@pytest.mark.parametrize("c", ["#", " ", "", "AB"])
def test_unsupported_character_raises(c):
    with pytest.raises(ValueError):
        morse_code(c)


def test_unit_time_rejects_zero():
    with pytest.raises(ValueError):
        unit_time(0)


def test_space_is_word_gap():
    assert char_timing(" ", 10) == [Signal(False, 10 * WORD_SPACE_FACTOR)]


def test_unknown_character_is_skipped():
    assert char_timing("#", 10) == []


@pytest.mark.parametrize("c", list("AEQZ09"))
def test_tone_count_matches_code(c):
    signals = char_timing(c, 10)
    tones = [s for s in signals if s.on]
    assert len(tones) == len(morse_code(c))
    assert len(signals) == 2 * len(tones)


def test_dashes_longer_than_dots():
    (dot, _), (dash, _) = char_timing("E", 10), char_timing("T", 10)
    assert dash.duration > dot.duration


def test_zero_wpm_uses_default():
    assert text_timing("AB", 0, 20) == text_timing("AB", 20)


def test_each_character_followed_by_char_space():
    unit = unit_time(20)
    signals = text_timing("SOS", 20)
    gaps = [s for s in signals if not s.on and s.duration == unit * CHAR_SPACE_FACTOR]
    assert len(gaps) == 3
    assert signals[-1] == Signal(False, unit * CHAR_SPACE_FACTOR)