"""Clock, timer, Morse timing, settings, LED and speaker models for a small tuner device."""

__version__ = "0.1.0"