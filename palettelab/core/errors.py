#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/errors.py


class PaletteLabError(ValueError):
    """Base class for color errors raised by the engine."""


class InvalidColorFormat(PaletteLabError):
    """A color string could not be parsed."""

    def __init__(self, value, expected: str = "#rgb or #rrggbb hex"):
        self.value = value
        self.expected = expected
        raw = " ".join(str(value).split()) if value is not None else ""
        super().__init__(f"invalid color '{raw}': expected {expected}")


class OutOfRangeChannel(PaletteLabError):
    """A color component lies outside its declared domain."""

    def __init__(self, channel: str, value, low: float, high: float):
        self.channel = channel
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{channel}={value!r} is outside [{low:g}, {high:g}]")
