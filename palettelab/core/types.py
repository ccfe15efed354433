#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/types.py

import math
from typing import NamedTuple, Tuple

from . import config as c
from .errors import OutOfRangeChannel


def _check(channel: str, value: float, low: float, high: float, high_open: bool = False) -> None:
    if value is None or (isinstance(value, float) and not math.isfinite(value)):
        raise OutOfRangeChannel(channel, value, low, high)
    if value < low or value > high or (high_open and value >= high):
        raise OutOfRangeChannel(channel, value, low, high)


class RGB(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def checked(cls, r: int, g: int, b: int) -> "RGB":
        """Build an RGB after validating that every channel is an integer in [0, 255]."""
        for name, v in (("r", r), ("g", g), ("b", b)):
            if isinstance(v, bool) or not isinstance(v, int):
                raise OutOfRangeChannel(name, v, 0, c.RGB_MAX)
            _check(name, v, 0, c.RGB_MAX)
        return cls(r, g, b)


class HSL(NamedTuple):
    h: float
    s: float
    l: float

    @classmethod
    def checked(cls, h: float, s: float, l: float) -> "HSL":
        _check("h", h, 0.0, c.HUE_MAX, high_open=True)
        _check("s", s, 0.0, c.PERCENT)
        _check("l", l, 0.0, c.PERCENT)
        return cls(float(h), float(s), float(l))


class HSV(NamedTuple):
    h: float
    s: float
    v: float


class CMYK(NamedTuple):
    c: float
    m: float
    y: float
    k: float

    @classmethod
    def checked(cls, cy: float, m: float, y: float, k: float) -> "CMYK":
        for name, v in (("c", cy), ("m", m), ("y", y), ("k", k)):
            _check(name, v, 0.0, c.PERCENT)
        return cls(float(cy), float(m), float(y), float(k))


class OKLCH(NamedTuple):
    l: float
    c: float
    h: float

    @classmethod
    def checked(cls, l: float, chroma: float, h: float) -> "OKLCH":
        _check("l", l, 0.0, c.UNIT)
        _check("c", chroma, 0.0, math.inf)
        _check("h", h, 0.0, c.HUE_MAX, high_open=True)
        return cls(float(l), float(chroma), float(h))


class ContrastResult(NamedTuple):
    ratio: float
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool


class HarmonySet(NamedTuple):
    kind: str
    colors: Tuple[str, ...]


class ScaleStop(NamedTuple):
    label: int
    hex: str


class TonalScale(NamedTuple):
    stops: Tuple[ScaleStop, ...]
    seed_index: int

    @property
    def hexes(self) -> Tuple[str, ...]:
        return tuple(stop.hex for stop in self.stops)

    @property
    def labels(self) -> Tuple[int, ...]:
        return tuple(stop.label for stop in self.stops)


class ContrastFix(NamedTuple):
    hex: str
    lightness: float
