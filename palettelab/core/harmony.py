#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/harmony.py

import random
from typing import List, Optional

from . import config as c
from .conversions import hex_to_hsl, hsl_to_hex
from .types import HarmonySet
from palettelab.shared.sanitizer import normalize_hex

MONOCHROMATIC = "monochromatic"

HARMONY_KINDS = tuple(c.HARMONY_OFFSETS) + (MONOCHROMATIC,)

_HARMONY_INFO = {
    "complementary": (
        "Complementary",
        "Two hues on opposite sides of the color wheel, strong and vivid contrast.",
    ),
    "analogous": (
        "Analogous",
        "Three neighbouring hues thirty degrees apart, calm and cohesive.",
    ),
    "triadic": (
        "Triadic",
        "Three hues spaced evenly around the wheel, balanced but lively.",
    ),
    "tetradic": (
        "Tetradic",
        "Four hues a quarter turn apart, two complementary pairs.",
    ),
    "split-complementary": (
        "Split Complementary",
        "The seed plus the two hues either side of its complement, softer than complementary.",
    ),
    "rectangular": (
        "Rectangular",
        "Two complementary pairs sixty degrees apart.",
    ),
    MONOCHROMATIC: (
        "Monochromatic",
        "One hue at several lightness levels.",
    ),
}


def _check_kind(kind: str) -> str:
    key = str(kind).strip().lower()
    if key not in _HARMONY_INFO:
        raise ValueError(
            f"unknown harmony kind '{kind}', expected one of: {', '.join(HARMONY_KINDS)}"
        )
    return key


def harmony_name(kind: str) -> str:
    return _HARMONY_INFO[_check_kind(kind)][0]


def harmony_description(kind: str) -> str:
    return _HARMONY_INFO[_check_kind(kind)][1]


def rotate_hue(hex_code: str, degrees: float) -> str:
    """Rotate the HSL hue of a color, keeping saturation and lightness."""
    if degrees % c.HUE_MAX == 0:
        return normalize_hex(hex_code)
    h, s, l = hex_to_hsl(hex_code)
    return hsl_to_hex((h + degrees) % c.HUE_MAX, s, l)


def _monochromatic(hex_code: str, count: int) -> List[str]:
    h, s, _ = hex_to_hsl(hex_code)
    span = c.MONO_L_MAX - c.MONO_L_MIN
    return [
        hsl_to_hex(h, s, c.MONO_L_MAX - span * i / (count - 1))
        for i in range(count)
    ]


def generate_harmony(seed: str, kind: str, count: int = c.MONO_COUNT) -> HarmonySet:
    """
    Build a harmony from a seed color.

    Every kind except monochromatic rotates the seed's HSL hue by a fixed
    set of offsets, keeping saturation and lightness; members are ordered by
    offset and the seed itself (normalized) sits at offset 0. Monochromatic
    keeps the hue and spreads lightness from light to dark over `count`
    members.

    Raises InvalidColorFormat for a malformed seed and ValueError for an
    unknown kind.
    """
    key = _check_kind(kind)
    seed_hex = normalize_hex(seed)

    if key == MONOCHROMATIC:
        if count < 2:
            raise ValueError(f"monochromatic harmony needs at least 2 members, got {count}")
        return HarmonySet(key, tuple(_monochromatic(seed_hex, count)))

    colors = tuple(rotate_hue(seed_hex, offset) for offset in c.HARMONY_OFFSETS[key])
    return HarmonySet(key, colors)


def generate_random_color(rng: random.Random) -> str:
    """A random, reasonably saturated mid-lightness color."""
    h = rng.randrange(int(c.HUE_MAX))
    s = rng.randrange(*c.RANDOM_SAT_RANGE)
    l = rng.randrange(*c.RANDOM_LIGHT_RANGE)
    return hsl_to_hex(h, s, l)


def generate_random_palette(count: int = 5, rng: Optional[random.Random] = None) -> List[str]:
    """
    A random color followed by count - 1 colors with evenly spaced hues,
    each jittered in hue, saturation and lightness.
    """
    if count < 1:
        raise ValueError(f"palette size must be positive, got {count}")
    rng = rng if rng is not None else random.Random()

    base = generate_random_color(rng)
    h, s, l = hex_to_hsl(base)
    colors = [base]

    sat_low, sat_high = c.RANDOM_PALETTE_SAT_RANGE
    light_low, light_high = c.RANDOM_PALETTE_LIGHT_RANGE
    for i in range(1, count):
        hue_shift = (c.HUE_MAX / count) * i + rng.uniform(-c.RANDOM_JITTER, c.RANDOM_JITTER)
        sat_shift = rng.uniform(-c.RANDOM_JITTER, c.RANDOM_JITTER)
        light_shift = rng.uniform(-c.RANDOM_JITTER, c.RANDOM_JITTER)
        colors.append(hsl_to_hex(
            (h + hue_shift) % c.HUE_MAX,
            max(sat_low, min(sat_high, s + sat_shift)),
            max(light_low, min(light_high, l + light_shift)),
        ))

    return colors
