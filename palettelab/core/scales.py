#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/scales.py

from typing import List, Tuple

from . import config as c
from .conversions import (
    gamut_map_oklch,
    hex_to_hsl,
    hex_to_oklab,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_hex,
    oklab_to_hex,
    rgb_to_hex,
)
from .types import ScaleStop, TonalScale
from palettelab.shared.clamping import clamp_percent
from palettelab.shared.sanitizer import normalize_hex


def scale_labels(steps: int) -> Tuple[int, ...]:
    """50..950 for the standard eleven stops, otherwise 100, 200, ..."""
    if steps == len(c.SCALE_LABELS):
        return c.SCALE_LABELS
    return tuple(100 * (i + 1) for i in range(steps))


def _check_steps(steps: int) -> int:
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValueError(f"steps must be an integer, got {steps!r}")
    if not c.SCALE_MIN_STEPS <= steps <= c.SCALE_MAX_STEPS:
        raise ValueError(
            f"steps must be between {c.SCALE_MIN_STEPS} and {c.SCALE_MAX_STEPS}, got {steps}"
        )
    return steps


def _stop_lightness(seed_l: float, seed_index: int, steps: int) -> List[float]:
    """Lightness per stop, anchored so the seed stop sits exactly at seed_l."""
    top, bottom = c.SCALE_L_TOP, c.SCALE_L_BOTTOM
    last = steps - 1
    values = []
    for i in range(steps):
        if i < seed_index:
            values.append(top + (seed_l - top) * i / seed_index)
        elif i > seed_index:
            values.append(seed_l + (bottom - seed_l) * (i - seed_index) / (last - seed_index))
        else:
            values.append(seed_l)
    return values


def _separate(hex_code: str, neighbour: str, lighter: bool) -> str:
    """
    Nudge every channel of hex_code by one until its OKLCH lightness is
    strictly above (lighter=True) or below the neighbour's.
    """
    target = hex_to_oklch(neighbour).l
    delta = 1 if lighter else -1
    while True:
        value = hex_to_oklch(hex_code).l
        if (value > target) if lighter else (value < target):
            return hex_code
        nudged = rgb_to_hex(*(v + delta for v in hex_to_rgb(hex_code)))
        if nudged == hex_code:
            return hex_code
        hex_code = nudged


def generate_tonal_scale(seed: str, steps: int = c.SCALE_STEPS) -> TonalScale:
    """
    Generate a light-to-dark tonal scale around a seed color in OKLCH.

    The seed takes the stop whose reference lightness (a linear ladder from
    0.97 down to 0.14) is closest to its own, and keeps its exact hex there.
    The stops above run linearly from 0.97 to the seed lightness and those
    below from the seed lightness to 0.14. Hue and chroma are held, with
    chroma reduced per stop until the color fits sRGB.

    Near black or white several stops can round to the same 8-bit color;
    those are nudged one channel value at a time, outward from the seed,
    so lightness still strictly decreases from stop to stop.

    Raises InvalidColorFormat for a malformed seed and ValueError when steps
    is outside [2, 30].
    """
    steps = _check_steps(steps)
    seed_hex = normalize_hex(seed)
    seed_l, seed_c, seed_h = hex_to_oklch(seed_hex)

    span = c.SCALE_L_TOP - c.SCALE_L_BOTTOM
    reference = [c.SCALE_L_TOP - span * i / (steps - 1) for i in range(steps)]
    seed_index = min(range(steps), key=lambda i: abs(reference[i] - seed_l))

    hexes = [
        seed_hex if i == seed_index else rgb_to_hex(*gamut_map_oklch(lightness, seed_c, seed_h))
        for i, lightness in enumerate(_stop_lightness(seed_l, seed_index, steps))
    ]
    for i in range(seed_index - 1, -1, -1):
        hexes[i] = _separate(hexes[i], hexes[i + 1], lighter=True)
    for i in range(seed_index + 1, steps):
        hexes[i] = _separate(hexes[i], hexes[i - 1], lighter=False)

    labels = scale_labels(steps)
    stops = tuple(ScaleStop(labels[i], hex_code) for i, hex_code in enumerate(hexes))
    return TonalScale(stops, seed_index)


def scale_hexes(scale: TonalScale) -> List[str]:
    return list(scale.hexes)


def _hsl_ladder(steps: int) -> List[Tuple[float, float]]:
    if steps == len(c.SCALE_HSL_LADDER):
        return list(c.SCALE_HSL_LADDER)
    span = c.SCALE_HSL_L_TOP - c.SCALE_HSL_L_BOTTOM
    return [
        (c.SCALE_HSL_L_TOP - span * i / (steps - 1), 0.0)
        for i in range(steps)
    ]


def generate_scale_hsl(seed: str, steps: int = c.SCALE_STEPS) -> TonalScale:
    """
    Scale from an HSL lightness ladder. Eleven steps use the fixed ladder,
    with saturation eased off at the light end and pushed at the dark end;
    any other count spaces lightness evenly from 97% to 12% at the seed's
    saturation.

    The seed's hue and saturation drive every stop; seed_index points at the
    stop whose ladder lightness is nearest the seed's, but that stop is not
    replaced by the seed.
    """
    steps = _check_steps(steps)
    h, s, l = hex_to_hsl(seed)
    ladder = _hsl_ladder(steps)
    stops = tuple(
        ScaleStop(label, hsl_to_hex(h, clamp_percent(s + sat_offset), lightness))
        for label, (lightness, sat_offset) in zip(scale_labels(steps), ladder)
    )
    seed_index = min(range(steps), key=lambda i: abs(ladder[i][0] - l))
    return TonalScale(stops, seed_index)


def generate_tints(hex_code: str, count: int = 5) -> List[str]:
    """Lighter, slightly desaturated versions of a color, up to 95% lightness."""
    h, s, l = hex_to_hsl(hex_code)
    step = (c.TINT_L_MAX - l) / count
    return [
        hsl_to_hex(h, max(0.0, s - i * c.TINT_DESATURATE_STEP), min(c.TINT_L_MAX, l + step * i))
        for i in range(1, count + 1)
    ]


def generate_shades(hex_code: str, count: int = 5) -> List[str]:
    """Darker versions of a color, down to 10% lightness."""
    h, s, l = hex_to_hsl(hex_code)
    step = (l - c.SHADE_L_MIN) / count
    return [
        hsl_to_hex(h, s, max(c.SHADE_L_MIN, l - step * i))
        for i in range(1, count + 1)
    ]


def generate_tones(hex_code: str, count: int = 5) -> List[str]:
    """Progressively grayer versions of a color at the same lightness."""
    h, s, l = hex_to_hsl(hex_code)
    step = s / (count + 1)
    return [hsl_to_hex(h, max(0.0, s - step * i), l) for i in range(1, count + 1)]


def _shortest_hues(h1: float, h2: float) -> Tuple[float, float]:
    h1, h2 = h1 % c.HUE_MAX, h2 % c.HUE_MAX
    diff = h2 - h1
    if diff > 180:
        h2 -= c.HUE_MAX
    elif diff < -180:
        h2 += c.HUE_MAX
    return h1, h2


def mix_colors(hex1: str, hex2: str, ratio: float = 0.5) -> str:
    """Blend two colors in HSL, taking the short way around the hue circle."""
    h1, s1, l1 = hex_to_hsl(hex1)
    h2, s2, l2 = hex_to_hsl(hex2)
    h1, h2 = _shortest_hues(h1, h2)
    return hsl_to_hex(
        (h1 + ratio * (h2 - h1)) % c.HUE_MAX,
        s1 + ratio * (s2 - s1),
        l1 + ratio * (l2 - l1),
    )


def _interpolate(start: str, end: str, t: float, colorspace: str) -> str:
    if colorspace == "srgb":
        c1, c2 = hex_to_rgb(start), hex_to_rgb(end)
        return rgb_to_hex(*(a + t * (b - a) for a, b in zip(c1, c2)))

    if colorspace == "hsl":
        return mix_colors(start, end, t)

    if colorspace == "oklab":
        c1, c2 = hex_to_oklab(start), hex_to_oklab(end)
        return oklab_to_hex(*(a + t * (b - a) for a, b in zip(c1, c2)))

    l1, c1_val, h1 = hex_to_oklch(start)
    l2, c2_val, h2 = hex_to_oklch(end)
    # an achromatic endpoint has no meaningful hue, borrow the other one
    if c1_val < c.OKLCH_ACHROMATIC_CHROMA:
        h1 = h2
    elif c2_val < c.OKLCH_ACHROMATIC_CHROMA:
        h2 = h1
    h1, h2 = _shortest_hues(h1, h2)
    return rgb_to_hex(*gamut_map_oklch(
        l1 + t * (l2 - l1),
        c1_val + t * (c2_val - c1_val),
        (h1 + t * (h2 - h1)) % c.HUE_MAX,
    ))


def gradient_stops(
    start: str,
    end: str,
    steps: int = 5,
    colorspace: str = "hsl",
) -> List[str]:
    """
    Evenly spaced colors from start to end, both included, interpolated in
    one of srgb, hsl, oklab or oklch.
    """
    if colorspace not in c.GRADIENT_COLORSPACES:
        raise ValueError(
            f"unknown colorspace '{colorspace}', expected one of: {', '.join(c.GRADIENT_COLORSPACES)}"
        )
    if steps < 2:
        raise ValueError(f"a gradient needs at least 2 steps, got {steps}")

    start_hex, end_hex = normalize_hex(start), normalize_hex(end)
    middle = [
        _interpolate(start_hex, end_hex, i / (steps - 1), colorspace)
        for i in range(1, steps - 1)
    ]
    return [start_hex] + middle + [end_hex]


def adjust_lightness(hex_code: str, amount: float) -> str:
    """Shift HSL lightness by amount percentage points, clamped to [0, 100]."""
    h, s, l = hex_to_hsl(hex_code)
    return hsl_to_hex(h, s, clamp_percent(l + amount))


def adjust_saturation(hex_code: str, amount: float) -> str:
    """Shift HSL saturation by amount percentage points, clamped to [0, 100]."""
    h, s, l = hex_to_hsl(hex_code)
    return hsl_to_hex(h, clamp_percent(s + amount), l)
