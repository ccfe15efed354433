#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/palette.py

import random
from typing import Dict, List, Mapping, Optional

from . import config as c
from .conversions import hsl_to_hex
from .scales import generate_tonal_scale
from .types import TonalScale

PALETTE_CATEGORIES = c.PALETTE_CATEGORIES
SEMANTIC_HUE_BANDS = c.SEMANTIC_HUE_BANDS


def _hue_distance(a: float, b: float) -> float:
    d = abs(a - b) % c.HUE_MAX
    return min(d, c.HUE_MAX - d)


def constrain_hue(category: str, hue: float) -> float:
    """
    Clamp a hue into the canonical band of a semantic category, wrapping
    around 360 where the band does (error spans 345 to 15). Hues for other
    categories are only normalized into [0, 360).
    """
    h = hue % c.HUE_MAX
    band = SEMANTIC_HUE_BANDS.get(category)
    if band is None:
        return h
    start, end = band
    if start <= h <= end or start <= h + c.HUE_MAX <= end:
        return h
    if _hue_distance(h, start) <= _hue_distance(h, end):
        return start % c.HUE_MAX
    return end % c.HUE_MAX


def _random_in_band(rng: random.Random, category: str) -> float:
    start, end = SEMANTIC_HUE_BANDS[category]
    return rng.uniform(start, end) % c.HUE_MAX


def _jittered(rng: random.Random, base: float, offset: float, jitter: int) -> float:
    return (base + offset + rng.randint(-jitter, jitter)) % c.HUE_MAX


def _category_seeds(
    hues: Mapping[str, float],
    rng: random.Random,
) -> Dict[str, tuple]:
    """(hue, saturation) per category, drawing from rng in a fixed order."""
    primary = hues["primary"] % c.HUE_MAX if "primary" in hues else float(rng.randrange(int(c.HUE_MAX)))

    seeds = {
        "primary": (primary, rng.randrange(*c.PRIMARY_SAT_RANGE)),
        "secondary": (
            hues["secondary"] % c.HUE_MAX if "secondary" in hues
            else _jittered(rng, primary, c.SECONDARY_OFFSET, c.SECONDARY_JITTER),
            rng.randrange(*c.SECONDARY_SAT_RANGE),
        ),
        "accent": (
            hues["accent"] % c.HUE_MAX if "accent" in hues
            else _jittered(rng, primary, c.ACCENT_OFFSET, c.ACCENT_JITTER),
            rng.randrange(*c.ACCENT_SAT_RANGE),
        ),
        "neutral": (hues.get("neutral", primary) % c.HUE_MAX, c.NEUTRAL_SATURATION),
    }

    for category in SEMANTIC_HUE_BANDS:
        if category in hues:
            hue = constrain_hue(category, hues[category])
        else:
            hue = _random_in_band(rng, category)
        seeds[category] = (hue, c.SEMANTIC_SATURATION[category])

    for category, hue in hues.items():
        if category not in seeds:
            seeds[category] = (hue % c.HUE_MAX, rng.randrange(*c.PRIMARY_SAT_RANGE))

    return seeds


def compose_palette_scales(
    hues: Optional[Mapping[str, float]] = None,
    rng: Optional[random.Random] = None,
    steps: int = c.SCALE_STEPS,
) -> Dict[str, TonalScale]:
    """Like compose_palette, but keeps the full TonalScale per category."""
    rng = rng if rng is not None else random.Random()
    seeds = _category_seeds(dict(hues or {}), rng)
    return {
        category: generate_tonal_scale(hsl_to_hex(hue, sat, c.PALETTE_SEED_LIGHTNESS), steps)
        for category, (hue, sat) in seeds.items()
    }


def compose_palette(
    hues: Optional[Mapping[str, float]] = None,
    rng: Optional[random.Random] = None,
    steps: int = c.SCALE_STEPS,
) -> Dict[str, List[str]]:
    """
    Compose a full palette: a tonal scale for each of primary, secondary,
    accent, neutral, success, warning, error and info, plus any extra
    category named in `hues`.

    Brand hues derive from a random primary (secondary near its complement,
    accent near its triad, neutral at the primary hue barely saturated).
    Semantic categories stay inside their hue bands; a caller hue for one of
    them is clamped into the band, while hues for custom categories are used
    as given. Each category's seed is HSL(hue, saturation, 55%).

    Pass a seeded random.Random for reproducible output.
    """
    scales = compose_palette_scales(hues, rng, steps)
    return {category: list(scale.hexes) for category, scale in scales.items()}
