#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/vision.py

import math
from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Sequence

from . import config as c
from .contrast import contrast_ratio
from .conversions import hex_to_hsl, hex_to_rgb, hsl_to_hex, linear_to_srgb, rgb_to_hex, srgb_to_linear
from .types import ContrastFix
from palettelab.shared.clamping import clamp, clamp01, clamp_percent
from palettelab.shared.sanitizer import normalize_hex

CVD_TYPES = (
    "protanopia",
    "deuteranopia",
    "tritanopia",
    "achromatopsia",
    "protanomaly",
    "deuteranomaly",
    "tritanomaly",
)

COMMON_CVD_TYPES = CVD_TYPES[:4]

_CVD_INFO = {
    "protanopia": ("Protanopia (red-blind)", "No working long-wavelength cones, reds read as dark olive."),
    "deuteranopia": ("Deuteranopia (green-blind)", "No working medium-wavelength cones, reds and greens merge."),
    "tritanopia": ("Tritanopia (blue-blind)", "No working short-wavelength cones, blues and greens merge. Rare."),
    "achromatopsia": ("Achromatopsia (monochromacy)", "No color perception at all, only lightness. Very rare."),
    "protanomaly": ("Protanomaly (red-weak)", "Long-wavelength cones shifted, reds look duller."),
    "deuteranomaly": ("Deuteranomaly (green-weak)", "Medium-wavelength cones shifted, the most common deficiency."),
    "tritanomaly": ("Tritanomaly (blue-weak)", "Short-wavelength cones shifted, blue and yellow weaken. Rare."),
}


def _check_kind(kind: str) -> str:
    key = str(kind).strip().lower()
    if key not in c.CB_MATRICES:
        raise ValueError(
            f"unknown deficiency '{kind}', expected one of: {', '.join(CVD_TYPES)}"
        )
    return key


def deficiency_name(kind: str) -> str:
    return _CVD_INFO[_check_kind(kind)][0]


def deficiency_description(kind: str) -> str:
    return _CVD_INFO[_check_kind(kind)][1]


@lru_cache(maxsize=c.LRU_CACHE_SIZE)
def _simulate_cached(hex_code: str, kind: str, intensity: float) -> str:
    r, g, b = hex_to_rgb(hex_code)
    matrix = c.CB_MATRICES[kind]
    r_lin, g_lin, b_lin = srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)

    rr_sim = r_lin * matrix[0][0] + g_lin * matrix[0][1] + b_lin * matrix[0][2]
    gg_sim = r_lin * matrix[1][0] + g_lin * matrix[1][1] + b_lin * matrix[1][2]
    bb_sim = r_lin * matrix[2][0] + g_lin * matrix[2][1] + b_lin * matrix[2][2]

    f = intensity
    rr_lin = (1 - f) * r_lin + f * rr_sim
    gg_lin = (1 - f) * g_lin + f * gg_sim
    bb_lin = (1 - f) * b_lin + f * bb_sim

    return rgb_to_hex(
        linear_to_srgb(rr_lin) * c.RGB_MAX,
        linear_to_srgb(gg_lin) * c.RGB_MAX,
        linear_to_srgb(bb_lin) * c.RGB_MAX,
    )


def simulate(hex_code: str, kind: str, intensity: float = 1.0) -> str:
    """
    Simulate how a color appears with a color-vision deficiency.

    The color is linearized, passed through the deficiency's 3x3 matrix,
    blended with the original by `intensity` (clamped to [0, 1]) and
    gamma-encoded back to hex.

    Raises InvalidColorFormat for malformed hex and ValueError for an
    unknown kind.
    """
    key = _check_kind(kind)
    return _simulate_cached(normalize_hex(hex_code), key, clamp01(float(intensity)))


def clear_simulation_cache() -> None:
    _simulate_cached.cache_clear()


def simulation_cache_size() -> int:
    return _simulate_cached.cache_info().currsize


def simulate_all(hex_code: str, intensity: float = 1.0) -> Dict[str, str]:
    return {kind: simulate(hex_code, kind, intensity) for kind in CVD_TYPES}


def simulate_batch(hexes: Sequence[str], kind: str, intensity: float = 1.0) -> List[str]:
    return [simulate(h, kind, intensity) for h in hexes]


def are_distinguishable(
    hex1: str,
    hex2: str,
    kind: str,
    threshold: float = c.CVD_DISTINCT_THRESHOLD,
) -> bool:
    """True when the simulated colors are at least `threshold` apart in RGB."""
    rgb1 = hex_to_rgb(simulate(hex1, kind))
    rgb2 = hex_to_rgb(simulate(hex2, kind))
    return math.dist(rgb1, rgb2) >= threshold


def check_palette_accessibility(
    hexes: Sequence[str],
    threshold: float = c.CVD_DISTINCT_THRESHOLD,
) -> Dict[str, Dict]:
    """
    For each common deficiency, list the pairs of colors that become
    indistinguishable. A palette is accessible for a deficiency when no pair
    collapses.
    """
    result = {}
    for kind in COMMON_CVD_TYPES:
        pairs = []
        for i, a in enumerate(hexes):
            for b in hexes[i + 1:]:
                if not are_distinguishable(a, b, kind, threshold):
                    pairs.append((normalize_hex(a), normalize_hex(b)))
        result[kind] = {"accessible": not pairs, "problematic_pairs": pairs}
    return result


def check_category_accessibility(
    categories: Mapping[str, Sequence[str]],
    threshold: float = c.CVD_DISTINCT_THRESHOLD,
) -> Dict[str, Dict]:
    """
    Run check_palette_accessibility inside each category only; colors from
    different categories are never compared. Categories with fewer than two
    colors are skipped.

    Returns {"by_type": {kind: {...}}, "by_category": {name: {kind: {...}}}}
    where by_type pairs also carry their category name.
    """
    by_type = {kind: {"accessible": True, "problematic_pairs": []} for kind in COMMON_CVD_TYPES}
    by_category = {}

    for name, hexes in categories.items():
        if len(hexes) < 2:
            continue
        category_result = check_palette_accessibility(hexes, threshold)
        by_category[name] = category_result
        for kind, entry in category_result.items():
            if entry["accessible"]:
                continue
            by_type[kind]["accessible"] = False
            by_type[kind]["problematic_pairs"].extend(
                (a, b, name) for a, b in entry["problematic_pairs"]
            )

    return {"by_type": by_type, "by_category": by_category}


def suggest_contrast_fix(
    text_hex: str,
    background_hex: str,
    kind: str,
    target_ratio: float = c.WCAG_AA_NORMAL,
) -> ContrastFix:
    """
    Step the text color's HSL lightness until it reaches target_ratio against
    the background as both appear under the given deficiency.

    Tries the direction away from the background first. Falls back to a very
    dark (10%) or very light (95%) version when no step reaches the target.
    """
    key = _check_kind(kind)
    h, s, l = hex_to_hsl(text_hex)
    bg_l = hex_to_hsl(background_hex).l
    go_darker = l < bg_l
    simulated_bg = simulate(background_hex, key)

    for i in range(1, c.CVD_FIX_MAX_ATTEMPTS + 1):
        delta = i * c.CVD_FIX_STEP
        for adjustment in ((-delta, delta) if go_darker else (delta, -delta)):
            lightness = clamp_percent(l + adjustment)
            candidate = hsl_to_hex(h, s, lightness)
            if contrast_ratio(simulate(candidate, key), simulated_bg) >= target_ratio:
                return ContrastFix(candidate, lightness)

    extreme = c.SHADE_L_MIN if go_darker else c.TINT_L_MAX
    return ContrastFix(hsl_to_hex(h, s, extreme), extreme)


def suggest_distinguishable_fix(
    hex_to_adjust: str,
    other_hex: str,
    kind: str,
    threshold: float = c.CVD_SEPARATE_THRESHOLD,
) -> Optional[ContrastFix]:
    """
    Step a color's HSL lightness, between 5% and 95%, until it no longer
    merges with other_hex under the given deficiency.

    Tries the direction away from the other color first and returns None
    when no step separates them.
    """
    key = _check_kind(kind)
    h, s, l = hex_to_hsl(hex_to_adjust)
    go_darker = l < hex_to_hsl(other_hex).l
    low, high = c.CVD_SEPARATE_L_RANGE

    for i in range(1, c.CVD_SEPARATE_MAX_ATTEMPTS + 1):
        delta = i * c.CVD_FIX_STEP
        for adjustment in ((-delta, delta) if go_darker else (delta, -delta)):
            lightness = clamp(l + adjustment, low, high)
            candidate = hsl_to_hex(h, s, lightness)
            if are_distinguishable(candidate, other_hex, key, threshold):
                return ContrastFix(candidate, lightness)

    return None
