#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/contrast.py

from typing import Dict, Iterable, List, Optional, Sequence, Union

from . import config as c
from .conversions import hex_to_rgb, rgb_to_hex
from .luminance import relative_luminance
from .types import ContrastResult
from palettelab.shared.sanitizer import normalize_hex

BLACK = "#000000"
WHITE = "#ffffff"

ColorLike = Union[str, Sequence[float]]


def contrast_ratio(color_a: ColorLike, color_b: ColorLike) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors.

    Accepts hex strings or (r, g, b) tuples. The result is symmetric and
    lies in [1, 21].

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = relative_luminance(color_a)
    y2 = relative_luminance(color_b)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    ratio = (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)
    return max(c.WCAG_MIN_RATIO, min(c.WCAG_MAX_RATIO, ratio))


def classify(ratio: float) -> ContrastResult:
    """Evaluate a contrast ratio against the four WCAG pass thresholds."""
    return ContrastResult(
        ratio=ratio,
        aa_normal=ratio >= c.WCAG_AA_NORMAL,
        aa_large=ratio >= c.WCAG_AA_LARGE,
        aaa_normal=ratio >= c.WCAG_AAA_NORMAL,
        aaa_large=ratio >= c.WCAG_AAA_LARGE,
    )


def get_contrast_result(foreground: ColorLike, background: ColorLike) -> ContrastResult:
    """Ratio rounded for display, pass flags computed on the exact ratio."""
    ratio = contrast_ratio(foreground, background)
    return classify(ratio)._replace(ratio=round(ratio, c.ROUND_DISPLAY))


def wcag_level(ratio: float, large_text: bool = False) -> str:
    """Return 'AAA', 'AA', 'AA Large' or 'Fail' for a ratio."""
    if large_text:
        if ratio >= c.WCAG_AAA_LARGE:
            return "AAA"
        if ratio >= c.WCAG_AA_LARGE:
            return "AA"
        return "Fail"
    if ratio >= c.WCAG_AAA_NORMAL:
        return "AAA"
    if ratio >= c.WCAG_AA_NORMAL:
        return "AA"
    if ratio >= c.WCAG_AA_LARGE:
        return "AA Large"
    return "Fail"


def optimal_text_color(background: ColorLike) -> str:
    """Black or white, whichever contrasts more with the background. Ties go to black."""
    on_black = contrast_ratio(background, BLACK)
    on_white = contrast_ratio(background, WHITE)
    return BLACK if on_black >= on_white else WHITE


def is_light_color(hex_code: str) -> bool:
    return relative_luminance(hex_code) > c.LIGHT_COLOR_LUMINANCE


def find_best_contrast(target: ColorLike, candidates: Iterable[str]) -> Optional[str]:
    """Return the candidate with the highest contrast against target, first one on ties."""
    best, best_ratio = None, -1.0
    for candidate in candidates:
        ratio = contrast_ratio(target, candidate)
        if ratio > best_ratio:
            best, best_ratio = normalize_hex(candidate), ratio
    return best


def contrast_matrix(colors: Sequence[str]) -> List[List[float]]:
    """Pairwise contrast ratios, rounded to two decimals."""
    return [
        [round(contrast_ratio(a, b), c.ROUND_DISPLAY) for b in colors]
        for a in colors
    ]


def check_all_contrast(colors: Sequence[str], min_ratio: float = c.WCAG_AA_NORMAL) -> List[Dict]:
    """List every unordered pair of colors with its ratio and whether it meets min_ratio."""
    results = []
    for i, a in enumerate(colors):
        for b in colors[i + 1:]:
            ratio = contrast_ratio(a, b)
            results.append({
                "color1": normalize_hex(a),
                "color2": normalize_hex(b),
                "ratio": round(ratio, c.ROUND_DISPLAY),
                "passes": ratio >= min_ratio,
            })
    return results


def suggest_contrasting_color(
    background: str,
    foreground: str,
    target_ratio: float = c.WCAG_AA_NORMAL,
) -> str:
    """
    Move the foreground toward black or white until it reaches target_ratio
    against the background, keeping as much of the original color as possible.

    Returns the normalized foreground when it already passes, and the
    extreme (black or white) when the target cannot be reached.
    """
    fg = normalize_hex(foreground)
    if contrast_ratio(background, fg) >= target_ratio:
        return fg

    extreme = optimal_text_color(background)
    start = hex_to_rgb(fg)
    end = hex_to_rgb(extreme)

    if contrast_ratio(background, extreme) < target_ratio:
        return extreme

    def blend(t: float) -> str:
        return rgb_to_hex(*(s + (e - s) * t for s, e in zip(start, end)))

    low, high = 0.0, 1.0
    for _ in range(c.CONTRAST_BINARY_SEARCH_ITERATIONS):
        mid = (low + high) / c.DIV_2
        if contrast_ratio(background, blend(mid)) >= target_ratio:
            high = mid
        else:
            low = mid

    # rounding to 8-bit can land just under the target, step toward the extreme
    candidate = blend(high)
    while contrast_ratio(background, candidate) < target_ratio and high < 1.0:
        high = min(1.0, high + 0.01)
        candidate = blend(high)
    return candidate


def format_contrast_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"
