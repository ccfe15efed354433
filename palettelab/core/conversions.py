#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/conversions.py

import math
from typing import Tuple

from . import config as c
from .types import CMYK, HSL, HSV, OKLCH, RGB
from palettelab.shared.clamping import clamp01, clamp255, clamp_percent
from palettelab.shared.sanitizer import parse_hex


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert a hex string to RGB. Raises InvalidColorFormat on malformed input."""
    return parse_hex(hex_code)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a canonical '#rrggbb' string."""
    r_i = int(round(clamp255(r)))
    g_i = int(round(clamp255(g)))
    b_i = int(round(clamp255(b)))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


def _round_rgb(r: float, g: float, b: float) -> RGB:
    return RGB(int(round(clamp255(r))), int(round(clamp255(g))), int(round(clamp255(b))))


def _hue_from_rgb(r_f: float, g_f: float, b_f: float, cmax: float, delta: float) -> float:
    if cmax == r_f:
        h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
    elif cmax == g_f:
        h = c.HUE_SECTOR * ((b_f - r_f) / delta + 2.0)
    else:
        h = c.HUE_SECTOR * ((r_f - g_f) / delta + 4.0)
    return h % c.HUE_MAX


def _sector_rgb(h: float, chroma: float, x: float) -> Tuple[float, float, float]:
    if 0 <= h < 60:
        return chroma, x, 0.0
    if 60 <= h < 120:
        return x, chroma, 0.0
    if 120 <= h < 180:
        return 0.0, chroma, x
    if 180 <= h < 240:
        return 0.0, x, chroma
    if 240 <= h < 300:
        return x, 0.0, chroma
    return chroma, 0.0, x


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB to HSL with saturation and lightness in percent."""
    r_f, g_f, b_f = clamp255(r) / c.RGB_MAX, clamp255(g) / c.RGB_MAX, clamp255(b) / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return HSL(0.0, 0.0, L * c.PERCENT)
    denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
    s = 0.0 if abs(denom) < c.EPS else delta / denom
    h = _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return HSL(h, clamp01(s) * c.PERCENT, L * c.PERCENT)


def _hsl_to_rgb_float(h: float, s: float, L: float) -> Tuple[float, float, float]:
    h = h % c.HUE_MAX
    s = clamp_percent(s) / c.PERCENT
    L = clamp_percent(L) / c.PERCENT
    if s == 0:
        r = g = b = L
    else:
        chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
        x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
        m = L - chroma / c.DIV_2
        r_p, g_p, b_p = _sector_rgb(h, chroma, x)
        r, g, b = r_p + m, g_p + m, b_p + m
    return clamp01(r) * c.RGB_MAX, clamp01(g) * c.RGB_MAX, clamp01(b) * c.RGB_MAX


def hsl_to_rgb(h: float, s: float, L: float) -> RGB:
    """Convert HSL (percent saturation/lightness) to RGB. Hue wraps modulo 360."""
    return _round_rgb(*_hsl_to_rgb_float(h, s, L))


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Convert RGB to HSV with saturation and value in percent."""
    r_f, g_f, b_f = clamp255(r) / c.RGB_MAX, clamp255(g) / c.RGB_MAX, clamp255(b) / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    if delta == 0:
        return HSV(0.0, 0.0, cmax * c.PERCENT)
    s = delta / cmax if cmax != 0 else 0.0
    h = _hue_from_rgb(r_f, g_f, b_f, cmax, delta)
    return HSV(h, s * c.PERCENT, cmax * c.PERCENT)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV (percent saturation/value) to RGB."""
    h = h % c.HUE_MAX
    s = clamp_percent(s) / c.PERCENT
    v = clamp_percent(v) / c.PERCENT
    chroma = v * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = v - chroma
    r_p, g_p, b_p = _sector_rgb(h, chroma, x)
    return _round_rgb((r_p + m) * c.RGB_MAX, (g_p + m) * c.RGB_MAX, (b_p + m) * c.RGB_MAX)


def srgb_to_linear(color_comp: float) -> float:
    """Linearize an sRGB component given on the 0-255 scale."""
    c_norm = clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb(l_val: float) -> float:
    """Apply the sRGB transfer curve to a linear component, returning 0-1 (unclamped above)."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """Convert RGB to CMYK with every channel in percent. Black is pure K."""
    r_f, g_f, b_f = clamp255(r) / c.RGB_MAX, clamp255(g) / c.RGB_MAX, clamp255(b) / c.RGB_MAX
    k = c.UNIT - max(r_f, g_f, b_f)
    if k >= c.UNIT:
        return CMYK(0.0, 0.0, 0.0, c.PERCENT)
    denom = c.UNIT - k
    cy = (c.UNIT - r_f - k) / denom
    m = (c.UNIT - g_f - k) / denom
    y = (c.UNIT - b_f - k) / denom
    return CMYK(cy * c.PERCENT, m * c.PERCENT, y * c.PERCENT, k * c.PERCENT)


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK (percent) to RGB."""
    ink = [clamp_percent(v) / c.PERCENT for v in (cy, m, y, k)]
    key = c.UNIT - ink[3]
    return _round_rgb(
        c.RGB_MAX * (c.UNIT - ink[0]) * key,
        c.RGB_MAX * (c.UNIT - ink[1]) * key,
        c.RGB_MAX * (c.UNIT - ink[2]) * key,
    )


def _mat_mul(m, v) -> Tuple[float, float, float]:
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ (D65) on the 0-100 scale."""
    lin = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    return tuple(v * c.XYZ_SCALING for v in _mat_mul(c.M_SRGB_XYZ, lin))


def xyz_to_rgb(x: float, y: float, z: float) -> RGB:
    """Convert CIE XYZ (0-100) to RGB, clipping out-of-gamut channels."""
    lin = _mat_mul(c.M_XYZ_SRGB, (x / c.XYZ_SCALING, y / c.XYZ_SCALING, z / c.XYZ_SCALING))
    return _round_rgb(*(linear_to_srgb(v) * c.RGB_MAX for v in lin))


def _lab_f(t: float) -> float:
    return t ** c.OKLAB_CUBE_ROOT_EXP if t > c.LAB_E else c.LAB_K * t + c.LAB_OFFSET


def _lab_f_inv(t: float) -> float:
    return t ** 3 if t > c.LAB_INV_THR else (t - c.LAB_OFFSET) / c.LAB_K


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to CIELAB against the D65 white."""
    x_r, y_r, z_r = (_lab_f(v / w) for v, w in zip((x, y, z), c.D65_WHITE))
    L = c.LAB_L_MULT * y_r - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def lab_to_xyz(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert CIELAB to XYZ against the D65 white."""
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    return tuple(_lab_f_inv(v) * w for v, w in zip((x_r, y_r, z_r), c.D65_WHITE))


def rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to CIELAB conversion."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Direct CIELAB to RGB conversion."""
    return xyz_to_rgb(*lab_to_xyz(L, a, b))


def _cbrt(v: float) -> float:
    return v ** c.OKLAB_CUBE_ROOT_EXP if v >= 0 else -((-v) ** c.OKLAB_CUBE_ROOT_EXP)


def rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to OKLab via linear sRGB and LMS."""
    lin = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    lms = _mat_mul(c.M1_OKLAB, lin)
    return _mat_mul(c.M2_OKLAB, tuple(_cbrt(v) for v in lms))


def oklab_to_rgb_unclamped(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to 0-255 RGB floats without clipping to the sRGB gamut."""
    lms_ = _mat_mul(c.M2_OKLAB_INV, (L, a, b))
    lms = tuple(v ** 3 for v in lms_)
    r_lin, g_lin, b_lin = _mat_mul(c.M1_OKLAB_INV, lms)

    def encode(v: float) -> float:
        # keep the sign so callers can tell how far outside the gamut a channel fell
        if v < 0:
            return -linear_to_srgb(-v) * c.RGB_MAX
        return linear_to_srgb(v) * c.RGB_MAX

    return encode(r_lin), encode(g_lin), encode(b_lin)


def oklab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Convert OKLab to RGB, clipping out-of-gamut channels to [0, 255]."""
    return _round_rgb(*oklab_to_rgb_unclamped(L, a, b))


def oklab_to_oklch(L: float, a: float, b: float) -> OKLCH:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    if chroma < c.OKLCH_ACHROMATIC_CHROMA:
        return OKLCH(L, chroma, 0.0)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return OKLCH(L, chroma, hue)


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    chroma = max(chroma, 0.0)
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def rgb_to_oklch(r: float, g: float, b: float) -> OKLCH:
    """Direct RGB to OKLCH conversion."""
    return oklab_to_oklch(*rgb_to_oklab(r, g, b))


def oklch_to_rgb(L: float, chroma: float, hue: float) -> RGB:
    """Direct OKLCH to RGB conversion with per-channel clipping."""
    return oklab_to_rgb(*oklch_to_oklab(L, chroma, hue))


def _in_gamut(r: float, g: float, b: float) -> bool:
    return (
        c.RGB_CLAMP_TOLERANCE_LOWER <= r <= c.RGB_CLAMP_TOLERANCE_UPPER
        and c.RGB_CLAMP_TOLERANCE_LOWER <= g <= c.RGB_CLAMP_TOLERANCE_UPPER
        and c.RGB_CLAMP_TOLERANCE_LOWER <= b <= c.RGB_CLAMP_TOLERANCE_UPPER
    )


def gamut_map_oklch(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Map an OKLCH color into sRGB by reducing chroma, keeping lightness and hue."""
    L = clamp01(L)
    fr, fg, fb = oklab_to_rgb_unclamped(*oklch_to_oklab(L, chroma, hue))
    if _in_gamut(fr, fg, fb) or chroma < c.EPS:
        return clamp255(fr), clamp255(fg), clamp255(fb)

    low, high = 0.0, chroma
    best_rgb = oklab_to_rgb_unclamped(L, 0.0, 0.0)
    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        mid_c = (low + high) / c.DIV_2
        tr, tg, tb = oklab_to_rgb_unclamped(*oklch_to_oklab(L, mid_c, hue))
        if _in_gamut(tr, tg, tb):
            best_rgb = (tr, tg, tb)
            low = mid_c
        else:
            high = mid_c

    return clamp255(best_rgb[0]), clamp255(best_rgb[1]), clamp255(best_rgb[2])


# ==========================================
# Direct Conversion Wrappers
# ==========================================


def hex_to_hsl(hex_code: str) -> HSL:
    """Direct Hex to HSL."""
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, L: float) -> str:
    """Direct HSL to Hex."""
    return rgb_to_hex(*_hsl_to_rgb_float(h, s, L))


def hex_to_hsv(hex_code: str) -> HSV:
    """Direct Hex to HSV."""
    return rgb_to_hsv(*hex_to_rgb(hex_code))


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """Direct HSV to Hex."""
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def hex_to_oklab(hex_code: str) -> Tuple[float, float, float]:
    """Direct Hex to OKLab."""
    return rgb_to_oklab(*hex_to_rgb(hex_code))


def oklab_to_hex(L: float, a: float, b: float) -> str:
    """Direct OKLab to Hex."""
    return rgb_to_hex(*oklab_to_rgb_unclamped(L, a, b))


def hex_to_oklch(hex_code: str) -> OKLCH:
    """Direct Hex to OKLCH."""
    return rgb_to_oklch(*hex_to_rgb(hex_code))


def oklch_to_hex(L: float, chroma: float, hue: float) -> str:
    """Direct OKLCH to Hex, clipping out-of-gamut channels."""
    return rgb_to_hex(*oklab_to_rgb_unclamped(*oklch_to_oklab(L, chroma, hue)))


def hex_to_cmyk(hex_code: str) -> CMYK:
    """Direct Hex to CMYK."""
    return rgb_to_cmyk(*hex_to_rgb(hex_code))


def cmyk_to_hex(cy: float, m: float, y: float, k: float) -> str:
    """Direct CMYK to Hex."""
    return rgb_to_hex(*cmyk_to_rgb(cy, m, y, k))


def hex_to_lab(hex_code: str) -> Tuple[float, float, float]:
    """Direct Hex to CIELAB."""
    return rgb_to_lab(*hex_to_rgb(hex_code))


def lab_to_hex(L: float, a: float, b: float) -> str:
    """Direct CIELAB to Hex."""
    return rgb_to_hex(*lab_to_rgb(L, a, b))
