#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/formatting.py

from palettelab.core import config as c
from palettelab.shared.sanitizer import normalize_hex


def _num(value: float, places: int = c.ROUND_DISPLAY) -> str:
    # round for display, then drop trailing zeros so 50.0 prints as 50
    rounded = round(value, places)
    if rounded == 0:
        rounded = 0.0
    return f"{rounded:g}"


def format_hex(hex_code: str) -> str:
    return normalize_hex(hex_code)


def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({int(round(r))}, {int(round(g))}, {int(round(b))})"


def format_hsl(h: float, s: float, l: float) -> str:
    return f"hsl({_num(h)}, {_num(s)}%, {_num(l)}%)"


def format_hsv(h: float, s: float, v: float) -> str:
    return f"hsv({_num(h)}, {_num(s)}%, {_num(v)}%)"


def format_oklch(l: float, chroma: float, h: float) -> str:
    return f"oklch({_num(l * c.PERCENT)}% {_num(chroma, 4)} {_num(h)})"


def format_oklab(l: float, a: float, b: float) -> str:
    return f"oklab({_num(l * c.PERCENT)}% {_num(a, 4)} {_num(b, 4)})"


def format_cmyk(cy: float, m: float, y: float, k: float) -> str:
    return f"cmyk({_num(cy, 0)}%, {_num(m, 0)}%, {_num(y, 0)}%, {_num(k, 0)}%)"


def format_lab(l: float, a: float, b: float) -> str:
    return f"lab({_num(l)} {_num(a)} {_num(b)})"


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return format_hex(args[0])
    elif fmt == 'rgb':
        return format_rgb(*args)
    elif fmt == 'hsl':
        return format_hsl(*args)
    elif fmt == 'hsv':
        return format_hsv(*args)
    elif fmt == 'oklch':
        return format_oklch(*args)
    elif fmt == 'oklab':
        return format_oklab(*args)
    elif fmt == 'cmyk':
        return format_cmyk(*args)
    elif fmt == 'lab':
        return format_lab(*args)

    return ""
