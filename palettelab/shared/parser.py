#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/parser.py

import argparse
import re

from palettelab.core import config as c
from palettelab.core.conversions import hsl_to_hex, oklch_to_hex, rgb_to_hex
from palettelab.core.errors import InvalidColorFormat, PaletteLabError
from palettelab.core.types import HSL, OKLCH, RGB
from palettelab.shared.sanitizer import is_valid_hex, normalize_hex

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)"

FUNCTION_PATTERN = re.compile(r"(rgb|hsl|oklch)\((.*)\)", re.IGNORECASE)
ARG_PATTERN = re.compile(rf"({_NUMBER})(%|deg)?", re.IGNORECASE)

EXPECTED_FORMATS = "hex, rgb(r, g, b), hsl(h, s%, l%) or oklch(l% c h)"


def _split_args(value: str, body: str):
    parts = [p for p in re.split(r"[\s,/]+", body.strip()) if p]
    if len(parts) != 3:
        raise InvalidColorFormat(value, EXPECTED_FORMATS)
    parsed = []
    for part in parts:
        match = ARG_PATTERN.fullmatch(part)
        if not match:
            raise InvalidColorFormat(value, EXPECTED_FORMATS)
        parsed.append((float(match.group(1)), (match.group(2) or "").lower()))
    return parsed


def parse_color(value: str) -> str:
    """
    Parse a hex, rgb(), hsl() or oklch() color string into canonical hex.

    Raises InvalidColorFormat for unrecognized syntax and OutOfRangeChannel
    when a component is outside its domain.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value, EXPECTED_FORMATS)
    if is_valid_hex(value):
        return normalize_hex(value)

    match = FUNCTION_PATTERN.fullmatch(value.strip())
    if not match:
        raise InvalidColorFormat(value, EXPECTED_FORMATS)

    fn = match.group(1).lower()
    args = _split_args(value, match.group(2))

    if fn == "rgb":
        channels = []
        for number, unit in args:
            if unit == "%":
                number = number * c.RGB_MAX / c.PERCENT
            channels.append(int(round(number)) if unit == "%" else number)
        if not all(float(v).is_integer() for v in channels):
            raise InvalidColorFormat(value, "integer rgb channels")
        rgb = RGB.checked(*(int(v) for v in channels))
        return rgb_to_hex(*rgb)

    if fn == "hsl":
        (h, _), (s, _), (l, _) = args
        hsl = HSL.checked(h % c.HUE_MAX, s, l)
        return hsl_to_hex(*hsl)

    (l, l_unit), (chroma, _), (h, _) = args
    if l_unit == "%":
        l = l / c.PERCENT
    oklch = OKLCH.checked(l, chroma, h % c.HUE_MAX)
    return oklch_to_hex(*oklch)


def handle_color(v: str) -> str:
    """Validator for CLI arguments that accept any supported color syntax."""
    try:
        return parse_color(v)
    except PaletteLabError as exc:
        raise argparse.ArgumentTypeError(str(exc))
