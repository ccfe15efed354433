#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/sanitizer.py

import argparse
import re

from palettelab.core import config as c
from palettelab.core.errors import InvalidColorFormat
from palettelab.core.types import RGB

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def _printable(value) -> str:
    """Collapse whitespace and newlines so user input logs on one line."""
    if value is None:
        return ""
    return " ".join(str(value).split())


def _hex_digits(value: str) -> str:
    """Return the six lowercase hex digits of a valid 3- or 6-digit hex string."""
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    match = HEX_PATTERN.fullmatch(value.strip())
    if not match:
        raise InvalidColorFormat(value)
    digits = match.group(1).lower()
    if len(digits) == 3:
        # e.g., 'abc' becomes 'aabbcc'
        digits = "".join(ch * 2 for ch in digits)
    return digits


def normalize_hex(value: str) -> str:
    """Normalize a hex color to the canonical lowercase '#rrggbb' form."""
    return "#" + _hex_digits(value)


def parse_hex(value: str) -> RGB:
    """Parse a '#rgb' or '#rrggbb' string (hash optional) into RGB channels."""
    digits = _hex_digits(value)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def is_valid_hex(value) -> bool:
    return isinstance(value, str) and HEX_PATTERN.fullmatch(value.strip()) is not None


# Leading number with optional sign, e.g. '45', '-3.5', '4.5:1', '120deg', '60%'
NUMBER_PATTERN = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+))")


def _leading_number(value) -> float:
    """Return the number a CLI value starts with, or None when there is none."""
    if value is None:
        return None
    match = NUMBER_PATTERN.match(str(value))
    if not match:
        return None
    return float(match.group(1))


def _option_name(value) -> str:
    """Lowercase letters and dashes only; '_' and spaces become '-'."""
    if value is None:
        return ""
    s = re.sub(r"[\s_]+", "-", str(value).strip().lower())
    return re.sub(r"[^a-z\-]", "", s).strip("-")


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================


def handle_option_name(v: str) -> str:
    """Validator for named options such as harmony kinds and output formats."""
    cleaned = _option_name(v)
    if not cleaned:
        raise argparse.ArgumentTypeError(f"invalid name: '{_printable(v)}'")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Build a validator that reads a leading integer and clamps it into
    [min_v, max_v]. Fractions are rejected rather than truncated.
    """
    def validator(v: str) -> int:
        val = _leading_number(v)
        if val is None or not val.is_integer():
            raise argparse.ArgumentTypeError(f"invalid integer value: '{_printable(v)}'")
        return max(min_v, min(max_v, int(val)))
    return validator


def handle_float_range(min_v: float, max_v: float):
    """Build a validator that reads a leading number and clamps it into [min_v, max_v]."""
    def validator(v: str) -> float:
        val = _leading_number(v)
        if val is None:
            raise argparse.ArgumentTypeError(f"invalid number: '{_printable(v)}'")
        return max(min_v, min(max_v, val))
    return validator


# Maps custom CLI argument types to their parsing functions.
INPUT_HANDLERS = {
    "harmony_kind": handle_option_name,
    "format": handle_option_name,
    "seed": handle_int_range(0, 2 ** 63 - 1),
    "steps": handle_int_range(c.SCALE_MIN_STEPS, c.SCALE_MAX_STEPS),
    "count": handle_int_range(2, 12),
    "intensity": handle_int_range(0, 100),
    "ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),
    "hue": handle_float_range(0.0, c.HUE_MAX),
}
