#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/luminance.py

from typing import Sequence, Union

from .conversions import hex_to_rgb, srgb_to_linear
from . import config as c


def get_luminance(r: float, g: float, b: float) -> float:
    return (
        c.LUMA_R * srgb_to_linear(r) +
        c.LUMA_G * srgb_to_linear(g) +
        c.LUMA_B * srgb_to_linear(b)
    )


def relative_luminance(color: Union[str, Sequence[float]]) -> float:
    """
    WCAG 2.x relative luminance of a hex string or an (r, g, b) tuple.

    Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
    """
    if isinstance(color, str):
        color = hex_to_rgb(color)
    r, g, b = color
    return get_luminance(r, g, b)
