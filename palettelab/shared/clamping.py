#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/clamping.py

import math


def clamp(v: float, low: float, high: float) -> float:
    """Clamp v into [low, high]; NaN collapses to low."""
    if v != v:
        return low
    if math.isinf(v):
        return high if v > 0 else low
    return max(low, min(high, v))


def clamp01(v: float) -> float:
    return clamp(v, 0.0, 1.0)


def clamp255(v: float) -> float:
    return clamp(v, 0.0, 255.0)


def clamp_percent(v: float) -> float:
    return clamp(v, 0.0, 100.0)
