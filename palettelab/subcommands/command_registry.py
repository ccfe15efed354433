#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/command_registry.py

from . import (
    contrast,
    convert,
    harmony,
    palette,
    scale,
    vision,
)

SUBCOMMANDS = {
    'convert': convert,
    'contrast': contrast,
    'harmony': harmony,
    'scale': scale,
    'vision': vision,
    'palette': palette,
}
