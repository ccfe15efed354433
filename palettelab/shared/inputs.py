#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/inputs.py

import argparse
import random
from typing import Tuple

from palettelab.core import config as c
from palettelab.shared.parser import handle_color
from palettelab.shared.sanitizer import INPUT_HANDLERS


def add_base_color_arguments(parser: argparse.ArgumentParser) -> None:
    """The -H / -r / -s trio shared by every command that takes a base color."""
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-H", "--hex",
        type=handle_color,
        help="base color: hex, rgb(), hsl() or oklch()"
    )
    input_group.add_argument(
        "-r", "--random",
        action="store_true",
        help="use a random base"
    )
    parser.add_argument(
        "-s", "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )


def resolve_base_color(args: argparse.Namespace) -> Tuple[str, str]:
    """Return (hex, title) for the base color chosen on the command line."""
    if args.random:
        rng = random.Random(args.seed)
        return f"#{rng.randint(0, c.MAX_DEC):06x}", "random"
    return args.hex, "base color"
