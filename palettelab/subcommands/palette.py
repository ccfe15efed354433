#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/palette.py

import argparse
import json
import random
import sys

from palettelab.core import config as c
from palettelab.core.palette import compose_palette_scales
from palettelab.shared.logger import PaletteLabArgumentParser
from palettelab.shared.preview import print_on_swatch
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor


def handle_palette_command(args: argparse.Namespace) -> None:
    hues = {}
    if args.primary_hue is not None:
        hues["primary"] = args.primary_hue

    rng = random.Random(args.seed)
    scales = compose_palette_scales(hues, rng, args.steps)

    if args.json:
        payload = {
            category: {str(stop.label): stop.hex for stop in scale.stops}
            for category, scale in scales.items()
        }
        print(json.dumps(payload, indent=2))
        return

    for category, scale in scales.items():
        print()
        print(f"{c.BOLD_WHITE}{category}{c.RESET}")
        for stop in scale.stops:
            print_on_swatch(stop.hex, str(stop.label))
    print()


def get_palette_parser() -> argparse.ArgumentParser:
    parser = PaletteLabArgumentParser(
        prog="palettelab palette",
        description="palettelab palette: random brand and semantic palette",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-s", "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "-ph", "--primary-hue",
        type=INPUT_HANDLERS["hue"],
        default=None,
        help="fix the primary hue (0 to 360) instead of drawing it"
    )
    parser.add_argument(
        "-S", "--steps",
        type=INPUT_HANDLERS["steps"],
        default=c.SCALE_STEPS,
        help=f"stops per category: {c.SCALE_MIN_STEPS} to {c.SCALE_MAX_STEPS} (default: {c.SCALE_STEPS})"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the palette as JSON"
    )
    return parser


def main() -> None:
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_palette_command(args)
