#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/scale.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.core.scales import generate_scale_hsl, generate_tonal_scale
from palettelab.shared.inputs import add_base_color_arguments, resolve_base_color
from palettelab.shared.logger import PaletteLabArgumentParser
from palettelab.shared.preview import print_color_block
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor


def handle_scale_command(args: argparse.Namespace) -> None:
    base_hex, title = resolve_base_color(args)
    if args.method == "hsl":
        scale = generate_scale_hsl(base_hex, args.steps)
    else:
        scale = generate_tonal_scale(base_hex, args.steps)

    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for i, stop in enumerate(scale.stops):
        marker = " *" if i == scale.seed_index else ""
        print_color_block(stop.hex, f"{stop.label}{marker}")
    print()


def get_scale_parser() -> argparse.ArgumentParser:
    parser = PaletteLabArgumentParser(
        prog="palettelab scale",
        description="palettelab scale: light-to-dark tonal scale from a seed color",
        formatter_class=argparse.RawTextHelpFormatter
    )
    add_base_color_arguments(parser)
    parser.add_argument(
        "-S", "--steps",
        type=INPUT_HANDLERS["steps"],
        default=c.SCALE_STEPS,
        help=f"number of stops: {c.SCALE_MIN_STEPS} to {c.SCALE_MAX_STEPS} (default: {c.SCALE_STEPS})"
    )
    parser.add_argument(
        "-m", "--method",
        choices=["oklch", "hsl"],
        default="oklch",
        help="oklch: perceptual scale anchored on the seed\n"
             "hsl: HSL lightness ladder at the seed's hue and saturation"
    )
    return parser


def main() -> None:
    parser = get_scale_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_scale_command(args)
