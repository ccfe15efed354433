#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/harmony.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.core.harmony import (
    HARMONY_KINDS,
    generate_harmony,
    harmony_description,
    harmony_name,
)
from palettelab.shared.inputs import add_base_color_arguments, resolve_base_color
from palettelab.shared.logger import PaletteLabArgumentParser, log
from palettelab.shared.preview import print_color_block
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor


def handle_harmony_command(args: argparse.Namespace) -> None:
    if args.kind not in HARMONY_KINDS:
        log("error", f"unknown harmony kind '{args.kind}', expected one of: {', '.join(HARMONY_KINDS)}")
        sys.exit(2)

    base_hex, title = resolve_base_color(args)
    harmony = generate_harmony(base_hex, args.kind, args.count)

    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    print(f"{c.MSG_BOLD_COLORS['info']}{harmony_name(harmony.kind)}{c.RESET}: {harmony_description(harmony.kind)}")
    print()
    for i, hex_code in enumerate(harmony.colors, start=1):
        print_color_block(hex_code, f"{harmony.kind[:12]} {i}")
    print()


def get_harmony_parser() -> argparse.ArgumentParser:
    parser = PaletteLabArgumentParser(
        prog="palettelab harmony",
        description="palettelab harmony: hue-rotation color harmonies",
        formatter_class=argparse.RawTextHelpFormatter
    )
    add_base_color_arguments(parser)
    parser.add_argument(
        "-k", "--kind",
        type=INPUT_HANDLERS["harmony_kind"],
        default="complementary",
        help="harmony kind: " + ", ".join(HARMONY_KINDS) + " (default: complementary)"
    )
    parser.add_argument(
        "-c", "--count",
        type=INPUT_HANDLERS["count"],
        default=c.MONO_COUNT,
        help=f"member count for monochromatic: 2 to 12 (default: {c.MONO_COUNT})"
    )
    return parser


def main() -> None:
    parser = get_harmony_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_harmony_command(args)
