#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/convert.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.core import conversions as conv
from palettelab.shared.formatting import format_colorspace
from palettelab.shared.inputs import add_base_color_arguments, resolve_base_color
from palettelab.shared.logger import PaletteLabArgumentParser, log
from palettelab.shared.preview import print_color_block
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor


def color_in_format(hex_code: str, fmt: str) -> str:
    if fmt == "hex":
        return format_colorspace("hex", hex_code)
    if fmt == "rgb":
        return format_colorspace("rgb", *conv.hex_to_rgb(hex_code))
    if fmt == "hsl":
        return format_colorspace("hsl", *conv.hex_to_hsl(hex_code))
    if fmt == "hsv":
        return format_colorspace("hsv", *conv.hex_to_hsv(hex_code))
    if fmt == "oklch":
        return format_colorspace("oklch", *conv.hex_to_oklch(hex_code))
    if fmt == "cmyk":
        return format_colorspace("cmyk", *conv.hex_to_cmyk(hex_code))
    if fmt == "lab":
        return format_colorspace("lab", *conv.hex_to_lab(hex_code))
    return format_colorspace("oklab", *conv.hex_to_oklab(hex_code))


def handle_convert_command(args: argparse.Namespace) -> None:
    if args.to is not None and args.to not in c.CONVERT_FORMATS:
        log("error", f"unknown format '{args.to}', expected one of: {', '.join(c.CONVERT_FORMATS)}")
        sys.exit(2)

    base_hex, title = resolve_base_color(args)

    if args.to:
        print(color_in_format(base_hex, args.to))
        return

    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    for fmt in c.CONVERT_FORMATS:
        print(f"   {fmt:<8}: {color_in_format(base_hex, fmt)}")
    print()


def get_convert_parser() -> argparse.ArgumentParser:
    parser = PaletteLabArgumentParser(
        prog="palettelab convert",
        description="palettelab convert: show a color in other color models",
        formatter_class=argparse.RawTextHelpFormatter
    )
    add_base_color_arguments(parser)
    parser.add_argument(
        "-t", "--to",
        type=INPUT_HANDLERS["format"],
        default=None,
        help=f"print only this format: {', '.join(c.CONVERT_FORMATS)}"
    )
    return parser


def main() -> None:
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_convert_command(args)
