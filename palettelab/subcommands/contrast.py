#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/contrast.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.core.contrast import (
    contrast_ratio,
    format_contrast_ratio,
    get_contrast_result,
    optimal_text_color,
    suggest_contrasting_color,
    wcag_level,
)
from palettelab.shared.logger import PaletteLabArgumentParser
from palettelab.shared.parser import handle_color
from palettelab.shared.preview import print_color_block, print_text_sample
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor


def _pass_fail(ok: bool) -> str:
    if ok:
        return f"{c.MSG_BOLD_COLORS['success']}Pass{c.RESET}"
    return f"{c.MSG_BOLD_COLORS['error']}Fail{c.RESET}"


def handle_contrast_command(args: argparse.Namespace) -> None:
    fg, bg = args.foreground, args.background
    result = get_contrast_result(fg, bg)
    # the level uses the exact ratio, like the pass flags
    level = wcag_level(contrast_ratio(fg, bg))

    print()
    print_color_block(fg, f"{c.BOLD_WHITE}foreground{c.RESET}")
    print_color_block(bg, f"{c.BOLD_WHITE}background{c.RESET}")
    print()
    print_text_sample(fg, bg)
    print()
    print(f"   ratio       : {format_contrast_ratio(result.ratio)}  ({level})")
    print(f"   AA          : {_pass_fail(result.aa_normal)}")
    print(f"   AA-Large    : {_pass_fail(result.aa_large)}")
    print(f"   AAA         : {_pass_fail(result.aaa_normal)}")
    print(f"   AAA-Large   : {_pass_fail(result.aaa_large)}")
    print()
    print_color_block(optimal_text_color(bg), "best text on bg")

    if args.fix:
        fixed = suggest_contrasting_color(bg, fg, args.target)
        print_color_block(fixed, f"fixed for {args.target:g}:1")
    print()


def get_contrast_parser() -> argparse.ArgumentParser:
    parser = PaletteLabArgumentParser(
        prog="palettelab contrast",
        description="palettelab contrast: WCAG contrast between two colors",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-f", "--foreground",
        type=handle_color,
        required=True,
        help="text color"
    )
    parser.add_argument(
        "-b", "--background",
        type=handle_color,
        required=True,
        help="background color"
    )
    parser.add_argument(
        "-x", "--fix",
        action="store_true",
        help="suggest a foreground that reaches the target ratio"
    )
    parser.add_argument(
        "-tr", "--target",
        type=INPUT_HANDLERS["ratio"],
        default=c.WCAG_AA_NORMAL,
        help=f"target ratio for --fix (default: {c.WCAG_AA_NORMAL:g})"
    )
    return parser


def main() -> None:
    parser = get_contrast_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_contrast_command(args)
