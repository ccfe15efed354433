#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/vision.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.core.vision import CVD_TYPES, are_distinguishable, simulate, suggest_distinguishable_fix
from palettelab.shared.inputs import add_base_color_arguments, resolve_base_color
from palettelab.shared.logger import PaletteLabArgumentParser
from palettelab.shared.parser import handle_color
from palettelab.shared.preview import print_color_block
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor

# argparse dest -> (deficiency, short label)
SIMULATE_FLAGS = {
    "protanopia": ("protanopia", "protan"),
    "deuteranopia": ("deuteranopia", "deuter"),
    "tritanopia": ("tritanopia", "tritan"),
    "protanomaly": ("protanomaly", "protanom"),
    "deuteranomaly": ("deuteranomaly", "deuteranom"),
    "tritanomaly": ("tritanomaly", "tritanom"),
    "achromatopsia": ("achromatopsia", "achroma"),
}


def selected_kinds(args: argparse.Namespace):
    if args.all_simulates:
        return list(CVD_TYPES)
    return [kind for dest, (kind, _) in SIMULATE_FLAGS.items() if getattr(args, dest)]


def print_comparison(base_hex: str, other_hex: str, kinds) -> None:
    """Report whether base_hex and other_hex stay apart under each deficiency."""
    print()
    print_color_block(other_hex, f"{c.BOLD_WHITE}compare{c.RESET}")
    for kind in kinds or CVD_TYPES:
        short = SIMULATE_FLAGS[kind][1]
        if are_distinguishable(base_hex, other_hex, kind):
            print(f"   {short:<11}: {c.MSG_BOLD_COLORS['success']}distinct{c.RESET}")
            continue
        print(f"   {short:<11}: {c.MSG_BOLD_COLORS['error']}merges{c.RESET}")
        fix = suggest_distinguishable_fix(base_hex, other_hex, kind)
        if fix is None:
            print(f"   {'':<11}  no lightness change separates them")
        else:
            print_color_block(fix.hex, f"{'':<11}  try l={fix.lightness:g}%")


def handle_vision_command(args: argparse.Namespace) -> None:
    base_hex, title = resolve_base_color(args)

    print()
    print_color_block(base_hex, f"{c.BOLD_WHITE}{title}{c.RESET}")

    kinds = selected_kinds(args)
    if kinds:
        print()

    intensity = max(0, min(100, args.intensity))
    factor = intensity / c.PERCENT
    perc_str = f"{intensity}%"

    for kind in kinds:
        short = SIMULATE_FLAGS[kind][1]
        sim_hex = simulate(base_hex, kind, factor)
        label = f"{c.MSG_BOLD_COLORS['info']}{short:<11}{perc_str:>5}{c.RESET}"
        print_color_block(sim_hex, label)

    if args.compare:
        print_comparison(base_hex, args.compare, kinds)

    print()


def get_vision_parser() -> argparse.ArgumentParser:
    parser = PaletteLabArgumentParser(
        prog="palettelab vision",
        description="palettelab vision: simulate color blindness",
        formatter_class=argparse.RawTextHelpFormatter
    )
    add_base_color_arguments(parser)
    parser.add_argument(
        "-i", "--intensity",
        type=INPUT_HANDLERS["intensity"],
        default=100,
        help="simulation intensity: 0 to 100 (default: 100)"
    )
    parser.add_argument(
        "-c", "--compare",
        type=handle_color,
        default=None,
        help="second color to check for clashes under each deficiency,\nwith a suggested lightness fix when they merge"
    )
    simulate_group = parser.add_argument_group("simulation types")
    simulate_group.add_argument(
        '-all', '--all-simulates',
        action="store_true",
        help="show all simulation types"
    )
    simulate_group.add_argument(
        '-p', '--protanopia',
        action="store_true",
        help="simulate protanopia red-blind"
    )
    simulate_group.add_argument(
        '-d', '--deuteranopia',
        action="store_true",
        help="simulate deuteranopia green-blind"
    )
    simulate_group.add_argument(
        '-t', '--tritanopia',
        action="store_true",
        help="simulate tritanopia blue-blind"
    )
    simulate_group.add_argument(
        '-pa', '--protanomaly',
        action="store_true",
        help="simulate protanomaly red-weak"
    )
    simulate_group.add_argument(
        '-da', '--deuteranomaly',
        action="store_true",
        help="simulate deuteranomaly green-weak"
    )
    simulate_group.add_argument(
        '-ta', '--tritanomaly',
        action="store_true",
        help="simulate tritanomaly blue-weak"
    )
    simulate_group.add_argument(
        '-a', '--achromatopsia',
        action="store_true",
        help="simulate achromatopsia total-blind"
    )
    return parser


def main() -> None:
    parser = get_vision_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    handle_vision_command(args)
