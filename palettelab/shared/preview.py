#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/preview.py

import re

from palettelab.core import config as c
from palettelab.core.contrast import optimal_text_color
from palettelab.core.conversions import hex_to_rgb

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')

TITLE_WIDTH = 18
SWATCH = " " * 16


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def color_block(hex_code: str, title: str = "color") -> str:
    """One line: padded title, a truecolor swatch and the hex code."""
    r, g, b = hex_to_rgb(hex_code)
    padding = " " * max(0, TITLE_WIDTH - get_visible_len(title))
    return (
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{r};{g};{b}m{SWATCH}{c.RESET}  {c.BOLD_WHITE}{hex_code}{c.RESET}"
    )


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    print(color_block(hex_code, title), end=end)


def print_text_sample(foreground: str, background: str, text: str = " Sample Text ") -> None:
    """Render text in the foreground color on the background color."""
    fr, fg, fb = hex_to_rgb(foreground)
    br, bg, bb = hex_to_rgb(background)
    print(f"\033[38;2;{fr};{fg};{fb};48;2;{br};{bg};{bb}m{text}{c.RESET}")


def print_on_swatch(hex_code: str, label: str) -> None:
    """Label printed on top of its own color, in whichever of black or white reads best."""
    print_text_sample(optimal_text_color(hex_code), hex_code, f" {label:<12}{hex_code} ")
