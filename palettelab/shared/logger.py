#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/logger.py

import sys
import argparse

from palettelab.core import config as c

STDOUT_LEVELS = ("info", "success")


def log(level: str, message: str) -> None:
    """Print '[level] message' with ANSI colors; warnings and errors go to stderr."""
    level = str(level).lower()
    stream = sys.stdout if level in STDOUT_LEVELS else sys.stderr
    tag = f"{c.MSG_BOLD_COLORS.get(level, c.RESET)}[{level}]{c.RESET}"
    body = f"{c.MSG_COLORS.get(level, c.RESET)}{message}{c.RESET}"
    print(f"{tag} {body}", file=stream)


class PaletteLabArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors go through log() and exit with status 2."""

    def error(self, message):
        log('error', message)
        hint = f"run '{self.prog} -h' for the list of options"
        print(f"{c.MSG_BOLD_COLORS['dim']}{hint}{c.RESET}", file=sys.stderr)
        sys.exit(2)
