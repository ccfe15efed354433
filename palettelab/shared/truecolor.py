#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """
    Advertise 24-bit color so swatch escapes render. Windows consoles and
    users who opted out through NO_COLOR are left untouched.
    """
    if sys.platform == "win32" or "NO_COLOR" in os.environ:
        return
    if os.environ.get("COLORTERM") not in ("truecolor", "24bit"):
        os.environ["COLORTERM"] = "truecolor"
