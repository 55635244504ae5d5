#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/shared/preview.py

import re

from randcolour.core import config as c
from randcolour.core.conversions import hex_to_rgb

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')

LABEL_WIDTH = 8


def strip_ansi(s: str) -> str:
    return _ANSI_ESCAPE.sub('', s)


def get_visible_len(s: str) -> int:
    return len(strip_ansi(s))


def pad_label(label: str, width: int = LABEL_WIDTH) -> str:
    return f"{label}{' ' * max(0, width - get_visible_len(label))}"


def color_block(hex_code: str, title: str = "color") -> str:
    """One swatch line: title, a truecolor block and the '#hex' code."""
    r, g, b = hex_to_rgb(hex_code)
    return (
        f"{pad_label(title)}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{r};{g};{b}m                {c.RESET}  "
        f"{c.BOLD_WHITE}#{hex_code}{c.RESET}"
    )


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    print(color_block(hex_code, title), end=end)
