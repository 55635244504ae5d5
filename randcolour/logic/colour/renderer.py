#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/logic/colour/renderer.py

from typing import Dict

from randcolour.core import config as c
from randcolour.shared.preview import pad_label, print_color_block


def _bold(text: str) -> str:
    return f"{c.BOLD_WHITE}{text}{c.RESET}"


def render_colour_info(
    hex_code: str,
    title: str,
    notations: Dict[str, str],
    preview: bool = False,
) -> None:
    """Strictly prints color information. Notations are pre-rendered by the engine."""
    if preview:
        print_color_block(hex_code, _bold(title))

    # A lone notation prints bare so it can be piped
    if len(notations) == 1 and not preview:
        print(next(iter(notations.values())))
        return

    for fmt, text in notations.items():
        label = f"{c.MSG_BOLD_COLORS['info']}{fmt}{c.RESET}"
        print(f"{pad_label(label)}{c.BOLD_WHITE}:{c.RESET}   {_bold(text)}")
