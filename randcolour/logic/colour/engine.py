#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/logic/colour/engine.py

import argparse
from typing import Dict, List

from randcolour.core.colour import render_hex
from .resolver import resolve_colour_input, resolve_formats
from .renderer import render_colour_info


def get_colour_data(hex_code: str, formats: List[str]) -> Dict[str, str]:
    """Render the hex color in every requested format."""
    return {fmt: render_hex(hex_code, fmt) for fmt in formats}


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the color command"""
    base_hex, title = resolve_colour_input(args)
    notations = get_colour_data(base_hex, resolve_formats(args))

    render_colour_info(
        hex_code=base_hex,
        title=title,
        notations=notations,
        preview=getattr(args, "preview", False),
    )
