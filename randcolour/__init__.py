#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/__init__.py

__version__ = "0.1.0"

from randcolour.core.colour import convert_hex, random_colour, render_hex
from randcolour.core.conversions import hex_to_rgb
from randcolour.core.errors import MalformedInput, RandcolourError
from randcolour.core.models import ColourModel

__all__ = [
    "__version__",
    "ColourModel",
    "MalformedInput",
    "RandcolourError",
    "convert_hex",
    "hex_to_rgb",
    "random_colour",
    "render_hex",
]
