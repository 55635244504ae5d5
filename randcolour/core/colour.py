#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/core/colour.py

import random
from typing import Optional, Union

from . import conversions as conv
from .models import ColourModel, ColourResult
from .sampler import random_hex
from randcolour.shared.formatting import format_colorspace, format_components

ModelLike = Union[ColourModel, str]


def convert_hex(hex_code: str, model: ModelLike) -> ColourResult:
    """Convert a 6-digit hex color into the components of `model`.

    The hex string is always parsed, so a malformed value raises
    MalformedInput even when HEX output is requested.
    """
    model = ColourModel.parse(model)
    r, g, b = conv.hex_to_rgb(hex_code)

    if model is ColourModel.HEX:
        values = (hex_code,)
    elif model is ColourModel.RGB:
        values = (r, g, b)
    elif model is ColourModel.CMYK:
        values = conv.rgb_to_cmyk(r, g, b)
    elif model is ColourModel.HSV:
        values = conv.rgb_to_hsv(r, g, b)
    else:
        values = conv.rgb_to_hsl(r, g, b)

    return format_components(model, values)


def render_hex(hex_code: str, model: ModelLike) -> str:
    """Convert and render a hex color, e.g. 'hsl(0, 100%, 50%)'."""
    model = ColourModel.parse(model)
    return format_colorspace(model, convert_hex(hex_code, model))


def random_colour(
    model: ModelLike = ColourModel.HEX, rng: Optional[random.Random] = None
) -> str:
    """Generate a random color rendered in the notation of `model`.

    Pass a seeded `random.Random` as `rng` for reproducible output.
    """
    return render_hex(random_hex(rng), model)
