#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/shared/formatting.py

from typing import Sequence

from randcolour.core import config as c
from randcolour.core.models import ColourModel, ColourResult


def format_number(value: float) -> str:
    """Round to DECIMALS places and drop trailing zeros ('50', '33.33')."""
    rounded = round(float(value), c.DECIMALS)
    if rounded == 0:
        rounded = 0.0  # no '-0'
    return f"{rounded:.{c.DECIMALS}f}".rstrip("0").rstrip(".")


def format_percent(fraction: float) -> str:
    return f"{format_number(fraction * c.PERCENT)}%"


def format_components(model: ColourModel, values: Sequence) -> ColourResult:
    """Render raw component values as the strings shown for each model.

    HEX takes the 6-digit string, RGB the 8-bit channels, CMYK four
    fractions, HSV/HSL a hue in degrees followed by two fractions.
    """
    model = ColourModel.parse(model)
    if model is ColourModel.HEX:
        return (f"#{values[0]}",)
    if model is ColourModel.RGB:
        return tuple(str(int(round(v))) for v in values)
    if model is ColourModel.CMYK:
        return tuple(format_percent(v) for v in values)
    h, s, x = values
    return (format_number(h), format_percent(s), format_percent(x))


def format_colorspace(model: ColourModel, components: ColourResult) -> str:
    model = ColourModel.parse(model)
    if model is ColourModel.HEX:
        return components[0]
    return f"{model.value}({', '.join(components)})"
