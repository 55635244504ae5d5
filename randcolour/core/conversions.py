#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/core/conversions.py

import re
from typing import Tuple

from . import config as c
from .errors import MalformedInput
from .models import Extrema, NormalizedColour, RawColour

_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")


def hex_to_rgb(hex_code: str) -> RawColour:
    """Convert a 6-digit hex string (no '#') to an RGB tuple.

    Raises MalformedInput for anything that is not exactly six hexadecimal
    characters; short input is never padded and long input never truncated.
    """
    if not isinstance(hex_code, str):
        raise MalformedInput(hex_code, "not a string")
    if len(hex_code) != c.HEX_LEN:
        raise MalformedInput(
            hex_code, f"expected {c.HEX_LEN} characters, got {len(hex_code)}"
        )
    # int(x, 16) tolerates signs, whitespace and underscores
    if not _HEX_RE.fullmatch(hex_code):
        raise MalformedInput(hex_code, "non-hexadecimal character")
    step = c.HEX_CHANNEL_LEN
    return RawColour(*(int(hex_code[i : i + step], 16) for i in (0, 2, 4)))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lowercase hex string."""
    r_clamped = max(0, min(int(c.RGB_MAX), int(round(r))))
    g_clamped = max(0, min(int(c.RGB_MAX), int(round(g))))
    b_clamped = max(0, min(int(c.RGB_MAX), int(round(b))))
    return f"{r_clamped:02x}{g_clamped:02x}{b_clamped:02x}"


def normalize_rgb(r: int, g: int, b: int) -> NormalizedColour:
    """Scale 8-bit channels into [0, 1]."""
    return NormalizedColour(r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX)


def get_extrema(color: NormalizedColour) -> Extrema:
    return Extrema(min(color.r, color.g, color.b), max(color.r, color.g, color.b))


def _hue(color: NormalizedColour, extrema: Extrema) -> float:
    """Hue in degrees for a non-grey color; ties go to red, then green."""
    r, g, b = color
    delta = extrema.delta
    if extrema.max == r:
        h = c.HUE_SECTOR * (((g - b) / delta) % c.HSL_HUE_MOD)
    elif extrema.max == g:
        h = c.HUE_SECTOR * ((b - r) / delta + c.HUE_GREEN_OFFSET)
    else:
        h = c.HUE_SECTOR * ((r - g) / delta + c.HUE_BLUE_OFFSET)
    return (h + c.HUE_MAX) % c.HUE_MAX


def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[float, float, float, float]:
    """Convert RGB to CMYK fractions."""
    color = normalize_rgb(r, g, b)
    k = c.UNIT - get_extrema(color).max
    if k == c.UNIT:
        return 0.0, 0.0, 0.0, c.UNIT
    denom = c.UNIT - k
    cy = (c.UNIT - color.r - k) / denom
    m = (c.UNIT - color.g - k) / denom
    y = (c.UNIT - color.b - k) / denom
    return (cy, m, y, k)


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Convert CMYK fractions back to RGB on the 0-255 scale."""
    r = c.RGB_MAX * (c.UNIT - cy) * (c.UNIT - k)
    g = c.RGB_MAX * (c.UNIT - m) * (c.UNIT - k)
    b = c.RGB_MAX * (c.UNIT - y) * (c.UNIT - k)
    return r, g, b


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSV (hue in degrees, s and v as fractions)."""
    color = normalize_rgb(r, g, b)
    extrema = get_extrema(color)
    v = extrema.max
    if extrema.is_grey:
        return (0.0, 0.0, v)
    s = extrema.delta / v
    return (_hue(color, extrema), s, v)


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert RGB to HSL (hue in degrees, s and l as fractions)."""
    color = normalize_rgb(r, g, b)
    extrema = get_extrema(color)
    L = (extrema.max + extrema.min) / c.DIV_2
    if extrema.is_grey:
        return (0.0, 0.0, L)
    s = extrema.delta / (c.UNIT - abs(c.DIV_2 * L - c.UNIT))
    return (_hue(color, extrema), s, L)
