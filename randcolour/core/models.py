#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/core/models.py

from enum import Enum
from typing import NamedTuple, Tuple

from . import config as c


class RawColour(NamedTuple):
    """8-bit red, green and blue channels (0-255)."""
    r: int
    g: int
    b: int


class NormalizedColour(NamedTuple):
    """Channels scaled into [0, 1]."""
    r: float
    g: float
    b: float


class Extrema(NamedTuple):
    min: float
    max: float

    @property
    def delta(self) -> float:
        return self.max - self.min

    @property
    def is_grey(self) -> bool:
        return self.min == self.max


# One formatted string per component, e.g. ('0%', '0%', '0%', '100%') for CMYK
ColourResult = Tuple[str, ...]


class ColourModel(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    CMYK = "cmyk"
    HSV = "hsv"
    HSL = "hsl"

    @classmethod
    def parse(cls, value) -> "ColourModel":
        """Resolve a model from an enum member, name or alias (case-insensitive)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key not in c.FORMAT_ALIASES:
            raise ValueError(f"unknown color model: '{value}'")
        return cls(c.FORMAT_ALIASES[key])
