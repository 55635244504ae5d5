#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/core/errors.py


class RandcolourError(Exception):
    """Base class for errors raised by randcolour."""


class MalformedInput(RandcolourError, ValueError):
    """Raised when a hex color is not exactly 6 hexadecimal characters."""

    def __init__(self, value, reason: str = "expected 6 hexadecimal digits"):
        self.value = value
        self.reason = reason
        shown = " ".join(str(value).split()) if value is not None else ""
        super().__init__(f"invalid hex value: '{shown}' ({reason})")
