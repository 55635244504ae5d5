#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/shared/sanitizer.py

import argparse
import re

from randcolour.core import config as c
from randcolour.core.conversions import hex_to_rgb
from randcolour.core.errors import MalformedInput


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def strip_hex(value: str) -> str:
    """
    Removes surrounding whitespace, quotes and a single leading '#'.
    The remaining characters are kept as typed so validation can reject them.
    """
    if value is None:
        return ""
    s = str(value).strip().strip("\"'`").strip()
    if s.startswith("#"):
        s = s[1:]
    return s


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up format names.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments; returns the bare lowercase digits."""
    cleaned = strip_hex(v)
    try:
        hex_to_rgb(cleaned)
    except MalformedInput as e:
        raise argparse.ArgumentTypeError(f"invalid hex value: '{_sanitize_for_log(v)}' ({e.reason})")
    return cleaned.lower()


def handle_format(v: str) -> str:
    """Validator for color model names; resolves aliases such as 'hsb'."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.FORMAT_ALIASES:
        raw = _sanitize_for_log(v)
        formats = " ".join(c.FORMAT_ORDER)
        raise argparse.ArgumentTypeError(f"invalid format: '{raw}' (choose from {formats})")
    return c.FORMAT_ALIASES[cleaned]


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "to_format": handle_format,
    "seed": handle_int_range(0, c.MAX_SEED),
}
