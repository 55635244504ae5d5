#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/logic/colour/resolver.py

import argparse
from typing import List, Tuple

from randcolour.core import config as c
from randcolour.core.sampler import random_hex, seeded_rng


def resolve_colour_input(args: argparse.Namespace) -> Tuple[str, str]:
    """Resolve raw CLI input into a base hex and a display title"""
    if getattr(args, "hex", None):
        return args.hex, "current"

    seed = getattr(args, "seed", None)
    rng = seeded_rng(seed) if seed is not None else None
    return random_hex(rng), "random"


def resolve_formats(args: argparse.Namespace) -> List[str]:
    """Requested output formats in order, without duplicates; hex by default"""
    if getattr(args, "all_formats", False):
        return list(c.FORMAT_ORDER)

    formats = []
    for fmt in getattr(args, "to_format", None) or []:
        if fmt not in formats:
            formats.append(fmt)
    return formats or ["hex"]
