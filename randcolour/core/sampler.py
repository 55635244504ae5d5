#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/core/sampler.py

import random
from typing import Optional

from . import config as c


def random_hex(rng: Optional[random.Random] = None) -> str:
    """Return a uniformly random 6-digit lowercase hex color (no '#')."""
    source = rng if rng is not None else random
    return f"{source.randint(0, c.MAX_DEC):06x}"


def seeded_rng(seed: Optional[int] = None) -> random.Random:
    """Private random source, so seeding never touches the global one."""
    return random.Random(seed)
