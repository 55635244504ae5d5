#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/shared/truecolor.py

import os
from typing import Mapping, Optional

TRUECOLOR_VALUES = ("truecolor", "24bit")


def supports_truecolor(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when COLORTERM advertises 24-bit color, needed by the swatch escapes."""
    env = os.environ if environ is None else environ
    return env.get("COLORTERM", "").strip().lower() in TRUECOLOR_VALUES
