#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/core/config.py

# ==========================================
# Color Math Constants
# ==========================================

UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
PERCENT = 100.0                    # Fraction to percentage scale
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL/HSV
HUE_GREEN_OFFSET = 2.0             # Sector offset when green is the dominant channel
HUE_BLUE_OFFSET = 4.0              # Sector offset when blue is the dominant channel

# ==========================================
# Application Logic & Constraints
# ==========================================

HEX_LEN = 6                        # Digits in a 24-bit hex color without '#'
HEX_CHANNEL_LEN = 2                # Digits per channel
MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
MAX_SEED = 999_999_999_999_999_999 # Upper bound accepted by --seed
DECIMALS = 2                       # Decimal places kept in rendered components

# Format aliases for --to-format
FORMAT_ALIASES = {
    'hex': 'hex',
    'rgb': 'rgb',
    'cmyk': 'cmyk',
    'hsv': 'hsv',
    'hsb': 'hsv',
    'hsl': 'hsl',
}

# Rendering order for --all-formats
FORMAT_ORDER = ['hex', 'rgb', 'cmyk', 'hsv', 'hsl']

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"
