#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/main.py

import argparse
import sys
from typing import List, Optional

from randcolour import __version__
from randcolour.core import config as c
from randcolour.core.errors import MalformedInput
from randcolour.logic.colour import engine
from randcolour.shared.logger import log, RandcolourArgumentParser
from randcolour.shared.sanitizer import INPUT_HANDLERS
from randcolour.shared.truecolor import supports_truecolor


def get_colour_parser() -> argparse.ArgumentParser:
    """Create argument parser for the randcolour command."""
    parser = RandcolourArgumentParser(
        prog="randcolour",
        description="randcolour: generate a random color and render it as hex, rgb, cmyk, hsv or hsl",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    formats_list = " ".join(c.FORMAT_ORDER)

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"randcolour {__version__}",
        help="show program version and exit",
    )

    # Color Input Group
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="6-digit hex color code, '#' optional",
    )
    color_input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate a random hex color (default)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )

    # Output Group
    output_group = parser.add_argument_group("output formats")
    output_group.add_argument(
        "-t",
        "--to-format",
        action="append",
        type=INPUT_HANDLERS["to_format"],
        help="format to render, may be repeated\n" f"all formats: {formats_list}",
    )
    output_group.add_argument(
        "-all",
        "--all-formats",
        action="store_true",
        help="render every format",
    )
    output_group.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="show a truecolor swatch of the color",
    )
    return parser


def handle_colour_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    try:
        engine.run(args)
    except MalformedInput as e:
        log("error", str(e))
        sys.exit(2)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for randcolour CLI"""
    parser = get_colour_parser()
    args = parser.parse_args(argv)

    # A seed only drives random sampling
    if args.hex and args.seed is not None:
        parser.error("argument -s/--seed: not allowed with argument -H/--hex")

    if args.preview and not supports_truecolor():
        log("warning", "terminal does not report truecolor support (COLORTERM), swatch skipped")
        args.preview = False

    handle_colour_command(args)


if __name__ == "__main__":
    main()
