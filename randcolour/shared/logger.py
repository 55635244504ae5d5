#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: randcolour/shared/logger.py

import argparse
import sys

from randcolour.core import config as c

STDOUT_LEVELS = ("info", "success")


def format_message(level: str, message: str, color: bool = True) -> str:
    """'[level] message', wrapped in the level's ANSI colors when `color` is set."""
    level = str(level).lower()
    if not color:
        return f"[{level}] {message}"
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    return f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}"


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in STDOUT_LEVELS else sys.stderr
    # plain text when redirected to a file or pipe
    print(format_message(level, message, color=stream.isatty()), file=stream)


class RandcolourArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """Log the usage error with a pointer to --help, then exit with code 2."""
        log('error', message)
        log('info', f"use '{self.prog} --help' for more information")
        sys.exit(2)
