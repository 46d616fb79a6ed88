#!/usr/bin/env python3
"""
Number Reader — Entry Point
============================

Reads each number given on the command line in words.

Usage:
    python main.py                              # Demo: 3000001
    python main.py 15 21 1,000,000 -1.25        # Several numbers
    NUMBER_READER_CONFIG=cfg.json python main.py 42
    NUMBER_READER_LOG_LEVEL=DEBUG python main.py 42
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from number_reader.config import load_config_from_env
from number_reader.exceptions import NumberReadingError
from number_reader.models import ReadingConfig
from number_reader.reader import convert_number_to_words

load_dotenv()

DEMO_NUMBER = "3000001"


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_reading(value: str, config: ReadingConfig) -> bool:
    """Print one number and its reading (or the reason it was rejected).

    Returns:
        True if the number was read, False if it was rejected.
    """
    try:
        text = convert_number_to_words(value, config)
    except NumberReadingError as exc:
        print(f"  {value:>20} {_DIM}→{_RESET} {_RED}[{exc.code}]{_RESET} {exc.message}")
        return False
    print(f"  {value:>20} {_DIM}→{_RESET} {_BOLD}{_GREEN}{text}{_RESET}")
    return True


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Read every argument (or the demo number) and return the exit code."""
    level = getattr(logging, os.environ.get("NUMBER_READER_LOG_LEVEL", "").upper(), None)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    values = sys.argv[1:] if argv is None else argv
    config = load_config_from_env()

    results = [print_reading(value, config) for value in (values or [DEMO_NUMBER])]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
