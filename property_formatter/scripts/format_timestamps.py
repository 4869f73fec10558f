#!/usr/bin/env python3
"""
format_timestamps
-----------------
Rewrite WhatsApp export timestamps "[2:15 PM, 25/03/2024]" as "[25/3, 2:15 pm]" so the
text can be fed to format-properties.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from property_formatter.modules.io_utils import read_text_safely, write_text
from property_formatter.modules.timestamp_normalizer import count_timestamps, normalize_timestamps

logger = logging.getLogger("property_formatter")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Normalize WhatsApp message timestamps")
    p.add_argument("-i", "--input", required=True, help="Path to the chat export")
    p.add_argument("-o", "--output", help="Write the corrected text here (defaults to stdout)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        text = read_text_safely(args.input)
    except FileNotFoundError:
        logger.error("Input file not found: %s", args.input)
        return 2
    if not text.strip():
        print("Please paste your WhatsApp message before formatting.", file=sys.stderr)
        return 2

    found = count_timestamps(text)
    corrected = normalize_timestamps(text)
    if found:
        logger.info("formatted %d timestamps", found)
    else:
        logger.info("timestamps are already in the correct format")

    if args.output:
        write_text(args.output, corrected)
        logger.info("Saved: %s", args.output)
    else:
        sys.stdout.write(corrected)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
