#!/usr/bin/env python3
"""
format_properties
-----------------
Turn a pasted WhatsApp chat export of property listings into numbered 15-field
records, and optionally a 19-column CSV.

Usage
  format-properties -i chat.txt
  format-properties -i chat.txt -o formatted.txt --csv out/properties.csv
  format-properties -i chat.txt --json --config my_vocabulary.yml
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Sequence

from property_formatter.modules.io_utils import read_text_safely, write_text
from property_formatter.modules.qa_utils import incomplete_count
from property_formatter.modules.record_serializer import safe_csv_filename, write_csv
from property_formatter.modules.vocabulary import VocabularyError, load_vocabulary
from property_formatter.pipeline.orchestrator import EmptyInputError, FormattingFailed, run_formatter

logger = logging.getLogger("property_formatter")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Extract property listing records from a chat export")
    p.add_argument("-i", "--input", required=True, help="Path to the chat export (UTF-8/UTF-8-SIG)")
    p.add_argument("-o", "--output", help="Write the formatted text here (defaults to stdout)")
    csv_out = p.add_mutually_exclusive_group()
    csv_out.add_argument("--csv", dest="csv_path", help="Also write the records as CSV to this path")
    csv_out.add_argument("--csv-auto", action="store_true",
                         help="Also write CSV as Property_Details_<DD>-<MM>-<YY>,<HH>-<MM>.csv")
    p.add_argument("--config", help="Vocabulary file (.yml/.yaml/.json/.toml) replacing the packaged one")
    p.add_argument("--json", action="store_true", help="Emit a JSON list of {text, data} instead of text")
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

    try:
        vocab = load_vocabulary(args.config)
    except (FileNotFoundError, ValueError, VocabularyError) as exc:
        logger.error("Could not load vocabulary: %s", exc)
        return 2

    try:
        run = run_formatter(text, vocab)
    except EmptyInputError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except FormattingFailed as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.json:
        rendered = json.dumps([o.as_dict() for o in run.outputs], ensure_ascii=False, indent=2)
    else:
        rendered = run.text

    if args.output:
        write_text(args.output, rendered + "\n")
        logger.info("Saved: %s", args.output)
    else:
        sys.stdout.write(rendered + "\n")

    csv_path = args.csv_path or (safe_csv_filename(datetime.now()) if args.csv_auto else None)
    if csv_path:
        if not run.outputs:
            logger.warning("No records to export; CSV not written")
        else:
            try:
                write_csv(run.records, csv_path)
                logger.info("Saved: %s", csv_path)
            except OSError as exc:
                logger.error("CSV export failed: %s", exc)
                return 1

    incomplete = incomplete_count(run.records)
    if incomplete:
        logger.info("%d of %d records are less than half complete", incomplete, len(run.outputs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
