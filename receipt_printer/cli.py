"""Command line: encode a receipt JSON document for the printer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .escpos import ReceiptEncodingError, encode_receipt
from .models import ReceiptDataError, from_json

logger = logging.getLogger(__name__)

FORMATS = ("base64", "raw", "rawbt", "intent")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="receipt-printer",
        description="Encode a sale or service receipt (JSON) as ESC/POS for RawBT.",
    )
    parser.add_argument("input", help="receipt JSON file, or - for stdin")
    parser.add_argument("--width", type=int, default=None, help="printable columns (default from settings)")
    parser.add_argument("--format", choices=FORMATS, default="base64", help="output format")
    parser.add_argument("--output", "-o", default=None, help="write to this file instead of stdout")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)

    if args.input == "-":
        source = sys.stdin.read()
    else:
        source = Path(args.input).read_text(encoding="utf-8")

    try:
        job = encode_receipt(from_json(source), args.width)
    except (ReceiptDataError, ReceiptEncodingError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.format == "raw":
        output = job.payload
    else:
        text = {"base64": job.base64, "rawbt": job.rawbt_url, "intent": job.intent_url}[args.format]
        output = (text + "\n").encode("ascii")

    if args.output:
        Path(args.output).write_bytes(output)
        logger.info(f"Wrote {len(output)} bytes to {args.output}")
    else:
        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
