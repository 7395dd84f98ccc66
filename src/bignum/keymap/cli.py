"""Командная строка bignum-keymap.

Читает байты до конца потока (stdin или файл), пишет подставленные
байты в stdout или файл. Код возврата 0 при нормальном конце потока.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from bignum.keymap.table import remap_stream
from bignum.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bignum-keymap",
        description="Rewrite every input byte through the fixed keyboard substitution table.",
    )
    parser.add_argument("input", nargs="?", type=Path, help="input file (default: stdin)")
    parser.add_argument("-o", "--output", type=Path, help="output file (default: stdout)")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    source = open(args.input, "rb") if args.input else sys.stdin.buffer
    sink = open(args.output, "wb") if args.output else sys.stdout.buffer
    try:
        written = remap_stream(source, sink)
    finally:
        if args.input:
            source.close()
        if args.output:
            sink.close()

    logger.info("Remapped %d bytes", written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
