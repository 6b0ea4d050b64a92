from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from hscpy.diagnostics import format_diagnostic
from hscpy.lexer import dump_tokens
from hscpy.pipeline import parse_raw_file, parse_sketch_file
from hscpy.sketch import ParseMode, dump_sketch

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hscpy", description="Sketch format utilities")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    tokens = sub.add_parser("tokens", help="Print the tokens of a sketch file")
    tokens.add_argument("path", type=Path, help="Path to a .hsc sketch file")

    parse = sub.add_parser("parse", help="Parse a sketch file and print the document")
    parse.add_argument("path", type=Path, help="Path to a .hsc sketch file")
    parse.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.STRICT.value,
        help="Parser mode; permissive does not report ignored modifiers",
    )

    raw = sub.add_parser("raw", help="Verify and parse a raw point-list file")
    raw.add_argument("path", type=Path, help="Path to a raw sketch file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "tokens":
        result = parse_sketch_file(args.path)
        for line in dump_tokens(result.tokens, result.source_text):
            print(line)
        return 0

    if args.command == "parse":
        result = parse_sketch_file(args.path, mode=ParseMode(args.mode))
        for diagnostic in result.diagnostics:
            print(format_diagnostic(diagnostic), file=sys.stderr)
        if result.sketch is None:
            logger.warning("No sketch produced for %s", args.path)
            return 1
        for line in dump_sketch(result.sketch):
            print(line)
        return 0

    if args.command == "raw":
        result = parse_raw_file(args.path)
        for diagnostic in result.diagnostics:
            print(format_diagnostic(diagnostic), file=sys.stderr)
        if result.sketch is None:
            return 1
        print(f"RawSketch strokes={len(result.sketch.strokes)}")
        for stroke in result.sketch.strokes:
            print("  RawStroke " + " ".join(f"({p.x},{p.y})" for p in stroke.points))
        return 0

    raise SystemExit(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
