"""Command line front end for the XML-minus recognizer.

Reads one document from a file, prints its leftmost derivation as it is
produced, and reports the outcome through the exit status:

    0  document parsed successfully
    1  lexical or syntax error, or unreadable input
    2  end tag name mismatch
    3  duplicate attribute name

Usage:
    xmlminus document.xml
    python -m xmlminus --tokens document.xml
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from xmlminus import Recognizer, __version__
from xmlminus.errors import XmlMinusError
from xmlminus.utils.logger import get_logger

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Document parsed successfully!"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmlminus",
        description="Recognize an XML-minus document and print its leftmost derivation.",
    )
    parser.add_argument("path", type=Path, help="Document to recognize")
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token sequence before parsing",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report misplaced '=' runs and unscannable text as lexical errors",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the derivation; report the outcome by exit status only",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        document = args.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read {args.path}: {e}", file=sys.stderr)
        return 1

    recognizer = Recognizer(strict_lexing=args.strict)
    on_production = None if args.quiet else print

    try:
        tokens = recognizer.tokenize(document)
        if args.tokens:
            for token in tokens:
                print(f"{token.kind.name} {token.lexeme}")
            print()
        recognizer.parse(tokens, on_production=on_production)
    except XmlMinusError as e:
        logger.debug("Recognition failed", exc_info=True)
        print(e, file=sys.stderr)
        print("Parsing terminated...", file=sys.stderr)
        return e.exit_code

    if not args.quiet:
        print()
        print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
