"""Command-line entry point that prints a greeting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from greeter.core import Greeter, LanguageCode

LANGUAGES = {
    "en": LanguageCode.EN,
    "de": LanguageCode.DE,
    "es": LanguageCode.ES,
    "fr": LanguageCode.FR,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A program to welcome the world!", add_help=False
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show help")
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Print the current version number",
    )
    parser.add_argument("-n", "--name", default="World", help="Name to greet")
    parser.add_argument("-l", "--lang", default="en", help="Language code to use")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, print a greeting and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.help:
        print(parser.format_help())
        return 0

    language = LANGUAGES.get(args.lang)
    if language is None:
        print(f"unknown language code: {args.lang}", file=sys.stderr)
        return 1

    print(Greeter(args.name).greet(language))
    return 0


if __name__ == "__main__":
    sys.exit(main())