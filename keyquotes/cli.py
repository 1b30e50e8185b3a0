#!/usr/bin/env python3
"""
Keyquotes CLI

Command-line interface for converting JSON-like files between the loose
dialect (bare keys) and the strict dialect (quoted keys).

Usage:
    python -m keyquotes <source> [options]
    python -m keyquotes config.json                   # loose -> strict, in place
    python -m keyquotes config.json --to loose        # strict -> loose, in place
    python -m keyquotes ./configs/ -o ./strict_out    # whole directory
    cat config.json | python -m keyquotes -           # stdin -> stdout

Options:
    --to {strict,loose}      Dialect to produce (default: strict)
    --quote {double,single}  Quote style for added key quotes (default: double)
    -o, --output DIR         Output directory (default: rewrite in place)
    --stdout                 Print to stdout instead of saving files
    --directions             Show the available conversions
"""

import argparse
import sys

from keyquotes.converter import ConversionDirection
from keyquotes.core import ConversionError, FileConverter
from keyquotes.quotes import QuoteStyle

STDIN_SOURCE = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyquotes",
        description=(
            "Convert JSON-like text between bare keys and quoted keys.\n\n"
            "strict: quote keys, escape tabs/newlines in string values and\n"
            "        drop them from keys\n"
            "loose:  unescape tabs/newlines and strip key quotes\n\n"
            "Text-level rewriting only; the output is not validated as JSON."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m keyquotes config.json\n"
            "  python -m keyquotes config.json --to loose\n"
            "  python -m keyquotes config.json --quote single --stdout\n"
            "  python -m keyquotes ./configs/ -o ./strict_out\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Files or directories to convert ('-' reads stdin)",
    )
    parser.add_argument(
        "--to",
        dest="direction",
        choices=[d.value for d in ConversionDirection],
        default=ConversionDirection.TO_STRICT.value,
        help="Dialect to convert to (default: strict)",
    )
    parser.add_argument(
        "--quote",
        choices=[s.name.lower() for s in QuoteStyle],
        default=QuoteStyle.default().name.lower(),
        help="Quote style for added key quotes (default: double)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: rewrite files in place)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print converted text to stdout instead of saving files",
    )
    parser.add_argument(
        "--directions",
        action="store_true",
        help="Show the available conversions and exit",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.directions:
        _show_directions()
        return 0

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify files or directories to convert.")
        return 1

    direction = ConversionDirection(args.direction)
    engine = FileConverter(
        output_dir=args.output,
        quote_style=QuoteStyle.from_name(args.quote),
        verbose=not args.stdout,
    )
    save = not args.stdout

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            if source == STDIN_SOURCE:
                text = engine.convert_text(sys.stdin.read(), direction)
            else:
                text = engine.convert(source, direction, save=save)
        except (OSError, ConversionError, UnicodeDecodeError) as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1
            continue

        if source == STDIN_SOURCE:
            sys.stdout.write(text)
        elif args.stdout:
            print(text)
        success_count += 1

    # Keep stdout clean when it carries converted text
    report = sys.stderr if (args.stdout or STDIN_SOURCE in args.sources) else sys.stdout
    print(f"Done: {success_count} converted, {error_count} errors", file=report)

    return 1 if error_count else 0


def _show_directions():
    """Display all available conversions."""
    print("\nAvailable Conversions:")
    print("-" * 40)
    for name, description in FileConverter.supported_directions().items():
        print(f"  {name:<8} {description}")
    print()


if __name__ == "__main__":
    sys.exit(main())
