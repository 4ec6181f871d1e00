"""Command line interface for strip-html.

Reads HTML from a file or standard input, reduces it to a minimal subset and
writes the result to standard output or a file.

Examples
--------
Clean ``page.html`` into ``clean.html`` keeping the original line breaks::

    python strip_html.py page.html --output clean.html --keep-whitespace

Clean HTML piped from another command::

    curl -s https://example.com | python strip_html.py
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from html_processor import ProcessingOptions, process_html

__version__ = "1.0.0"

PROG = "strip-html"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Strip scripts, styles, comments, media and attributes from HTML"
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Input HTML file (if not specified, stdin will be used)",
    )
    parser.add_argument(
        "-k",
        "--keep-whitespace",
        action="store_true",
        help="Keep whitespace and newlines in HTML",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Output file (if not specified, stdout will be used)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(path: str | None) -> str:
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def _write_output(path: str | None, html: str) -> None:
    if path:
        Path(path).write_text(html, encoding="utf-8")
    else:
        sys.stdout.write(html)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    if not args.input and sys.stdin.isatty():
        parser.print_help()
        return 0

    options = ProcessingOptions(keep_whitespace=args.keep_whitespace)
    try:
        html = _read_input(args.input)
        logging.info("Read %d characters from %s", len(html), args.input or "<stdin>")
        result = process_html(html, options)
        _write_output(args.output, result)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover - unexpected failure
        print(f"Error: {str(exc) or 'Unknown error'}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI
    raise SystemExit(main())
