"""Command line interface for the sprie spell checker."""

from __future__ import annotations

import argparse
import logging
import sys

from sprie import __version__
from sprie.checker import SpellChecker
from sprie.dictionary import load_default_dictionary
from sprie.files import file_exists
from sprie.options import DEFAULT_MAX_DISTANCE, DEFAULT_MAX_SUGGESTIONS, SpellCheckOptions
from sprie.report import format_results, generate_report

log = logging.getLogger("sprie")

EPILOG = """\
examples:
  sprie document.txt
  sprie --file document.txt --dictionary custom-dict.txt
  sprie --file document.txt --output report.txt --max-suggestions 3
  echo "helo wrold" | sprie

The dictionary file holds one word per line.
Lines starting with # are comments and are ignored.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sprie",
        description="sprie -- trie-backed spell checker",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", default=None,
                        help="File to check for spelling errors (default: stdin)")
    parser.add_argument("-f", "--file", dest="file_opt", default=None,
                        help="File to check for spelling errors")
    parser.add_argument("-d", "--dictionary", default=None,
                        help="Dictionary / word list file")
    parser.add_argument("-o", "--output", default=None,
                        help="Write a report to this path")
    parser.add_argument("-s", "--max-suggestions", type=int, default=DEFAULT_MAX_SUGGESTIONS,
                        help=f"Maximum number of suggestions (default: {DEFAULT_MAX_SUGGESTIONS})")
    parser.add_argument("-m", "--max-distance", type=int, default=DEFAULT_MAX_DISTANCE,
                        help=f"Maximum edit distance for suggestions (default: {DEFAULT_MAX_DISTANCE})")
    parser.add_argument("--no-prefix", action="store_true",
                        help="Do not suggest words sharing the first letters")
    parser.add_argument("--no-ignore-common", action="store_true",
                        help="Check common words against the dictionary too")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug-level logging")
    parser.add_argument("-v", "--version", action="version",
                        version=f"sprie - python spell checker v{__version__}")
    return parser


def run_file(checker: SpellChecker, path: str, output: str | None) -> None:
    if not file_exists(path):
        raise FileNotFoundError(f"file not found- {path}")
    print(f"checking file- {path}\n")
    results = checker.check_file(path)
    print(format_results(results))
    if output:
        generate_report(results, output)
        print(f"report saved to- {output}")


def run_stdin(checker: SpellChecker, output: str | None) -> None:
    if sys.stdin.isatty():
        print("enter text to check (Press Ctrl+D to finish)-")
    text = sys.stdin.read()
    print("\nchecking text...\n")
    results = checker.check_text(text)
    print(format_results(results))
    if output:
        generate_report(results, output)
        print(f"report saved to- {output}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        options = SpellCheckOptions(
            max_suggestions=args.max_suggestions,
            max_distance=args.max_distance,
            include_prefix_suggestions=not args.no_prefix,
            ignore_common_words=not args.no_ignore_common,
        )
        checker = SpellChecker(options)
        load_default_dictionary(checker, args.dictionary)

        path = args.file_opt or args.file
        if path:
            run_file(checker, path, args.output)
        else:
            run_stdin(checker, args.output)
    except (OSError, ValueError) as exc:
        print(f"error- {exc}", file=sys.stderr)
        return 1
    return 0
