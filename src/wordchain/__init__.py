"""Word Chain Solver.

Reads a list of words and prints them in an order where each word differs from the next by a
single inserted, deleted or replaced character.  This is a Hamiltonian path in the graph of
words that are one edit apart, found with a dynamic program over subsets of the words.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .solver.chain import ChainReport, solve_word_chain, word_chain
from .solver.config import config as solver_config
from .solver.hamiltonian import TooManyWordsError, WordChainError
from .util import NO_SOLUTION_MESSAGE, count_str, elapsed_str, format_chain
from .words import is_one_away, is_valid_chain, read_words

__all__ = [
    "ChainReport",
    "TooManyWordsError",
    "WordChainError",
    "is_one_away",
    "is_valid_chain",
    "main",
    "read_words",
    "solve_word_chain",
    "word_chain",
]


def print_report(report: ChainReport, *, file: TextIO) -> None:
    """Print search diagnostics."""
    print(f"Words: {len(report.words)}", file=file, flush=True)
    print(f"One-edit pairs: {count_str(report.edge_count, 'pair')}", file=file, flush=True)
    print(f"Connected: {'yes' if report.connected else 'no'}", file=file, flush=True)
    if report.stats is None:
        print("Search skipped.", file=file, flush=True)
        return
    print(
        f"Examined {count_str(report.stats.subsets_examined, 'subset')}, "
        f"{count_str(report.stats.reachable_states, 'reachable state')}",
        file=file,
        flush=True,
    )
    print(f"Search time: {elapsed_str(report.stats.elapsed)}", file=file, flush=True)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the word chain solver."""
    parser = argparse.ArgumentParser(
        prog="wordchain",
        description="Order words so that each differs from the next by one character edit.",
    )
    parser.add_argument(
        "input", nargs="?", help="File to read words from (default: standard input)"
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=None,
        help=f"Largest word count to search (default: {solver_config.max_words})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print search statistics to stderr"
    )
    args = parser.parse_args(argv)
    verbose = args.verbose or solver_config.verbose

    if args.input is None:
        words = read_words(sys.stdin)
    else:
        path = Path(args.input)
        if not path.is_file():
            print(f"Input file not found: {path}", file=sys.stderr)
            sys.exit(1)
        with path.open("r", encoding="utf-8") as f:
            words = read_words(f)

    try:
        report = solve_word_chain(words, max_words=args.max_words)
    except TooManyWordsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if verbose:
        print_report(report, file=sys.stderr)

    if not report.chain:
        print(NO_SOLUTION_MESSAGE)
        sys.exit(0)
    print(format_chain(report.chain))
