"""Formatting helpers for the word chain command line."""

from collections.abc import Iterable

NO_SOLUTION_MESSAGE = "No solution is possible."


def format_chain(chain: Iterable[str], sep: str = " ") -> str:
    """Join a word chain for output.  Every word is followed by `sep`, including the last."""
    return "".join(f"{word}{sep}" for word in chain)


def elapsed_str(seconds: float) -> str:
    """Format a duration as "MM:SS.sss"."""
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes):02}:{secs:06.3f}"


def count_str(n: int, noun: str) -> str:
    """Format a count with thousands separators and a naive plural, e.g. "1,024 subsets"."""
    return f"{n:,} {noun}" if n == 1 else f"{n:,} {noun}s"
