"""Word-level helpers: the edit-distance-one relation and word list I/O."""

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import TextIO


def is_one_away(a: str, b: str) -> bool:
    """Return whether `a` and `b` are exactly one character edit apart.

    An edit is a single insertion, deletion or substitution.  Identical strings are
    zero edits apart, so `is_one_away(w, w)` is always False.

    Args:
        a: The first word.
        b: The second word.
    """
    long, short = (a, b) if len(a) >= len(b) else (b, a)
    if len(long) - len(short) > 1:
        return False

    if len(long) == len(short):
        # Substitution: exactly one position differs
        differences = sum(1 for x, y in zip(long, short) if x != y)
        return differences == 1

    # Insertion/deletion: removing one character of the longer word yields the shorter
    return any(long[:i] + long[i + 1 :] == short for i in range(len(long)))


def read_words(stream: TextIO | Iterable[str]) -> list[str]:
    """Read whitespace-separated words from a text stream, in input order.

    Args:
        stream: An open text file (or any iterable of lines).

    Returns:
        The list of words.  Duplicates are kept.
    """
    words: list[str] = []
    for line in stream:
        words.extend(line.split())
    return words


def is_valid_chain(words: Sequence[str], chain: Sequence[str]) -> bool:
    """Check that `chain` is a word chain over exactly the given words.

    The chain must use every word of `words` exactly as many times as it occurs there, and
    every consecutive pair in the chain must be one edit apart.
    """
    if Counter(words) != Counter(chain):
        return False
    return all(is_one_away(prev, cur) for prev, cur in zip(chain, chain[1:]))
