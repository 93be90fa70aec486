"""Word chain search: order all words so that neighbours are one edit apart."""

from collections.abc import Sequence
from dataclasses import dataclass

from wordchain.graph import AdjacencyGraph
from wordchain.solver.hamiltonian import SolveStats, solve_hamiltonian_path
from wordchain.words import is_one_away


@dataclass
class ChainReport:
    """Outcome of a word chain search."""

    words: list[str]
    """The input words, in input order."""

    chain: list[str]
    """The words in chain order, or an empty list if no chain exists."""

    edge_count: int
    """Number of word pairs that are one edit apart."""

    connected: bool
    """Whether the one-edit graph is connected."""

    stats: SolveStats | None = None
    """Search statistics, or None if the search was skipped."""


def solve_word_chain(words: Sequence[str], *, max_words: int | None = None) -> ChainReport:
    """Search for a word chain and report how the search went.

    A disconnected graph cannot have a Hamiltonian path, so the (exponential) search is only
    run on connected graphs.

    Args:
        words: The words to chain.  Duplicates are allowed, but can never be neighbours.
        max_words: Word limit for the search.  If None (default), uses the configured value.

    Raises:
        TooManyWordsError: If the graph is connected and has more than `max_words` vertices.
    """
    words = list(words)
    graph = AdjacencyGraph.from_words(words, is_one_away)
    report = ChainReport(
        words=words,
        chain=[],
        edge_count=graph.edge_count,
        connected=graph.is_connected(),
    )
    if not words or not report.connected:
        return report

    order, report.stats = solve_hamiltonian_path(graph, max_vertices=max_words)
    report.chain = [words[i] for i in order]
    return report


def word_chain(words: Sequence[str], *, max_words: int | None = None) -> list[str]:
    """Return the words ordered so that each consecutive pair is one edit apart.

    Returns an empty list if there is no such order, or if `words` is empty.
    """
    return solve_word_chain(words, max_words=max_words).chain
