"""Hamiltonian path search by dynamic programming over vertex subsets.

`ham[S, i]` describes whether some path visits exactly the vertices of subset `S` (a bitmask,
bit i set if vertex i is in S) and ends at vertex `i`.  A path over S ending at i exists if i
is adjacent to some j in S \\ {i} that ends a path over S \\ {i}.  Subsets are processed in
increasing numeric order, so `S \\ {i}` (a smaller number) is always final before `S`.

This runs in O(n^2 * 2^n) time and O(n * 2^n) memory, so it is only usable for small word lists.
"""

from dataclasses import dataclass, field
from time import time

import numpy as np

from wordchain.graph import AdjacencyGraph
from wordchain.solver.config import config as solver_config

NO_PATH = -1
"""Table entry meaning no path over the subset ends at this vertex."""

PATH_START = -2
"""Table entry for a single-vertex path, which has no predecessor."""


class WordChainError(RuntimeError):
    """Base class for word chain solver errors."""


class TooManyWordsError(WordChainError):
    """Raised when the input is too large for the exponential search table."""

    def __init__(self, n_words: int, limit: int) -> None:
        super().__init__(
            f"Cannot search {n_words} words: the limit is {limit} "
            f"(the search table would need {n_words} x 2^{n_words} entries)."
        )
        self.n_words = n_words
        self.limit = limit


@dataclass
class SolveStats:
    """Statistics collected during the search."""

    subsets_examined: int = 0
    """Number of vertex subsets processed."""

    reachable_states: int = 0
    """Number of (subset, end vertex) pairs for which a path exists."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""

    end_time: float | None = None
    """Timestamp when the search finished, or None if still running."""

    @property
    def elapsed(self) -> float:
        """Seconds spent in the search so far."""
        end = time() if self.end_time is None else self.end_time
        return end - self.start_time


def _lowest_bit_index(mask: int) -> int:
    return (mask & -mask).bit_length() - 1


def solve_hamiltonian_path(
    graph: AdjacencyGraph, *, max_vertices: int | None = None
) -> tuple[list[int], SolveStats]:
    """Find one Hamiltonian path in the graph.

    Args:
        graph: The graph to search.  Edges are read as i -> j from `graph.neighbor_mask(i)`.
        max_vertices: Refuse graphs with more vertices than this.  If None (default), uses
            the configured `max_words`.

    Returns:
        A tuple `(order, stats)`.  `order` lists every vertex exactly once, with consecutive
        vertices adjacent; it is empty if no Hamiltonian path exists (or the graph is empty).

    Raises:
        TooManyWordsError: If the graph has more than `max_vertices` vertices.  Raised before
            the search table is allocated.
    """
    n = graph.vertex_count
    limit = solver_config.max_words if max_vertices is None else max_vertices
    if n > limit:
        raise TooManyWordsError(n, limit)

    stats = SolveStats()
    if n == 0:
        stats.end_time = time()
        return [], stats

    masks = [graph.neighbor_mask(i) for i in range(n)]
    n_subsets = 1 << n

    # ham[S, i]: predecessor of i on a path over S ending at i
    ham = np.full((n_subsets, n), NO_PATH, dtype=np.int8)
    # ends[S]: bitmask of the vertices i for which ham[S, i] holds a path
    ends = [0] * n_subsets

    # Every singleton subset has a path of length one
    for i in range(n):
        ham[1 << i, i] = PATH_START
        ends[1 << i] = 1 << i

    for subset in range(n_subsets):
        stats.subsets_examined += 1
        remaining = subset
        while remaining:
            bit = remaining & -remaining
            remaining ^= bit
            if bit == subset:
                continue  # singleton, already set
            i = bit.bit_length() - 1
            # Vertices ending a path over the rest of the subset that have an edge to i
            candidates = ends[subset ^ bit] & masks[i]
            if candidates:
                ham[subset, i] = _lowest_bit_index(candidates)
                ends[subset] |= bit
        stats.reachable_states += ends[subset].bit_count()

    full = n_subsets - 1
    order: list[int] = []
    if ends[full]:
        # Walk the path backwards from its lowest-numbered possible end vertex
        subset = full
        vertex = _lowest_bit_index(ends[full])
        while subset:
            order.append(vertex)
            predecessor = int(ham[subset, vertex])
            subset ^= 1 << vertex
            vertex = predecessor

    stats.end_time = time()
    return order, stats


def find_hamiltonian_path(graph: AdjacencyGraph, *, max_vertices: int | None = None) -> list[int]:
    """Find one Hamiltonian path in the graph, or return an empty list if there is none.

    See `solve_hamiltonian_path` for details.
    """
    order, _ = solve_hamiltonian_path(graph, max_vertices=max_vertices)
    return order
