"""Adjacency-matrix graph over word indices."""

from collections.abc import Callable, Iterator, Sequence

import numpy as np
from bitarray import bitarray
from bitarray.util import ba2int, zeros

from wordchain.words import is_one_away


class AdjacencyGraph:
    """Store an n x n boolean adjacency matrix as one bitarray row per vertex.

    Rows are little-endian, so bit `j` of row `i` is also bit `j` of `neighbor_mask(i)`.
    """

    def __init__(self, n_vertices: int) -> None:
        if n_vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n_vertices}.")

        self.n_vertices: int = n_vertices
        """Number of vertices in the graph."""

        self.rows: list[bitarray] = [zeros(n_vertices, endian="little") for _ in range(n_vertices)]
        """Adjacency matrix rows.  `rows[i][j]` is True if there is an edge from i to j."""

    @classmethod
    def from_words(
        cls,
        words: Sequence[str],
        related: Callable[[str, str], bool] = is_one_away,
    ) -> "AdjacencyGraph":
        """Build the graph whose vertices are word indices.

        Every ordered pair of distinct indices (i, j) gets an edge if `related(words[i],
        words[j])` holds.  With the default relation the result is symmetric.
        """
        graph = cls(len(words))
        for i, word_i in enumerate(words):
            for j, word_j in enumerate(words):
                if i != j and related(word_i, word_j):
                    graph.set_edge(i, j)
        return graph

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return self.n_vertices

    def __len__(self) -> int:
        return self.n_vertices

    def _check(self, idx: int) -> None:
        if not 0 <= idx < self.n_vertices:
            raise IndexError(f"Vertex index {idx} out of range for {self.n_vertices} vertices.")

    def edge(self, i: int, j: int) -> bool:
        """Return whether there is an edge from vertex i to vertex j."""
        self._check(i)
        self._check(j)
        return bool(self.rows[i][j])

    def set_edge(self, i: int, j: int, value: bool = True) -> None:
        """Set or clear the edge from vertex i to vertex j."""
        self._check(i)
        self._check(j)
        self.rows[i][j] = value

    def neighbors(self, i: int) -> Iterator[int]:
        """Iterate over the vertices adjacent to vertex i, in ascending order."""
        self._check(i)
        return iter(self.rows[i].search(1))

    def neighbor_mask(self, i: int) -> int:
        """Return the adjacency row of vertex i as an integer bitmask."""
        self._check(i)
        return ba2int(self.rows[i])

    @property
    def edge_count(self) -> int:
        """Number of unordered vertex pairs {i, j} with an edge from i to j, i < j."""
        return sum(row[i + 1 :].count() for i, row in enumerate(self.rows))

    def is_connected(self) -> bool:
        """Check whether every vertex is reachable from vertex 0.

        An empty graph is connected.  Uses an explicit stack, so the depth of the traversal is
        not limited by the interpreter's recursion limit.
        """
        if self.n_vertices == 0:
            return True

        visited = np.zeros(self.n_vertices, dtype=bool)

        # Depth-First Search (DFS) from vertex 0
        stack = [0]
        while stack:
            vertex = stack.pop()
            if visited[vertex]:
                continue
            visited[vertex] = True
            for other in self.rows[vertex].search(1):
                if not visited[other]:
                    stack.append(other)

        return bool(visited.all())
