import pytest

from wordchain.graph import AdjacencyGraph


def path_graph(n):
    graph = AdjacencyGraph(n)
    for i in range(n - 1):
        graph.set_edge(i, i + 1)
        graph.set_edge(i + 1, i)
    return graph


def test_new_graph_has_no_edges():
    graph = AdjacencyGraph(4)
    assert graph.vertex_count == 4
    assert len(graph) == 4
    assert graph.edge_count == 0
    assert not any(graph.edge(i, j) for i in range(4) for j in range(4))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        AdjacencyGraph(-1)


def test_set_and_clear_edge():
    graph = AdjacencyGraph(3)
    graph.set_edge(0, 2)
    assert graph.edge(0, 2)
    assert not graph.edge(2, 0)
    graph.set_edge(0, 2, False)
    assert not graph.edge(0, 2)


@pytest.mark.parametrize("i, j", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_index(i, j):
    graph = AdjacencyGraph(3)
    with pytest.raises(IndexError):
        graph.edge(i, j)
    with pytest.raises(IndexError):
        graph.set_edge(i, j)


def test_neighbors_and_mask():
    graph = AdjacencyGraph(5)
    graph.set_edge(1, 4)
    graph.set_edge(1, 0)
    graph.set_edge(1, 2)
    assert list(graph.neighbors(1)) == [0, 2, 4]
    assert graph.neighbor_mask(1) == 0b10101
    assert graph.neighbor_mask(3) == 0
    assert list(graph.neighbors(3)) == []


def test_from_words_is_symmetric_without_self_loops():
    words = ["coat", "hat", "hot", "dog", "cat", "hog", "cot", "oat"]
    graph = AdjacencyGraph.from_words(words)
    for i in range(len(words)):
        assert not graph.edge(i, i)
        for j in range(len(words)):
            assert graph.edge(i, j) == graph.edge(j, i)
    assert graph.edge(words.index("dog"), words.index("hog"))
    assert not graph.edge(words.index("coat"), words.index("dog"))


def test_from_words_duplicates_not_adjacent():
    graph = AdjacencyGraph.from_words(["cat", "cat"])
    assert graph.edge_count == 0
    assert not graph.is_connected()


def test_from_words_custom_relation():
    graph = AdjacencyGraph.from_words(["aa", "ab", "ba"], lambda a, b: a[0] == b[0])
    assert graph.edge(0, 1)
    assert not graph.edge(0, 2)
    assert graph.edge_count == 1


def test_edge_count_counts_unordered_pairs():
    assert path_graph(5).edge_count == 4


def test_empty_graph_is_connected():
    assert AdjacencyGraph(0).is_connected()


def test_single_vertex_is_connected():
    assert AdjacencyGraph(1).is_connected()


def test_disconnected():
    graph = path_graph(4)
    graph.set_edge(1, 2, False)
    graph.set_edge(2, 1, False)
    assert not graph.is_connected()


def test_connected_with_cycle():
    graph = path_graph(4)
    graph.set_edge(3, 0)
    graph.set_edge(0, 3)
    assert graph.is_connected()


def test_long_path_is_connected_without_recursion():
    # Deeper than the default recursion limit
    assert path_graph(3000).is_connected()
