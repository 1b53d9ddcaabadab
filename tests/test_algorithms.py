"""Tests for the registered algorithms built on collapse and traversal."""

from __future__ import annotations

import pytest

from contractgraph import (
    Graph,
    GraphKind,
    get_algorithm,
    list_algorithms,
)
from contractgraph.algorithms.base import GraphAlgorithm, register
from contractgraph.algorithms.components import ContractionComponents
from contractgraph.algorithms.karger import KargerMinCut, default_trials
from contractgraph.algorithms.kosaraju import KosarajuSCC
from contractgraph.errors import GraphKindError, PreconditionError, UnknownAlgorithmError


def _as_sets(groups) -> set[frozenset]:
    return {frozenset(g) for g in groups}


# --- Registry ---


def test_list_algorithms() -> None:
    assert list_algorithms() == ["components", "karger", "kosaraju"]


def test_get_algorithm_is_case_insensitive() -> None:
    assert get_algorithm("Karger") is KargerMinCut


def test_get_unknown_algorithm_raises() -> None:
    with pytest.raises(UnknownAlgorithmError, match="Available"):
        get_algorithm("dijkstra")


def test_register_rejects_duplicates_and_foreign_classes() -> None:
    with pytest.raises(ValueError, match="already registered"):
        register(KosarajuSCC)
    with pytest.raises(TypeError):
        register(dict)  # type: ignore[arg-type]


def test_register_requires_name() -> None:
    class Nameless(GraphAlgorithm):
        name = None  # type: ignore[assignment]

        def run(self, graph):
            raise NotImplementedError

    with pytest.raises(TypeError, match="name"):
        register(Nameless)


# --- Karger minimum cut ---


def test_default_trials() -> None:
    assert default_trials(2) == 1
    assert default_trials(4) == 9


def test_karger_single_edge() -> None:
    result = KargerMinCut(seed=0).run(Graph(edges=[("a", "b", 5)]))
    assert result.algorithm == "karger"
    assert result.value == 5
    assert _as_sets(result.groups) == {frozenset({"a"}), frozenset({"b"})}


def test_karger_triangle(triangle: Graph) -> None:
    result = KargerMinCut(trials=20, seed=1).run(triangle)
    assert result.value == 2
    assert sorted(len(g) for g in result.groups) == [1, 2]


def test_karger_finds_bridge() -> None:
    g = Graph(edges=[(1, 2), (2, 3), (1, 3), (4, 5), (5, 6), (4, 6), (3, 4)])
    result = KargerMinCut(trials=200, seed=7).run(g)
    assert result.value == 1
    assert _as_sets(result.groups) == {frozenset({1, 2, 3}), frozenset({4, 5, 6})}
    assert result.params == {"trials": 200, "seed": 7}
    assert result.metadata["trials_run"] == 200


def test_karger_respects_weights() -> None:
    g = Graph(edges=[(1, 2, 10), (2, 3, 1), (1, 3, 10)])
    assert KargerMinCut(trials=50, seed=3).run(g).value == 11


def test_karger_does_not_mutate_input(triangle: Graph) -> None:
    snapshot = triangle.copy()
    KargerMinCut(trials=5, seed=2).run(triangle)
    assert triangle == snapshot


def test_karger_disconnected_graph_has_zero_cut() -> None:
    g = Graph(edges=[(1, 2), (3, 4)])
    result = KargerMinCut(seed=0).run(g)
    assert result.value == 0
    assert _as_sets(result.groups) == {frozenset({1, 2}), frozenset({3, 4})}
    assert result.metadata["trials_run"] == 0


def test_karger_ignores_collapsed_vertices(triangle: Graph) -> None:
    triangle.connect(3, 4)
    triangle.collapse(1, 2)
    result = KargerMinCut(trials=30, seed=4).run(triangle)
    assert result.value == 1
    assert 1 not in {v for g in result.groups for v in g}


def test_karger_preconditions() -> None:
    with pytest.raises(PreconditionError):
        KargerMinCut().run(Graph())
    with pytest.raises(GraphKindError):
        KargerMinCut().run(Graph(edges=[(1, 2)], kind=GraphKind.DIRECTED))
    with pytest.raises(ValueError):
        KargerMinCut(trials=0)


# --- Kosaraju SCC ---


def test_kosaraju_components() -> None:
    g = Graph(
        edges=[(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 4), (6, 5)],
        kind=GraphKind.DIRECTED,
    )
    result = KosarajuSCC().run(g)
    assert result.value == 3
    assert _as_sets(result.groups) == {frozenset({1, 2, 3}), frozenset({4, 5}), frozenset({6})}


def test_kosaraju_dag_gives_singletons(digraph: Graph) -> None:
    result = KosarajuSCC().run(digraph)
    assert result.groups == [[1], [2], [3]]


def test_kosaraju_requires_directed(triangle: Graph) -> None:
    with pytest.raises(GraphKindError):
        KosarajuSCC().run(triangle)


# --- Contraction components ---


def test_components_by_contraction() -> None:
    g = Graph(edges=[(1, 2), (2, 3), (1, 3, 2), (4, 5)])
    g.add_vertex(6)
    result = ContractionComponents().run(g)
    assert result.value == 3
    assert _as_sets(result.groups) == {frozenset({1, 2, 3}), frozenset({4, 5}), frozenset({6})}
    assert result.metadata["discarded_weight"] == g.count_edge()


def test_components_does_not_mutate_input(triangle: Graph) -> None:
    ContractionComponents().run(triangle)
    assert triangle.count_edge() == 3


def test_components_requires_undirected(digraph: Graph) -> None:
    with pytest.raises(GraphKindError):
        ContractionComponents().run(digraph)


def test_verbose_sets_debug_level() -> None:
    algo = KosarajuSCC(verbose=True)
    assert algo.logger.name == "contractgraph.KosarajuSCC"
    assert algo.logger.level == 10


def test_kosaraju_long_chain_gives_singletons() -> None:
    """A 5001-vertex chain is handled in one pass per direction."""
    n = 5000
    g = Graph(edges=[(i, i + 1) for i in range(n)], kind=GraphKind.DIRECTED)
    result = KosarajuSCC().run(g)
    assert result.value == n + 1
    assert all(len(component) == 1 for component in result.groups)
    assert result.groups[0] == [0]
