"""Shared assertions for graph tests."""

from __future__ import annotations

from contractgraph import Graph


def assert_invariants(graph: Graph) -> None:
    """Check sortedness, absence of self-loops and undirected symmetry."""
    for key in graph.vertices():
        heads = [e.head for e in graph.edges_of(key)]
        assert heads == sorted(set(heads)), f"edge list of {key!r} not strictly ascending"
        assert key not in heads, f"self-loop on {key!r}"
        if not graph.directed:
            for e in graph.edges_of(key):
                mirror = graph.edge(e.head, key)
                assert mirror is not None
                assert mirror.weight == e.weight
