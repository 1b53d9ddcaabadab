"""Tests for the vertex table and the sorted edge lists."""

from __future__ import annotations

import pytest

from contractgraph.core import edges
from contractgraph.core.vertex import Edge, Vertex, VertexStore
from contractgraph.errors import SelfLoopError


# --- VertexStore ---


def test_lookup_absent_key_returns_none() -> None:
    store = VertexStore()
    assert store.lookup("a") is None
    assert store.get("a") is None
    assert "a" not in store


def test_ensure_creates_once_and_keeps_slot() -> None:
    """ensure is idempotent and slots are assigned densely in creation order."""
    store = VertexStore()
    assert store.ensure("a") == 0
    assert store.ensure("b") == 1
    assert store.ensure("a") == 0
    assert len(store) == 2
    assert store.keys() == ["a", "b"]


def test_new_vertex_is_empty_and_unvisited() -> None:
    store = VertexStore()
    vertex = store.vertex(store.ensure(7))
    assert vertex.key == 7
    assert vertex.visited is False
    assert vertex.edges == []


def test_reset_visited_clears_all_flags() -> None:
    store = VertexStore()
    for key in range(3):
        store.vertex(store.ensure(key)).visited = True
    store.reset_visited()
    assert not any(v.visited for v in store)


# --- Edge list engine ---


def test_insert_keeps_ascending_order() -> None:
    vertex = Vertex(0)
    for head in (5, 2, 9, 3):
        assert edges.insert_or_merge(vertex, head) is True
    assert [rec.head for rec in vertex.edges] == [2, 3, 5, 9]


def test_insert_merges_duplicate_and_keeps_first_distance() -> None:
    vertex = Vertex(0)
    edges.insert_or_merge(vertex, 1, weight=2, distance=4.0)
    assert edges.insert_or_merge(vertex, 1, weight=3, distance=9.0) is False
    assert len(vertex.edges) == 1
    assert vertex.edges[0].weight == 5
    assert vertex.edges[0].distance == 4.0


def test_insert_rejects_self_loop() -> None:
    with pytest.raises(SelfLoopError):
        edges.insert_or_merge(Vertex("x"), "x")


def test_remove_returns_weight_and_unlinks() -> None:
    vertex = Vertex(0)
    edges.insert_or_merge(vertex, 1, weight=4)
    edges.insert_or_merge(vertex, 2)
    assert edges.remove(vertex, 1) == 4
    assert [rec.head for rec in vertex.edges] == [2]


def test_remove_absent_edge_is_zero_without_mutation() -> None:
    vertex = Vertex(0)
    edges.insert_or_merge(vertex, 2)
    assert edges.remove(vertex, 1) == 0
    assert edges.remove(vertex, 3) == 0
    assert edges.remove(None, 3) == 0
    assert [rec.head for rec in vertex.edges] == [2]


def test_find_stops_at_sorted_position() -> None:
    vertex = Vertex(0)
    edges.insert_or_merge(vertex, 1)
    edges.insert_or_merge(vertex, 3)
    assert edges.find(vertex, 3).head == 3
    assert edges.find(vertex, 2) is None
    assert edges.find(None, 2) is None


def test_clear_empties_list() -> None:
    vertex = Vertex(0)
    edges.insert_or_merge(vertex, 1)
    edges.insert_or_merge(vertex, 2)
    edges.clear(vertex)
    assert vertex.edges == []


def test_snapshot_is_detached_copy() -> None:
    """Snapshots are frozen and do not alias internal records."""
    vertex = Vertex("a")
    edges.insert_or_merge(vertex, "b", weight=2, distance=0.5)
    snap = vertex.snapshot()
    assert snap == [Edge("a", "b", 2, 0.5)]
    edges.insert_or_merge(vertex, "b", weight=1)
    assert snap[0].weight == 2
