"""Sorted per-vertex edge lists.

Each vertex owns a list of :class:`EdgeRecord` kept in strictly ascending
order of head key. The same linear scan that looks for an existing edge
also finds the insertion point, so keeping the list sorted costs nothing
extra over a plain duplicate check.
"""

from __future__ import annotations

from typing import Hashable, Optional

from ..utils.checks import ensure_distinct
from .vertex import EdgeRecord, Vertex


def find(tail: Optional[Vertex], head: Hashable) -> Optional[EdgeRecord]:
    """Return the edge ``tail -> head`` or ``None``."""
    if tail is None:
        return None
    for record in tail.edges:
        if record.head == head:
            return record
        if head < record.head:
            break
    return None


def insert_or_merge(
    tail: Vertex, head: Hashable, weight: int = 1, distance: float = 1.0
) -> bool:
    """Insert ``tail -> head`` in sorted position or merge into an existing edge.

    On a merge the weights add up and the existing distance is kept.

    Returns
    -------
    bool
        True if a new edge was created, False if the weight was merged.
    """
    ensure_distinct(tail.key, head, "insert")
    edges = tail.edges
    for i, record in enumerate(edges):
        if record.head == head:
            record.weight += weight
            return False
        if head < record.head:
            edges.insert(i, EdgeRecord(head, weight, distance))
            return True
    edges.append(EdgeRecord(head, weight, distance))
    return True


def pop(tail: Optional[Vertex], head: Hashable) -> Optional[EdgeRecord]:
    """Unlink and return the edge ``tail -> head``; ``None`` if it is absent."""
    if tail is None:
        return None
    edges = tail.edges
    for i, record in enumerate(edges):
        if record.head == head:
            return edges.pop(i)
        if head < record.head:
            break
    return None


def remove(tail: Optional[Vertex], head: Hashable) -> int:
    """Unlink ``tail -> head`` and return its weight (0 when absent)."""
    record = pop(tail, head)
    return 0 if record is None else record.weight


def clear(vertex: Vertex) -> None:
    vertex.edges.clear()
