"""Vertex storage for :class:`~contractgraph.core.graph.Graph`.

Vertices live in a dense, append-only list; a separate dictionary maps a
vertex key to its slot. Slots are never removed or reused, so a slot index
stays valid for the lifetime of the graph. A vertex whose edges have all
been removed keeps its slot with an empty edge list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional


@dataclass
class EdgeRecord:
    """Mutable edge entry owned by the tail vertex's edge list."""

    head: Hashable
    weight: int = 1
    distance: float = 1.0


@dataclass(eq=True, frozen=True)
class Edge:
    """Read-only snapshot of an edge handed out to callers."""

    tail: Hashable
    head: Hashable
    weight: int
    distance: float


@dataclass
class Vertex:
    key: Hashable
    visited: bool = False
    edges: List[EdgeRecord] = field(default_factory=list)

    def snapshot(self) -> List[Edge]:
        return [Edge(self.key, rec.head, rec.weight, rec.distance) for rec in self.edges]


class VertexStore:
    """Key-addressed, index-stable vertex table."""

    def __init__(self) -> None:
        self._slots: List[Vertex] = []
        self._index: Dict[Hashable, int] = {}

    def lookup(self, key: Hashable) -> Optional[int]:
        """Return the slot of ``key`` or ``None`` when it is not stored."""
        return self._index.get(key)

    def ensure(self, key: Hashable) -> int:
        """Return the slot of ``key``, creating an empty vertex if needed."""
        slot = self._index.get(key)
        if slot is None:
            slot = len(self._slots)
            self._slots.append(Vertex(key))
            self._index[key] = slot
        return slot

    def vertex(self, slot: int) -> Vertex:
        return self._slots[slot]

    def get(self, key: Hashable) -> Optional[Vertex]:
        slot = self._index.get(key)
        return None if slot is None else self._slots[slot]

    def reset_visited(self) -> None:
        for vertex in self._slots:
            vertex.visited = False

    def keys(self) -> List[Hashable]:
        return [vertex.key for vertex in self._slots]

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)
