"""Breadth-first and depth-first walks over a :class:`VertexStore`.

Every walk marks vertices through their ``visited`` flag and clears all
flags before returning, so walks can be repeated without any reset by the
caller. Unknown start keys produce an empty result.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Hashable, Iterable, List, Optional

from .vertex import Vertex, VertexStore


def breadth_first(store: VertexStore, start: Hashable) -> List[Hashable]:
    """Return vertices in level order from ``start`` (``start`` first)."""
    root = store.get(start)
    if root is None:
        return []

    order: List[Hashable] = []
    try:
        root.visited = True
        queue: Deque[Vertex] = deque([root])
        while queue:
            vertex = queue.popleft()
            order.append(vertex.key)
            for record in vertex.edges:
                neighbour = store.get(record.head)
                if neighbour is not None and not neighbour.visited:
                    neighbour.visited = True
                    queue.append(neighbour)
    finally:
        store.reset_visited()
    return order


def _descend(store: VertexStore, root: Vertex, finished: List[Hashable]) -> None:
    # Each frame is [vertex, cursor into its edge list]; the cursor only moves
    # forward because a neighbour, once visited, stays visited for the walk.
    root.visited = True
    stack: List[list] = [[root, 0]]
    while stack:
        frame = stack[-1]
        vertex, cursor = frame
        edges = vertex.edges
        child: Optional[Vertex] = None
        while cursor < len(edges):
            neighbour = store.get(edges[cursor].head)
            cursor += 1
            if neighbour is not None and not neighbour.visited:
                child = neighbour
                break
        frame[1] = cursor
        if child is None:
            finished.append(vertex.key)
            stack.pop()
        else:
            child.visited = True
            stack.append([child, 0])


def depth_first(store: VertexStore, start: Hashable) -> List[Hashable]:
    """Return vertices reachable from ``start`` in finishing (post-) order.

    Neighbours are explored in ascending key order. A vertex is appended
    once it has no unvisited neighbour left, so for ``1->2, 2->3, 1->3``
    starting at 1 the result is ``[3, 2, 1]``.
    """
    root = store.get(start)
    if root is None:
        return []

    finished: List[Hashable] = []
    try:
        _descend(store, root, finished)
    finally:
        store.reset_visited()
    return finished


def finish_order(
    store: VertexStore, sources: Optional[Iterable[Hashable]] = None
) -> List[Hashable]:
    """Depth-first finishing order over several sources in one walk.

    Vertices finished from an earlier source are not revisited from a later
    one. With no ``sources`` every stored vertex is used, in store order.
    """
    finished: List[Hashable] = []
    keys = store.keys() if sources is None else list(sources)
    try:
        for key in keys:
            root = store.get(key)
            if root is not None and not root.visited:
                _descend(store, root, finished)
    finally:
        store.reset_visited()
    return finished


def breadth_first_groups(store: VertexStore, roots: Iterable[Hashable]) -> List[List[Hashable]]:
    """Level-order groups from several roots in one walk.

    Each root that is stored and not yet reached starts a new group holding
    the vertices it reaches that no earlier group claimed. Flags persist
    across roots and are cleared at the end.
    """
    groups: List[List[Hashable]] = []
    try:
        for key in roots:
            root = store.get(key)
            if root is None or root.visited:
                continue
            root.visited = True
            group: List[Hashable] = []
            queue: Deque[Vertex] = deque([root])
            while queue:
                vertex = queue.popleft()
                group.append(vertex.key)
                for record in vertex.edges:
                    neighbour = store.get(record.head)
                    if neighbour is not None and not neighbour.visited:
                        neighbour.visited = True
                        queue.append(neighbour)
            groups.append(group)
    finally:
        store.reset_visited()
    return groups
