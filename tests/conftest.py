from __future__ import annotations

import pytest

from contractgraph import Graph, GraphKind


@pytest.fixture
def triangle() -> Graph:
    """Undirected triangle 1-2, 2-3, 1-3 with unit weights."""
    return Graph(edges=[(1, 2), (2, 3), (1, 3)])


@pytest.fixture
def digraph() -> Graph:
    """Directed graph 1->2, 2->3, 1->3."""
    return Graph(edges=[(1, 2), (2, 3), (1, 3)], kind=GraphKind.DIRECTED)
