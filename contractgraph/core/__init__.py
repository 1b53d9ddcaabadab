"""Graph storage, contraction and traversal.

:class:`~contractgraph.core.graph.Graph` is the public entry point; the
other modules hold the vertex table, the sorted edge lists and the walks
it is built from.
"""

from .graph import Graph, GraphKind  # noqa: F401
from .result import AlgorithmResult  # noqa: F401
from .vertex import Edge  # noqa: F401

__all__ = ["Graph", "GraphKind", "Edge", "AlgorithmResult"]
