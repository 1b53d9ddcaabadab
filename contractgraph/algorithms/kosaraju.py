"""Strongly connected components with Kosaraju's two-pass algorithm.

The first pass takes the depth-first finishing order of the graph; the
second walks the reversed graph from each vertex in decreasing finishing
time, never re-entering a vertex claimed by an earlier root. Each root's
walk is one component.
"""

from __future__ import annotations

import time

from .base import GraphAlgorithm, register
from ..core.graph import Graph, GraphKind
from ..core.result import AlgorithmResult
from ..utils.checks import require_kind


@register
class KosarajuSCC(GraphAlgorithm):
    name = "kosaraju"

    def run(self, graph: Graph) -> AlgorithmResult:
        require_kind(graph, GraphKind.DIRECTED, self.name)
        started = time.perf_counter()

        order = graph.finish_order()
        components = graph.reverse().reachable_groups(reversed(order))

        return self._result(len(components), components, started)
