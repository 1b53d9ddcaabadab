"""Connected components by repeated contraction.

Every neighbour of a representative is collapsed into it until the
representative is isolated; the vertices absorbed along the way form its
component.
"""

from __future__ import annotations

import time
from typing import Dict, Hashable, List

from .base import GraphAlgorithm, register
from ..core.graph import Graph, GraphKind
from ..core.result import AlgorithmResult
from ..utils.checks import require_kind


@register
class ContractionComponents(GraphAlgorithm):
    name = "components"

    def run(self, graph: Graph) -> AlgorithmResult:
        require_kind(graph, GraphKind.UNDIRECTED, self.name)
        started = time.perf_counter()

        work = graph.copy()
        members: Dict[Hashable, List[Hashable]] = {v: [v] for v in work.vertices()}
        discarded = 0
        for vertex in work.vertices():
            if vertex not in members:
                continue
            neighbours = work.edges_of(vertex)
            while neighbours:
                for e in neighbours:
                    discarded += work.collapse(e.head, vertex)
                    members[vertex].extend(members.pop(e.head))
                neighbours = work.edges_of(vertex)

        groups = list(members.values())
        return self._result(len(groups), groups, started, discarded_weight=discarded)
