"""Karger's randomized minimum cut.

Each trial contracts a copy of the graph, picking edges with probability
proportional to their weight, until two super-vertices remain. The weight
left between them is a cut of the original graph; the smallest one over
all trials is reported. With ``ceil(C(n, 2) * ln n)`` trials the minimum
cut is found with probability at least ``1 - 1/n``.
"""

from __future__ import annotations

import math
import random
import time
from typing import Any, Dict, Hashable, List, Optional, Tuple

from .base import GraphAlgorithm, register
from ..core.graph import Graph, GraphKind
from ..core.result import AlgorithmResult
from ..errors import PreconditionError
from ..utils.checks import require_kind


def default_trials(n: int) -> int:
    if n < 3:
        return 1
    return math.ceil(n * (n - 1) / 2 * math.log(n))


@register
class KargerMinCut(GraphAlgorithm):
    name = "karger"

    def __init__(
        self,
        trials: Optional[int] = None,
        seed: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        super().__init__(verbose=verbose)
        if trials is not None and trials < 1:
            raise ValueError("trials must be at least 1")
        self.trials = trials
        self.seed = seed
        self._rng = random.Random(seed)

    def params(self) -> Dict[str, Any]:
        return dict(trials=self.trials, seed=self.seed)

    def _contract(self, graph: Graph, active: List[Hashable]) -> Tuple[int, List[List[Hashable]]]:
        work = graph.copy()
        members: Dict[Hashable, List[Hashable]] = {v: [v] for v in active}
        while len(members) > 2:
            edges = list(work.iter_edges())
            chosen = self._rng.choices(edges, weights=[e.weight for e in edges])[0]
            work.collapse(chosen.head, chosen.tail)
            members[chosen.tail].extend(members.pop(chosen.head))
        return work.count_edge(), list(members.values())

    def run(self, graph: Graph) -> AlgorithmResult:
        require_kind(graph, GraphKind.UNDIRECTED, self.name)
        started = time.perf_counter()

        active = graph.non_empty_vertices()
        if len(active) < 2:
            raise PreconditionError("A minimum cut needs at least two connected vertices")

        reached = graph.breadth_first_search(active[0])
        if len(reached) < len(active):
            seen = set(reached)
            rest = [v for v in active if v not in seen]
            self.logger.debug("Graph is disconnected, minimum cut is 0")
            return self._result(0, [reached, rest], started, trials_run=0)

        trials = self.trials if self.trials is not None else default_trials(len(active))
        best_weight: Optional[int] = None
        best_groups: List[List[Hashable]] = []
        for trial in range(trials):
            weight, groups = self._contract(graph, active)
            if best_weight is None or weight < best_weight:
                self.logger.debug("Trial %d found cut of weight %d", trial, weight)
                best_weight, best_groups = weight, groups
        return self._result(best_weight, best_groups, started, trials_run=trials)
