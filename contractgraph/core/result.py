"""Result container returned by every registered algorithm."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List


@dataclass
class AlgorithmResult:
    """Outcome of running a :class:`~contractgraph.algorithms.base.GraphAlgorithm`.

    Parameters
    ----------
    algorithm: str
        Registered name of the algorithm.
    value: Any
        Headline number: the cut weight for ``karger``, the number of
        components for ``kosaraju`` and ``components``.
    groups: List[List[Hashable]]
        Vertex groups: the two cut sides, or one list per component.
    params: Dict[str, Any]
        Parameters the algorithm ran with.
    runtime: float
        Wall-clock seconds.
    metadata: Dict[str, Any]
        Algorithm-specific extras.
    """

    algorithm: str
    value: Any
    groups: List[List[Hashable]]
    params: Dict[str, Any] = field(default_factory=dict)
    runtime: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.groups)
