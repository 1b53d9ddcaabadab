# contractgraph/algorithms/base.py
from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any, Dict

from ..registry import available_algorithms
from ..core.graph import Graph
from ..core.result import AlgorithmResult
from ..utils.logging import get_logger

__all__ = ["GraphAlgorithm", "register"]


class GraphAlgorithm(ABC):
    name: str = "base"

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.logger = get_logger(self.__class__.__name__)
        if self.verbose:
            self.logger.setLevel("DEBUG")

    @abstractmethod
    def run(self, graph: Graph) -> AlgorithmResult:
        raise NotImplementedError

    def params(self) -> Dict[str, Any]:
        return {}

    def _result(self, value: Any, groups, started: float, **metadata: Any) -> AlgorithmResult:
        runtime = time.perf_counter() - started
        self.logger.debug("%s finished in %.6fs with value %r", self.name, runtime, value)
        return AlgorithmResult(
            algorithm=self.name,
            value=value,
            groups=groups,
            params=self.params(),
            runtime=runtime,
            metadata=metadata,
        )


def register(cls: type[GraphAlgorithm]) -> type[GraphAlgorithm]:
    if not issubclass(cls, GraphAlgorithm):
        raise TypeError("Only subclasses of GraphAlgorithm can be registered")

    name = getattr(cls, "name", None)
    if not isinstance(name, str):
        raise TypeError("Graph algorithm must define a string 'name' attribute")

    key = name.lower()
    if key in available_algorithms:
        raise ValueError(f"Algorithm '{name}' is already registered")

    available_algorithms[key] = cls
    return cls
