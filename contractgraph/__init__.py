from __future__ import annotations

__version__ = "0.1.0"

from .registry import available_algorithms
from .errors import (
    ContractGraphError,
    PreconditionError,
    SelfLoopError,
    GraphIntegrityError,
    PartialConnectionError,
    WeightMismatchError,
    GraphKindError,
    UnknownAlgorithmError,
)
from .core.graph import Graph, GraphKind
from .core.vertex import Edge
from .core.result import AlgorithmResult


# Import algorithms so they register themselves via @register
from .algorithms import components, karger, kosaraju


def get_algorithm(name: str):
    key = name.lower()
    try:
        return available_algorithms[key]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{name}'. "
            f"Available: {sorted(available_algorithms.keys())}"
        ) from None

def list_algorithms():
    return sorted(available_algorithms.keys())
