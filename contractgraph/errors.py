"""Exception hierarchy for *contractgraph*.

Absence (unknown vertex, missing edge) is never an error; these classes
cover caller bugs and internal corruption only.
"""

from __future__ import annotations

from typing import Hashable


class ContractGraphError(Exception):
    """Base class for every error raised by contractgraph."""


class PreconditionError(ContractGraphError, ValueError):
    """The caller violated an operation's precondition."""


class SelfLoopError(PreconditionError):
    def __init__(self, key: Hashable, operation: str = "connect") -> None:
        super().__init__(f"{operation} would create a self-loop on vertex {key!r}")
        self.key = key
        self.operation = operation


class GraphIntegrityError(ContractGraphError):
    """The adjacency lists of an undirected graph are out of sync."""


class PartialConnectionError(GraphIntegrityError):
    def __init__(self, first: Hashable, second: Hashable) -> None:
        super().__init__(
            f"Vertices {first!r} and {second!r} are only partially connected"
        )
        self.first = first
        self.second = second


class WeightMismatchError(GraphIntegrityError):
    def __init__(
        self, first: Hashable, second: Hashable, forward: int, backward: int
    ) -> None:
        super().__init__(
            f"Edge weights differ between {first!r}->{second!r} ({forward}) "
            f"and {second!r}->{first!r} ({backward})"
        )
        self.first = first
        self.second = second
        self.forward = forward
        self.backward = backward


class GraphKindError(ContractGraphError, ValueError):
    """An algorithm was given a graph of the wrong kind."""


class UnknownAlgorithmError(ContractGraphError, KeyError):
    pass
