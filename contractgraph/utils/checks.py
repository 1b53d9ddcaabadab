"""Precondition checks shared by the graph core and the algorithms."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable

from ..errors import GraphKindError, PreconditionError, SelfLoopError

if TYPE_CHECKING:
    from ..core.graph import Graph, GraphKind


def ensure_distinct(first: Hashable, second: Hashable, operation: str) -> None:
    """Raise :class:`SelfLoopError` if both endpoints are the same key."""
    if first == second:
        raise SelfLoopError(first, operation)


def ensure_weight(weight: int) -> None:
    if not isinstance(weight, int) or isinstance(weight, bool) or weight < 1:
        raise PreconditionError(f"Edge weight must be a positive integer, got {weight!r}")


def require_kind(graph: "Graph", kind: "GraphKind", algorithm: str) -> None:
    if graph.kind is not kind:
        raise GraphKindError(
            f"Algorithm '{algorithm}' requires a {kind.value} graph, got {graph.kind.value}"
        )
