from __future__ import annotations

from typing import Iterable, Union

import networkx as nx

from .core.graph import EdgeSpec, Graph, GraphKind
from . import get_algorithm
from .core.result import AlgorithmResult

GraphLike = Union[Graph, nx.Graph, Iterable[EdgeSpec]]


def as_graph(data: GraphLike, kind: Union[GraphKind, str] = GraphKind.UNDIRECTED) -> Graph:
    """Normalise ``data`` into a :class:`Graph`.

    ``kind`` only applies to edge iterables; a networkx graph keeps its own
    directedness and a :class:`Graph` is returned unchanged.
    """
    # 1. Already an internal Graph
    if isinstance(data, Graph):
        return data

    # 2. networkx graph (DiGraph and multigraphs subclass nx.Graph)
    if isinstance(data, nx.Graph):
        return Graph.from_networkx(data)

    # 3. Iterable of edge tuples
    try:
        edges = iter(data)  # type: ignore[arg-type]
    except TypeError:
        pass
    else:
        return Graph(edges=edges, kind=kind)

    raise TypeError(f"Cannot interpret {type(data)} as a graph")


def run_algorithm(
    data: GraphLike,
    algorithm: str,
    kind: Union[GraphKind, str] = GraphKind.UNDIRECTED,
    **algo_params,
) -> AlgorithmResult:
    """High-level convenience function for users.

    `data` can be:
      - a Graph
      - a networkx graph
      - an iterable of ``(u, v)``, ``(u, v, weight)`` or
        ``(u, v, weight, distance)`` tuples, built as ``kind``
    """
    AlgoCls = get_algorithm(algorithm)
    algo = AlgoCls(**algo_params)
    return algo.run(as_graph(data, kind=kind))


def minimum_cut(data: GraphLike, trials: int | None = None, seed: int | None = None) -> AlgorithmResult:
    return run_algorithm(data, "karger", trials=trials, seed=seed)


def strongly_connected_components(data: GraphLike) -> AlgorithmResult:
    return run_algorithm(data, "kosaraju", kind=GraphKind.DIRECTED)


def connected_components(data: GraphLike) -> AlgorithmResult:
    return run_algorithm(data, "components")
