"""Weighted multigraph with vertex contraction.

Design goals
------------
1) One engine for both directed and undirected graphs, selected by
   :class:`GraphKind` at construction.
2) Vertices are addressed by arbitrary hashable, mutually comparable keys.
   They are created implicitly by :meth:`Graph.connect` and never deleted.
3) Parallel edges are not stored twice: connecting an already-connected
   pair adds to the existing edge's ``weight``.
4) An undirected edge is stored as two directed entries, one in each
   endpoint's list, always with equal weights.

Example usage::

    >>> from contractgraph import Graph
    >>> g = Graph(edges=[(1, 2), (2, 3), (1, 3)])
    >>> g.collapse(1, 2)
    1
    >>> g.edge(2, 3).weight
    2
"""


from __future__ import annotations

from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
)

from ..errors import PartialConnectionError, PreconditionError, WeightMismatchError
from ..utils.checks import ensure_distinct, ensure_weight
from ..utils.logging import get_logger
from . import edges as edge_list
from . import traversal
from .vertex import Edge, Vertex, VertexStore

if TYPE_CHECKING:
    import networkx

logger = get_logger(__name__)


class GraphKind(str, Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


Edge2 = Tuple[Hashable, Hashable]
Edge3 = Tuple[Hashable, Hashable, int]
Edge4 = Tuple[Hashable, Hashable, int, float]
EdgeSpec = Union[Edge2, Edge3, Edge4]


def _integral_weight(u: Hashable, v: Hashable, weight: Any) -> int:
    if isinstance(weight, bool):
        raise PreconditionError(f"Edge ({u!r}, {v!r}) has non-integral weight {weight!r}")
    if isinstance(weight, int):
        return weight
    try:
        value = float(weight)
    except (TypeError, ValueError):
        value = float("nan")
    if not value.is_integer():
        raise PreconditionError(f"Edge ({u!r}, {v!r}) has non-integral weight {weight!r}")
    return int(value)


class Graph:
    """Adjacency-list multigraph supporting :meth:`collapse`.

    Ergonomic construction:
      - ``Graph()`` gives an empty undirected graph
      - ``Graph(kind=GraphKind.DIRECTED)`` or ``Graph(kind="directed")``
      - edges can be: ``[(u, v)]``, ``[(u, v, weight)]``, ``[(u, v, weight, distance)]``
    """

    def __init__(
        self,
        edges: Optional[Iterable[EdgeSpec]] = None,
        kind: Union[GraphKind, str] = GraphKind.UNDIRECTED,
    ) -> None:
        self.kind = GraphKind(kind)
        self._store = VertexStore()

        if edges is not None:
            for spec in edges:
                self.connect(*self._parse_edge_spec(spec))

    @staticmethod
    def _parse_edge_spec(spec: EdgeSpec) -> Tuple[Hashable, Hashable, int, float]:
        if len(spec) == 2:
            u, v = spec  # type: ignore[misc]
            return u, v, 1, 1.0
        if len(spec) == 3:
            u, v, w = spec  # type: ignore[misc]
            return u, v, w, 1.0
        if len(spec) == 4:
            u, v, w, d = spec  # type: ignore[misc]
            return u, v, w, float(d)
        raise ValueError(f"Unsupported edge spec: {spec!r}")

    @property
    def directed(self) -> bool:
        return self.kind is GraphKind.DIRECTED

    # --------------------------
    # Vertex access
    # --------------------------

    def add_vertex(self, key: Hashable) -> None:
        """Create an isolated vertex; no-op if ``key`` already exists."""
        self._store.ensure(key)

    def size(self) -> int:
        """Number of vertices, including ones emptied by :meth:`collapse`."""
        return len(self._store)

    def vertices(self) -> List[Hashable]:
        return self._store.keys()

    def non_empty_vertices(self) -> List[Hashable]:
        return [vertex.key for vertex in self._store if vertex.edges]

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return self.size()

    # --------------------------
    # Edge access
    # --------------------------

    def edges_of(self, key: Hashable) -> List[Edge]:
        """Return copies of ``key``'s edges, ascending by head key."""
        vertex = self._store.get(key)
        return [] if vertex is None else vertex.snapshot()

    def edge(self, tail: Hashable, head: Hashable) -> Optional[Edge]:
        record = edge_list.find(self._store.get(tail), head)
        if record is None:
            return None
        return Edge(tail, head, record.weight, record.distance)

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate logical edges once; undirected pairs come out as ``tail < head``."""
        for vertex in self._store:
            for record in vertex.edges:
                if self.directed or vertex.key < record.head:
                    yield Edge(vertex.key, record.head, record.weight, record.distance)

    def count_edge(self) -> int:
        """Total edge multiplicity (sum of weights over logical edges)."""
        total = sum(record.weight for vertex in self._store for record in vertex.edges)
        return total if self.directed else total // 2

    # --------------------------
    # Connectivity
    # --------------------------

    def is_connected(self, first: Hashable, second: Hashable) -> bool:
        """Return True if ``first`` has an edge to ``second``.

        A key is always connected to itself. For undirected graphs both
        lists are checked and :class:`PartialConnectionError` is raised if
        only one of them holds the edge.
        """
        if first == second:
            return True
        forward = edge_list.find(self._store.get(first), second) is not None
        if self.directed:
            return forward
        backward = edge_list.find(self._store.get(second), first) is not None
        if forward != backward:
            logger.error("Partial connection between %r and %r", first, second)
            raise PartialConnectionError(first, second)
        return forward

    def connect(
        self,
        first: Hashable,
        second: Hashable,
        weight: int = 1,
        distance: float = 1.0,
    ) -> bool:
        """Add an edge between ``first`` and ``second``.

        If the pair is already connected the weight is added to the
        existing edge (its distance is kept) and False is returned.

        Raises
        ------
        SelfLoopError
            If ``first == second``.
        PreconditionError
            If ``weight`` is not a positive integer.
        """
        ensure_distinct(first, second, "connect")
        ensure_weight(weight)
        already = self.is_connected(first, second)

        tail = self._store.vertex(self._store.ensure(first))
        head = self._store.vertex(self._store.ensure(second))
        edge_list.insert_or_merge(tail, second, weight, distance)
        if not self.directed:
            edge_list.insert_or_merge(head, first, weight, distance)
        return not already

    def disconnect(self, first: Hashable, second: Hashable) -> int:
        """Remove the edge between ``first`` and ``second``; return its weight.

        Missing edges are not an error and give 0. For undirected graphs
        both entries are checked before anything is removed.
        """
        tail = self._store.get(first)
        if self.directed:
            return edge_list.remove(tail, second)

        head = self._store.get(second)
        forward = edge_list.find(tail, second)
        backward = edge_list.find(head, first)
        if forward is None and backward is None:
            return 0
        if forward is None or backward is None:
            logger.error("Partial connection between %r and %r", first, second)
            raise PartialConnectionError(first, second)
        if forward.weight != backward.weight:
            logger.error("Weight mismatch between %r and %r", first, second)
            raise WeightMismatchError(first, second, forward.weight, backward.weight)
        edge_list.remove(tail, second)
        edge_list.remove(head, first)
        return forward.weight

    # --------------------------
    # Contraction
    # --------------------------

    def _check_mirrors(self, source: Vertex) -> None:
        for record in source.edges:
            back = edge_list.find(self._store.get(record.head), source.key)
            if back is None:
                logger.error("Partial connection between %r and %r", source.key, record.head)
                raise PartialConnectionError(source.key, record.head)
            if back.weight != record.weight:
                logger.error("Weight mismatch between %r and %r", source.key, record.head)
                raise WeightMismatchError(source.key, record.head, record.weight, back.weight)

    def collapse(self, src: Hashable, dst: Hashable) -> int:
        """Merge ``src`` into ``dst`` and leave ``src`` isolated.

        Edges between ``src`` and ``dst`` would become self-loops; they are
        removed and their weight is discarded. Every other edge incident to
        ``src`` is moved onto ``dst``, merging with edges ``dst`` already
        has. ``src`` stays in the graph with an empty edge list.

        Returns
        -------
        int
            The discarded loop weight.
        """
        ensure_distinct(src, dst, "collapse")
        source = self._store.get(src)
        if source is None:
            logger.debug("collapse(%r, %r): unknown source, nothing to do", src, dst)
            return 0
        target = self._store.vertex(self._store.ensure(dst))

        if self.directed:
            loop_weight = edge_list.remove(source, dst) + edge_list.remove(target, src)
        else:
            self._check_mirrors(source)
            loop_weight = self.disconnect(src, dst)

        for record in source.edges:
            neighbour = self._store.get(record.head)
            back = edge_list.pop(neighbour, src)
            if back is not None:
                edge_list.insert_or_merge(neighbour, dst, back.weight, back.distance)
            edge_list.insert_or_merge(target, record.head, record.weight, record.distance)

        if self.directed:
            # incoming edges whose tail is not a successor of src
            for vertex in self._store:
                if vertex is source:
                    continue
                back = edge_list.pop(vertex, src)
                if back is not None:
                    edge_list.insert_or_merge(vertex, dst, back.weight, back.distance)

        edge_list.clear(source)
        logger.debug("Collapsed %r into %r, discarded loop weight %d", src, dst, loop_weight)
        return loop_weight

    # --------------------------
    # Traversal
    # --------------------------

    def breadth_first_search(self, start: Hashable) -> List[Hashable]:
        """Vertices reachable from ``start`` in level order (``start`` first)."""
        if start not in self._store:
            logger.debug("Breadth-first search from unknown vertex %r", start)
        return traversal.breadth_first(self._store, start)

    def depth_first_search(self, start: Hashable) -> List[Hashable]:
        """Vertices reachable from ``start`` in depth-first finishing order."""
        if start not in self._store:
            logger.debug("Depth-first search from unknown vertex %r", start)
        return traversal.depth_first(self._store, start)

    def finish_order(self, sources: Optional[Iterable[Hashable]] = None) -> List[Hashable]:
        return traversal.finish_order(self._store, sources)

    def reachable_groups(self, roots: Iterable[Hashable]) -> List[List[Hashable]]:
        """Breadth-first groups, one per root, never revisiting earlier groups."""
        return traversal.breadth_first_groups(self._store, roots)

    def reverse(self) -> "Graph":
        """Return a new graph of the same kind with every edge flipped."""
        result = Graph(kind=self.kind)
        for key in self._store.keys():
            result.add_vertex(key)
        for vertex in self._store:
            for record in vertex.edges:
                result._insert(record.head, vertex.key, record.weight, record.distance)
        return result

    def copy(self) -> "Graph":
        result = Graph(kind=self.kind)
        for vertex in self._store:
            result.add_vertex(vertex.key)
            for record in vertex.edges:
                result._insert(vertex.key, record.head, record.weight, record.distance)
        return result

    def _insert(self, tail: Hashable, head: Hashable, weight: int, distance: float) -> None:
        self._store.ensure(head)
        vertex = self._store.vertex(self._store.ensure(tail))
        edge_list.insert_or_merge(vertex, head, weight, distance)

    # --------------------------
    # Diagnostics
    # --------------------------

    def dump(self) -> str:
        lines = []
        for vertex in self._store:
            line = f"{vertex.key!r} [visited={vertex.visited}]"
            line += "".join(
                f" -> {rec.head!r} ({rec.weight}, {rec.distance})" for rec in vertex.edges
            )
            lines.append(line)
        return "\n".join(lines)

    def log_dump(self) -> None:
        logger.debug("%r\n%s", self, self.dump())

    # --------------------------
    # NetworkX interop
    # --------------------------

    def to_networkx(self) -> "networkx.Graph":
        """Convert into ``networkx.Graph`` or ``networkx.DiGraph``.

        Edge weight and distance become the ``weight`` and ``distance``
        edge attributes. Isolated vertices are kept.
        """
        import networkx as nx

        G = nx.DiGraph() if self.directed else nx.Graph()
        G.add_nodes_from(self._store.keys())
        for e in self.iter_edges():
            G.add_edge(e.tail, e.head, weight=e.weight, distance=e.distance)
        return G

    @classmethod
    def from_networkx(cls, G: "networkx.Graph") -> "Graph":
        """Create a :class:`Graph` from any networkx graph.

        The kind follows ``G.is_directed()``. Missing ``weight`` and
        ``distance`` attributes default to 1 and 1.0; parallel edges of a
        multigraph accumulate their weights. Self-loops are rejected, and so
        are weights that are not whole numbers.
        """
        graph = cls(kind=GraphKind.DIRECTED if G.is_directed() else GraphKind.UNDIRECTED)
        for n in G.nodes:
            graph.add_vertex(n)
        for u, v, attrs in G.edges(data=True):
            graph.connect(
                u,
                v,
                weight=_integral_weight(u, v, attrs.get("weight", 1)),
                distance=float(attrs.get("distance", 1.0)),
            )
        return graph

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.kind is other.kind
            and set(self.vertices()) == set(other.vertices())
            and set(self.iter_edges()) == set(other.iter_edges())
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Graph(num_vertices={self.size()}, "
            f"num_edges={self.count_edge()}, "
            f"kind={self.kind.value})"
        )
