"""
Graph adapters.

Engines only need the Graph capability (node count and an edge list).
This module provides ready-made implementations:

- EdgeListGraph: immutable, validated edge-list graph
- NetworkXGraph: wraps a networkx graph and maps node labels to indices
- as_graph: coerce supported objects into a Graph
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Optional, Sequence, Tuple

from .types import Graph
from .validation import InvalidLinkError, validate_edges


class EdgeListGraph:
    """
    Graph given by a node count and a list of (source, target) index pairs.

    Each undirected edge should be listed once.

    Example:
        graph = EdgeListGraph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        graph.node_count()  # 4
        graph.edges()       # ((0, 1), (1, 2), (2, 3), (3, 0))
    """

    __slots__ = ("_node_count", "_edges")

    def __init__(self, node_count: int, edges: Iterable[Tuple[int, int]] = ()) -> None:
        """
        Args:
            node_count: Number of nodes (indices 0..node_count-1)
            edges: (source, target) index pairs

        Raises:
            InvalidLinkError: If node_count is negative or an edge index is out of bounds
        """
        if node_count < 0:
            raise InvalidLinkError(f"node_count must be >= 0, got {node_count}")
        edge_list = list(edges)
        validate_edges(edge_list, node_count, strict=True)
        self._node_count = int(node_count)
        self._edges: Tuple[Tuple[int, int], ...] = tuple(
            (int(src), int(tgt)) for src, tgt in edge_list
        )

    @classmethod
    def from_links(cls, nodes: Sequence[Any], links: Sequence[Any]) -> "EdgeListGraph":
        """
        Build a graph from node and link records.

        Links may be dicts or objects with ``source``/``target``; endpoints
        may be integer indices or node objects carrying an ``index``
        attribute (or key).

        Example:
            EdgeListGraph.from_links(
                nodes=[{}, {}, {}],
                links=[{"source": 0, "target": 1}, {"source": 1, "target": 2}],
            )
        """
        edges = []
        for i, link in enumerate(links):
            src = _get_index(link, "source")
            tgt = _get_index(link, "target")
            if src is None or tgt is None:
                raise InvalidLinkError(f"Link {i}: missing source or target in {link!r}")
            edges.append((src, tgt))
        return cls(len(nodes), edges)

    def node_count(self) -> int:
        return self._node_count

    def edges(self) -> Tuple[Tuple[int, int], ...]:
        return self._edges

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeListGraph):
            return NotImplemented
        return self._node_count == other._node_count and self._edges == other._edges

    def __hash__(self) -> int:
        return hash((self._node_count, self._edges))

    def __repr__(self) -> str:
        return f"EdgeListGraph(nodes={self._node_count}, edges={len(self._edges)})"


class NetworkXGraph:
    """
    Adapter exposing a networkx graph through the Graph capability.

    Node labels are mapped to indices in the graph's node iteration order.
    The edge list is taken once at construction, so later changes to the
    wrapped graph are not seen. Undirected networkx graphs report each edge
    once; directed graphs report both directions when both edges exist.

    Example:
        import networkx as nx
        graph = NetworkXGraph(nx.petersen_graph())
        layout = FruchtermanReingold().compute(graph)
        layout.coordinate(graph.index_of(3))
    """

    def __init__(self, nx_graph: Any) -> None:
        self._graph = nx_graph
        self._labels: Tuple[Hashable, ...] = tuple(nx_graph.nodes())
        self._index = {label: i for i, label in enumerate(self._labels)}
        self._edges: Tuple[Tuple[int, int], ...] = tuple(
            (self._index[u], self._index[v]) for u, v in nx_graph.edges()
        )

    @property
    def graph(self) -> Any:
        """The wrapped networkx graph."""
        return self._graph

    @property
    def labels(self) -> Tuple[Hashable, ...]:
        """Node labels, position i holds the label of node index i."""
        return self._labels

    def index_of(self, label: Hashable) -> int:
        """Get the node index of a networkx node label."""
        try:
            return self._index[label]
        except KeyError:
            raise KeyError(f"Node {label!r} is not in the graph") from None

    def node_count(self) -> int:
        return len(self._labels)

    def edges(self) -> Tuple[Tuple[int, int], ...]:
        return self._edges

    def __repr__(self) -> str:
        return f"NetworkXGraph(nodes={len(self._labels)}, edges={len(self._edges)})"


def as_graph(obj: Any) -> Graph:
    """
    Coerce an object into a Graph.

    Objects satisfying the Graph capability are returned unchanged.
    networkx-like graphs (with ``nodes`` and ``edges`` methods and
    ``number_of_nodes``) are wrapped in NetworkXGraph.

    Raises:
        TypeError: If obj is neither
    """
    if isinstance(obj, Graph):
        return obj
    if all(hasattr(obj, attr) for attr in ("nodes", "edges", "number_of_nodes")):
        return NetworkXGraph(obj)
    raise TypeError(
        f"Expected an object with node_count() and edges() or a networkx graph, "
        f"got {type(obj).__name__}"
    )


def _get_index(obj: Any, attr: str) -> Optional[int]:
    """Extract an endpoint index from a link dict or object."""
    if isinstance(obj, dict):
        val = obj.get(attr)
    else:
        val = getattr(obj, attr, None)

    if val is None:
        return None
    if isinstance(val, int):
        return val
    if isinstance(val, dict):
        index = val.get("index")
    else:
        index = getattr(val, "index", None)
    return int(index) if index is not None else None


__all__ = [
    "EdgeListGraph",
    "NetworkXGraph",
    "as_graph",
]
