from __future__ import annotations

import logging
import random
import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import DuplicateNodeError, LayoutBusyError, UnknownEndpointWarning

logger = logging.getLogger(__name__)

# Distance kept between randomly placed nodes and the canvas border.
PLACEMENT_MARGIN = 10.0


@dataclass(frozen=True)
class GraphStyle:
    """Default node colours and the display scale applied to node weights."""

    primary_dark: str = "#90a4ae"
    primary_mid: str = "#b0bec5"
    weight_factor: float = 1.0


@dataclass
class GraphNode:
    id: str
    x: float
    y: float
    stroke_color: str = ""
    fill_color: str = ""
    label: str = ""
    display_label: bool = False
    weight: float = 1.0

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class GraphEdge:
    """
    An edge between two node ids.

    Stored as (source, target) but treated as undirected by analysis and layout.
    """

    source: str
    target: str


@dataclass(frozen=True)
class NodeSnapshot:
    id: str
    x: float
    y: float
    weight: float
    stroke_color: str
    fill_color: str
    label: str
    display_label: bool


@dataclass(frozen=True)
class EdgeSnapshot:
    source_id: str
    target_id: str


@dataclass(frozen=True)
class GraphSnapshot:
    """Read-only copy of node positions and edges for a renderer."""

    nodes: Tuple[NodeSnapshot, ...]
    edges: Tuple[EdgeSnapshot, ...]
    width: float = 0.0
    height: float = 0.0

    def positions(self) -> Dict[str, Tuple[float, float]]:
        return {n.id: (n.x, n.y) for n in self.nodes}


def random_position(width: float, height: float, rng: random.Random) -> Tuple[float, float]:
    """Uniform position inside the canvas, keeping PLACEMENT_MARGIN from each edge.

    A canvas smaller than twice the margin collapses to the margin itself.
    """
    hi_x = max(PLACEMENT_MARGIN, width - PLACEMENT_MARGIN)
    hi_y = max(PLACEMENT_MARGIN, height - PLACEMENT_MARGIN)
    return rng.uniform(PLACEMENT_MARGIN, hi_x), rng.uniform(PLACEMENT_MARGIN, hi_y)


def _spec_value(spec: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = spec.get(key)
        if value is not None:
            return value
    return None


@dataclass
class Graph:
    """
    The graph store: nodes in insertion order, an id index and the edge list.

    Every edge endpoint is a node of this graph; node ids are unique.
    """

    width: float = 0.0
    height: float = 0.0
    style: GraphStyle = field(default_factory=GraphStyle)
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)

    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    # Set while an animated layout owns this graph
    animating: bool = field(default=False, repr=False, compare=False)

    # Indexes for O(1) lookup
    _node_map: Dict[str, GraphNode] = field(default_factory=dict, repr=False)
    _edges_from: Dict[str, List[GraphEdge]] = field(default_factory=dict, repr=False)
    _edges_to: Dict[str, List[GraphEdge]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.nodes or self.edges:
            self._validate()
            self.rebuild_indexes()

    def _validate(self) -> None:
        """Reject repeated node ids and drop edges with an unknown endpoint."""
        seen = set()
        for node in self.nodes:
            if node.id in seen:
                raise DuplicateNodeError(node.id)
            seen.add(node.id)

        kept = []
        for edge in self.edges:
            missing = next((i for i in (edge.source, edge.target) if i not in seen), None)
            if missing is None:
                kept.append(edge)
                continue
            logger.warning("Graph does not include a node with id %s", missing)
            warnings.warn(UnknownEndpointWarning(edge.source, edge.target, missing), stacklevel=4)
        self.edges = kept

    @classmethod
    def from_specs(
        cls,
        nodes: Iterable[Mapping[str, Any]] = (),
        edges: Iterable[Mapping[str, Any]] = (),
        width: float = 0.0,
        height: float = 0.0,
        *,
        style: Optional[GraphStyle] = None,
        rng: Optional[random.Random] = None,
    ) -> "Graph":
        """
        Build a graph from node and edge spec mappings.

        Node specs repeating an id already seen are skipped. Edge specs naming
        an unknown node are dropped without a warning.
        """
        graph = cls(width=width, height=height, style=style or GraphStyle())
        if rng is not None:
            graph.rng = rng

        for spec in nodes:
            node_id = spec["id"]
            if node_id in graph._node_map:
                continue
            x = spec.get("x")
            y = spec.get("y")
            weight = spec.get("weight")
            graph._create_node(
                node_id,
                None if x is None else float(x),
                None if y is None else float(y),
                stroke_color=_spec_value(spec, "stroke_color", "strokeColor"),
                fill_color=_spec_value(spec, "fill_color", "fillColor"),
                label=_spec_value(spec, "label") or "",
                display_label=bool(_spec_value(spec, "display_label", "displayLabel")),
                weight=1.0 if weight is None else float(weight),
            )

        for spec in edges:
            source, target = spec["source"], spec["target"]
            if source in graph._node_map and target in graph._node_map:
                graph._append_edge(GraphEdge(source=source, target=target))
            else:
                logger.debug("Dropping edge %s -> %s with unknown endpoint", source, target)

        return graph

    def rebuild_indexes(self) -> None:
        """Rebuild all indexes after modification."""
        self._node_map = {n.id: n for n in self.nodes}
        self._edges_from = {}
        self._edges_to = {}
        for e in self.edges:
            self._edges_from.setdefault(e.source, []).append(e)
            self._edges_to.setdefault(e.target, []).append(e)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._node_map

    def has_node(self, node_id: str) -> bool:
        return node_id in self._node_map

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        """Get node by ID (O(1))."""
        return self._node_map.get(node_id)

    def edges_from(self, node_id: str) -> List[GraphEdge]:
        """Edges with node_id as source (O(1))."""
        return self._edges_from.get(node_id, [])

    def edges_to(self, node_id: str) -> List[GraphEdge]:
        """Edges with node_id as target (O(1))."""
        return self._edges_to.get(node_id, [])

    @staticmethod
    def contains_node(edge: GraphEdge, node_id: str) -> bool:
        return edge.source == node_id or edge.target == node_id

    def add_node(
        self,
        node_id: str,
        x: Optional[float] = None,
        y: Optional[float] = None,
        *,
        stroke_color: Optional[str] = None,
        fill_color: Optional[str] = None,
        label: str = "",
        display_label: bool = False,
        weight: float = 1.0,
    ) -> GraphNode:
        """
        Add a node and return it.

        Missing coordinates are placed at random inside the canvas.

        Raises:
            DuplicateNodeError: a node with this id exists; the graph is unchanged.
            LayoutBusyError: an animated layout is running on this graph.
        """
        self._require_idle()
        if node_id in self._node_map:
            raise DuplicateNodeError(node_id)
        return self._create_node(
            node_id,
            x,
            y,
            stroke_color=stroke_color,
            fill_color=fill_color,
            label=label or "",
            display_label=bool(display_label),
            weight=weight,
        )

    def add_edge(self, source: str, target: str) -> Optional[GraphEdge]:
        """
        Add an edge between two existing nodes.

        An unknown endpoint issues UnknownEndpointWarning and returns None
        without changing the graph. Duplicate edges and self-loops are kept.
        """
        self._require_idle()
        for node_id in (source, target):
            if node_id not in self._node_map:
                logger.warning("Graph does not include a node with id %s", node_id)
                warnings.warn(UnknownEndpointWarning(source, target, node_id), stacklevel=2)
                return None
        edge = GraphEdge(source=source, target=target)
        self._append_edge(edge)
        return edge

    def delete_all_nodes(self) -> None:
        """Clear nodes, edges and indexes together."""
        self._require_idle()
        self.nodes = []
        self.edges = []
        self.rebuild_indexes()

    def snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(
            nodes=tuple(
                NodeSnapshot(
                    id=n.id,
                    x=n.x,
                    y=n.y,
                    weight=n.weight * self.style.weight_factor,
                    stroke_color=n.stroke_color,
                    fill_color=n.fill_color,
                    label=n.label,
                    display_label=n.display_label,
                )
                for n in self.nodes
            ),
            edges=tuple(EdgeSnapshot(source_id=e.source, target_id=e.target) for e in self.edges),
            width=self.width,
            height=self.height,
        )

    def stats(self) -> Dict[str, int]:
        """Return graph statistics."""
        return {
            "nodes": len(self.nodes),
            "edges": len(self.edges),
            "self_loops": sum(1 for e in self.edges if e.source == e.target),
        }

    def _require_idle(self) -> None:
        if self.animating:
            raise LayoutBusyError("Graph cannot change while an animated layout is running")

    def _create_node(
        self,
        node_id: str,
        x: Optional[float],
        y: Optional[float],
        *,
        stroke_color: Optional[str],
        fill_color: Optional[str],
        label: str,
        display_label: bool,
        weight: float,
    ) -> GraphNode:
        rx, ry = random_position(self.width, self.height, self.rng)
        node = GraphNode(
            id=node_id,
            x=rx if x is None else x,
            y=ry if y is None else y,
            stroke_color=stroke_color if stroke_color is not None else self.style.primary_dark,
            fill_color=fill_color if fill_color is not None else self.style.primary_mid,
            label=label,
            display_label=display_label,
            weight=weight,
        )
        self.nodes.append(node)
        self._node_map[node_id] = node
        return node

    def _append_edge(self, edge: GraphEdge) -> None:
        self.edges.append(edge)
        self._edges_from.setdefault(edge.source, []).append(edge)
        self._edges_to.setdefault(edge.target, []).append(edge)
