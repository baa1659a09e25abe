"""Graph analysis.

Stateless algorithms over a `Graph`. Edges are treated as undirected.

- Degree and average degree
- Shortest path: hop count via breadth-first search
- Connected components: repeated BFS in node insertion order
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Set, Tuple

from .errors import NodeNotFoundError, PathNotFoundError
from .models import Graph, GraphNode

logger = logging.getLogger(__name__)


class Analyzer:
    """
    Graph analyzer.

    Holds no traversal state: queues and visited sets live inside each call.
    """

    def __init__(self, graph: Graph):
        self.graph = graph

    def _require(self, node_id: str) -> GraphNode:
        node = self.graph.get_node(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def neighbors(self, node_id: str) -> List[str]:
        """Undirected neighbour ids: targets of outgoing edges, then sources of incoming ones."""
        self._require(node_id)
        out_ids = [e.target for e in self.graph.edges_from(node_id)]
        in_ids = [e.source for e in self.graph.edges_to(node_id)]
        return out_ids + in_ids

    def degree(self, node_id: str) -> int:
        """
        Number of edge endpoints at this node.

        Source and target are counted independently, so a self-loop counts twice
        and duplicate edges count once each.
        """
        self._require(node_id)
        return len(self.graph.edges_from(node_id)) + len(self.graph.edges_to(node_id))

    def average_degree(self) -> float:
        """
        Sum of node degrees divided by twice the node count.

        An empty graph has average degree 0.0.
        """
        count = len(self.graph.nodes)
        if count == 0:
            return 0.0
        total = sum(self.degree(n.id) for n in self.graph.nodes)
        return total / count / 2

    def shortest_path(self, start_id: str, end_id: str) -> int:
        """
        Hop distance between two nodes.

        Raises:
            NodeNotFoundError: either id is not in the graph.
            PathNotFoundError: the nodes are in different components.
        """
        self._require(start_id)
        self._require(end_id)

        visited: Set[str] = {start_id}
        queue: Deque[Tuple[str, int]] = deque([(start_id, 0)])

        while queue:
            node_id, depth = queue.popleft()
            if node_id == end_id:
                return depth
            for neighbor in self.neighbors(node_id):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append((neighbor, depth + 1))

        raise PathNotFoundError(start_id, end_id)

    def component_of(self, node_id: str) -> List[GraphNode]:
        """All nodes reachable from node_id (itself included), in BFS discovery order."""
        start = self._require(node_id)

        covered: List[GraphNode] = [start]
        visited: Set[str] = {node_id}
        queue: Deque[str] = deque([node_id])

        while queue:
            current = queue.popleft()
            for neighbor in self.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    covered.append(self.graph.get_node(neighbor))
                    queue.append(neighbor)

        return covered

    def connected_components(self) -> List[List[GraphNode]]:
        """Partition the graph into components, discovered in node insertion order."""
        covered: Set[str] = set()
        components: List[List[GraphNode]] = []

        for node in self.graph.nodes:
            if node.id in covered:
                continue
            component = self.component_of(node.id)
            covered.update(n.id for n in component)
            components.append(component)

        logger.debug("Found %d components over %d nodes", len(components), len(self.graph.nodes))
        return components

    def find_largest_component(self) -> List[GraphNode]:
        """
        The component with the most nodes.

        On a tie the first discovered component wins. Empty graph gives [].
        """
        largest: List[GraphNode] = []
        for component in self.connected_components():
            if len(component) > len(largest):
                largest = component
        return largest
