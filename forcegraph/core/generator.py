"""Random network generation (Erdős–Rényi G(n, p))."""

from __future__ import annotations

import logging
import random
from typing import Optional

from .errors import DuplicateNodeError
from .models import Graph

logger = logging.getLogger(__name__)


def generate_random_network(
    graph: Graph,
    n: int,
    p: float,
    id_prefix: str = "n",
    *,
    rng: Optional[random.Random] = None,
) -> Graph:
    """
    Add n nodes named f"{id_prefix}{i}" and connect each unordered pair with probability p.

    Each pair (i, j) with i < j is drawn once and stored as the edge (i, j),
    so the result is an undirected random graph. Node positions use the
    graph's random placement. Returns the same graph.

    Raises:
        ValueError: n is negative or p lies outside [0, 1].
        DuplicateNodeError: a generated id already exists; no node is added.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be within [0, 1], got {p}")

    rng = rng or graph.rng
    ids = [f"{id_prefix}{i}" for i in range(n)]
    taken = next((node_id for node_id in ids if node_id in graph), None)
    if taken is not None:
        raise DuplicateNodeError(taken)
    for node_id in ids:
        graph.add_node(node_id)

    added = 0
    for i in range(n):
        for j in range(i + 1, n):
            # random() is in [0, 1): p=1 always connects, p=0 never does
            if rng.random() < p:
                graph.add_edge(ids[i], ids[j])
                added += 1

    logger.info("Generated random network: %d nodes, %d edges (p=%s)", n, added, p)
    return graph
