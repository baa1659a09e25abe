"""Initial placements, useful as starting points for the force layout."""

from __future__ import annotations

import math
import random
from typing import Optional

from ..core.models import Graph, random_position


def arrange_in_circle(graph: Graph) -> None:
    """Spread nodes evenly on a circle centred on the canvas, in insertion order."""
    centre_x = graph.width / 2
    centre_y = graph.height / 2
    radius = min(centre_x, centre_y) / 2
    count = len(graph.nodes)
    for i, node in enumerate(graph.nodes):
        angle = (2 * math.pi / count) * i
        node.x = centre_x + radius * math.cos(angle)
        node.y = centre_y + radius * math.sin(angle)


def arrange_randomly(graph: Graph, rng: Optional[random.Random] = None) -> None:
    rng = rng or graph.rng
    for node in graph.nodes:
        node.x, node.y = random_position(graph.width, graph.height, rng)
