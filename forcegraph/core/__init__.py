"""Core domain types and algorithms."""

from .analysis import Analyzer
from .errors import (
    DegenerateLayoutError,
    DuplicateNodeError,
    ForceGraphError,
    LayoutBusyError,
    NodeNotFoundError,
    PathNotFoundError,
    UnknownEndpointWarning,
)
from .generator import generate_random_network
from .models import (
    EdgeSnapshot,
    Graph,
    GraphEdge,
    GraphNode,
    GraphSnapshot,
    GraphStyle,
    NodeSnapshot,
    random_position,
)

__all__ = [
    # models
    "EdgeSnapshot",
    "Graph",
    "GraphEdge",
    "GraphNode",
    "GraphSnapshot",
    "GraphStyle",
    "NodeSnapshot",
    "random_position",
    # errors
    "DegenerateLayoutError",
    "DuplicateNodeError",
    "ForceGraphError",
    "LayoutBusyError",
    "NodeNotFoundError",
    "PathNotFoundError",
    "UnknownEndpointWarning",
    # analysis
    "Analyzer",
    # generation
    "generate_random_network",
]
