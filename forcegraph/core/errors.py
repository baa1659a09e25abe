"""Error taxonomy for graph construction, analysis and layout."""

from __future__ import annotations

from typing import Optional


class ForceGraphError(Exception):
    """Base class for all forcegraph errors."""


class DuplicateNodeError(ForceGraphError, ValueError):
    def __init__(self, node_id: str):
        super().__init__(f"A node already exists with id {node_id!r}")
        self.node_id = node_id


class NodeNotFoundError(ForceGraphError, KeyError):
    def __init__(self, node_id: str):
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Graph does not include a node with id {self.node_id!r}"


class PathNotFoundError(ForceGraphError):
    def __init__(self, start_id: str, end_id: str):
        super().__init__(f"Path not found from {start_id!r} to {end_id!r}")
        self.start_id = start_id
        self.end_id = end_id


class DegenerateLayoutError(ForceGraphError, ValueError):
    """Layout input that would produce NaN or infinite positions."""


class LayoutBusyError(ForceGraphError, RuntimeError):
    """An animated layout is already running on this graph."""


class UnknownEndpointWarning(UserWarning):
    """An edge referenced a node id that is not in the graph; the edge was skipped."""

    def __init__(self, source: str, target: str, missing: Optional[str] = None):
        self.source = source
        self.target = target
        self.missing = missing if missing is not None else source
        super().__init__(f"Graph does not include a node with id {self.missing!r}")
