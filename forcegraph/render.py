"""
Renderer boundary.

The core never draws. It hands `GraphSnapshot` objects to anything that
implements `Renderer`; drawing to SVG, canvas or a terminal lives downstream.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from .core.models import GraphSnapshot


@runtime_checkable
class Renderer(Protocol):
    def render(self, snapshot: GraphSnapshot) -> None: ...


class CollectingRenderer:
    """Keeps every snapshot it is given, oldest first."""

    def __init__(self) -> None:
        self.frames: List[GraphSnapshot] = []

    def render(self, snapshot: GraphSnapshot) -> None:
        self.frames.append(snapshot)

    @property
    def last(self) -> Optional[GraphSnapshot]:
        return self.frames[-1] if self.frames else None

    def __len__(self) -> int:
        return len(self.frames)
