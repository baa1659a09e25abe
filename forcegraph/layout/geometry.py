from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned clamp box for node positions (inclusive borders)."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def inset(
        cls,
        width: float,
        height: float,
        *,
        left: float,
        top: float,
        right: float,
        bottom: float,
    ) -> "Bounds":
        """Canvas box shrunk by a margin on each side."""
        return cls(left=left, top=top, right=width - right, bottom=height - bottom)

    @property
    def is_empty(self) -> bool:
        return self.right < self.left or self.bottom < self.top

    def clamp(self, positions: np.ndarray) -> np.ndarray:
        """Clamp an (n, 2) array of positions into the box."""
        out = np.empty_like(positions)
        out[:, 0] = np.minimum(self.right, np.maximum(self.left, positions[:, 0]))
        out[:, 1] = np.minimum(self.bottom, np.maximum(self.top, positions[:, 1]))
        return out


# Top margin is 20 while the other static margins are 10.
def static_bounds(width: float, height: float) -> Bounds:
    return Bounds.inset(width, height, left=10, top=20, right=10, bottom=10)


def animated_bounds(width: float, height: float) -> Bounds:
    return Bounds.inset(width, height, left=20, top=20, right=20, bottom=20)
