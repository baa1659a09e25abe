"""Force terms for Fruchterman–Reingold."""

from __future__ import annotations

import numpy as np

# Smallest per-axis separation used when two positions coincide on an axis.
MIN_DELTA = 0.0001


def clamped_delta(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """a - b with each component pushed away from zero to at least MIN_DELTA, keeping its sign.

    A zero difference becomes +MIN_DELTA.
    """
    dif = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return np.where(dif < 0, np.minimum(dif, -MIN_DELTA), np.maximum(dif, MIN_DELTA))


def attraction(distance, k: float, c: float):
    """fa(z) = z^2 / k * c"""
    return (np.square(distance) / k) * c


def repulsion(distance, k: float, c: float):
    """fr(z) = k^2 / z * c"""
    return (k**2 / distance) * c


def norm(vectors: np.ndarray) -> np.ndarray:
    """Euclidean length of 2-D vectors along the last axis, without intermediate overflow."""
    return np.hypot(vectors[..., 0], vectors[..., 1])
