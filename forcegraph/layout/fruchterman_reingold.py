"""
Fruchterman–Reingold force-directed placement.

Follows the pseudo-code of Fruchterman & Reingold, "Graph drawing by
force-directed placement" (1991):

- every pair of nodes repels with fr(z) = k^2 / z * c2
- every edge pulls its endpoints together with fa(z) = z^2 / k * c1
- each node moves along its displacement, at most t per axis
- t cools by cooling / i after pass i

`solve` runs all passes at once. `animate` is a coroutine that emits a
snapshot after each pass, sleeps `frame_delay` seconds and can be stopped
through a `CancellationToken`.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

import numpy as np

from ..core.errors import DegenerateLayoutError, LayoutBusyError
from ..core.models import Graph, GraphSnapshot
from ..render import Renderer
from .cancel import CancellationToken
from .forces import attraction, clamped_delta, norm, repulsion
from .geometry import Bounds, animated_bounds, static_bounds

logger = logging.getLogger(__name__)

FLOAT_MAX = float(np.finfo(float).max)

StepCallback = Callable[[GraphSnapshot], Union[None, Awaitable[None]]]


@dataclass(frozen=True)
class LayoutParams:
    attraction_constant: float = 1.0
    repulsion_constant: float = 1.0
    iterations: int = 80
    initial_temperature: float = 50.0
    cooling: float = 10.0
    frame_delay: float = 0.2  # seconds between animated passes
    # Canvas size; None uses the graph's own width/height
    width: Optional[float] = None
    height: Optional[float] = None


class FruchtermanReingold:
    """
    Lays out one graph in place.

    The displacement of each node is local to a pass and never stored on
    the node, so repeated runs start clean.
    """

    def __init__(self, graph: Graph, params: Optional[LayoutParams] = None):
        self.graph = graph
        self.params = params or LayoutParams()
        self._token: Optional[CancellationToken] = None

    @property
    def width(self) -> float:
        return self.graph.width if self.params.width is None else self.params.width

    @property
    def height(self) -> float:
        return self.graph.height if self.params.height is None else self.params.height

    def ideal_edge_length(self) -> float:
        """k = sqrt(area / node_count)."""
        return math.sqrt(self.width * self.height / len(self.graph.nodes))

    def _check(self, bounds: Bounds) -> None:
        p = self.params
        if not self.graph.nodes:
            raise DegenerateLayoutError("Cannot lay out a graph with no nodes")
        if not (self.width > 0 and self.height > 0):
            raise DegenerateLayoutError(f"Canvas area must be positive, got {self.width}x{self.height}")
        if bounds.is_empty:
            raise DegenerateLayoutError(f"Canvas {self.width}x{self.height} is too small for the layout margins")
        constants = (p.attraction_constant, p.repulsion_constant, p.initial_temperature, p.cooling)
        if not all(math.isfinite(c) for c in constants):
            raise DegenerateLayoutError(f"Layout constants must be finite: {constants}")
        if isinstance(p.iterations, bool) or not isinstance(p.iterations, numbers.Integral):
            raise DegenerateLayoutError(f"iterations must be an integer, got {p.iterations!r}")
        if p.iterations < 0:
            raise DegenerateLayoutError(f"iterations must be non-negative, got {p.iterations}")
        if not all(math.isfinite(n.x) and math.isfinite(n.y) for n in self.graph.nodes):
            raise DegenerateLayoutError("Node positions must be finite before layout")
        # k^2 is area / node_count, so a finite area keeps k and k^2 finite
        if not math.isfinite(self.width * self.height):
            raise DegenerateLayoutError(f"Canvas {self.width}x{self.height} is too large to lay out")

    def _run_pass(self, k: float, temperature: float, bounds: Bounds) -> None:
        """One simulation pass: repulsion, attraction, move, clamp. Writes positions back."""
        p = self.params
        nodes = self.graph.nodes
        index = {node.id: i for i, node in enumerate(nodes)}
        pos = np.array([[n.x, n.y] for n in nodes], dtype=float)
        n = len(nodes)

        # Extreme finite constants may overflow; the forces are sanitised below
        with np.errstate(over="ignore", invalid="ignore"):
            # Repulsion between every ordered pair of distinct nodes
            delta = clamped_delta(pos[:, None, :], pos[None, :, :])
            dist = norm(delta)
            push = delta / dist[..., None] * repulsion(dist, k, p.repulsion_constant)[..., None]
            push[np.arange(n), np.arange(n)] = 0.0
            disp = push.sum(axis=1)

            # Attraction along edges: source pulled toward target and vice versa
            if self.graph.edges:
                src = np.array([index[e.source] for e in self.graph.edges])
                tgt = np.array([index[e.target] for e in self.graph.edges])
                delta = clamped_delta(pos[src], pos[tgt])
                dist = norm(delta)
                pull = delta / dist[:, None] * attraction(dist, k, p.attraction_constant)[:, None]
                np.subtract.at(disp, src, pull)
                np.add.at(disp, tgt, pull)

            # Opposing infinite forces cancel to nothing; one-sided ones saturate
            disp = np.nan_to_num(disp, nan=0.0, posinf=FLOAT_MAX, neginf=-FLOAT_MAX)

            # Move at most `temperature` per axis along the displacement direction.
            # Scaling by the largest component first keeps the length finite.
            scale = np.abs(disp).max(axis=1)
            moving = scale > 0
            direction = np.zeros_like(disp)
            unit = disp[moving] / scale[moving, None]
            direction[moving] = unit / norm(unit)[:, None]
            step = direction * np.minimum(np.abs(disp), max(temperature, 0.0))
            pos = bounds.clamp(pos + step)

        for node, (x, y) in zip(nodes, pos):
            node.x = float(x)
            node.y = float(y)

    def solve(self, renderer: Optional[Renderer] = None) -> GraphSnapshot:
        """
        Run every pass synchronously and return the final snapshot.

        Positions end inside [10, width-10] x [20, height-10].

        Raises:
            DegenerateLayoutError: no nodes, no canvas area or non-finite input.
            LayoutBusyError: an animated layout is running on this graph.
        """
        if self.graph.animating:
            raise LayoutBusyError("An animated layout is already running on this graph")
        bounds = static_bounds(self.width, self.height)
        self._check(bounds)

        k = self.ideal_edge_length()
        t = self.params.initial_temperature
        logger.info(
            "Fruchterman-Reingold: %d nodes, %d edges, k=%.3f",
            len(self.graph.nodes),
            len(self.graph.edges),
            k,
        )
        for i in range(1, self.params.iterations + 1):
            self._run_pass(k, t, bounds)
            t = t - self.params.cooling / i

        snapshot = self.graph.snapshot()
        if renderer is not None:
            renderer.render(snapshot)
        logger.info("Layout complete after %d passes", self.params.iterations)
        return snapshot

    async def animate(
        self,
        on_step: Union[StepCallback, Renderer, None] = None,
        token: Optional[CancellationToken] = None,
    ) -> int:
        """
        Run the passes one at a time, emitting a snapshot and sleeping after each.

        The token is checked at the top of every pass; cancelling stops the run
        before the next pass starts. Positions stay inside
        [20, width-20] x [20, height-20]. Returns the number of passes run.

        Raises:
            LayoutBusyError: another animated layout is active on this graph.
            DegenerateLayoutError: no nodes, no canvas area or non-finite input.
        """
        if self.graph.animating:
            raise LayoutBusyError("An animated layout is already running on this graph")
        bounds = animated_bounds(self.width, self.height)
        self._check(bounds)

        self._token = token or CancellationToken()
        self.graph.animating = True
        passes = 0
        try:
            k = self.ideal_edge_length()
            t = self.params.initial_temperature
            for i in range(1, self.params.iterations + 1):
                if self._token.cancelled:
                    logger.info("Animated layout cancelled after %d passes", passes)
                    break
                self._run_pass(k, t, bounds)
                t = t - self.params.cooling / i
                passes += 1
                logger.debug("Pass %d done, temperature %.3f", i, t)
                await _emit(on_step, self.graph.snapshot())
                await asyncio.sleep(self.params.frame_delay)
        finally:
            self.graph.animating = False
            self._token = None
        return passes

    def stop(self) -> None:
        """Cancel the running animation, if any."""
        if self._token is not None:
            self._token.cancel()


async def _emit(target: Any, snapshot: GraphSnapshot) -> None:
    if target is None:
        return
    result = target.render(snapshot) if isinstance(target, Renderer) else target(snapshot)
    if inspect.isawaitable(result):
        await result


def fruchterman_reingold(
    graph: Graph,
    attraction_constant: float,
    repulsion_constant: float,
    renderer: Optional[Renderer] = None,
    **options: Any,
) -> GraphSnapshot:
    """Static layout with default iteration count and cooling."""
    params = LayoutParams(
        attraction_constant=attraction_constant,
        repulsion_constant=repulsion_constant,
        **options,
    )
    return FruchtermanReingold(graph, params).solve(renderer)


async def fruchterman_reingold_animate(
    graph: Graph,
    attraction_constant: float,
    repulsion_constant: float,
    on_step: Union[StepCallback, Renderer, None] = None,
    token: Optional[CancellationToken] = None,
    **options: Any,
) -> int:
    params = LayoutParams(
        attraction_constant=attraction_constant,
        repulsion_constant=repulsion_constant,
        **options,
    )
    return await FruchtermanReingold(graph, params).animate(on_step, token)
