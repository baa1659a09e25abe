"""Layout algorithms: Fruchterman–Reingold plus simple initial placements."""

from .arrange import arrange_in_circle, arrange_randomly
from .cancel import CancellationToken
from .fruchterman_reingold import (
    FruchtermanReingold,
    LayoutParams,
    fruchterman_reingold,
    fruchterman_reingold_animate,
)
from .geometry import Bounds, animated_bounds, static_bounds

__all__ = [
    "Bounds",
    "CancellationToken",
    "FruchtermanReingold",
    "LayoutParams",
    "animated_bounds",
    "arrange_in_circle",
    "arrange_randomly",
    "fruchterman_reingold",
    "fruchterman_reingold_animate",
    "static_bounds",
]
