"""
forcegraph: graph metrics and Fruchterman-Reingold layout.

Main interface: Graph, Analyzer, FruchtermanReingold
"""

__version__ = "0.1.0"

from .core import Analyzer, Graph, generate_random_network
from .layout import CancellationToken, FruchtermanReingold, LayoutParams

__all__ = [
    "Analyzer",
    "CancellationToken",
    "FruchtermanReingold",
    "Graph",
    "LayoutParams",
    "generate_random_network",
]
