"""Trust graph model — nodes, edges, and a handle-addressed node arena."""
from __future__ import annotations

from appleseed.graph.arena import TrustGraph
from appleseed.graph.edge import TrustEdge
from appleseed.graph.node import TrustNode

__all__ = [
    "TrustEdge",
    "TrustGraph",
    "TrustNode",
]
