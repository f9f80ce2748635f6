"""Discovery pass — per-node outgoing-weight normalizers.

Every node except the run source receives a one-off self-retention term
of 1.0 on top of the sum of its outgoing edge weights. Sinks therefore end
with an outgoing weight of 1.0, never 0.
"""
from __future__ import annotations

from collections.abc import Sequence

from appleseed.graph.edge import TrustEdge
from appleseed.graph.node import TrustNode

SELF_RETENTION_WEIGHT = 1.0


def discover_outgoing_weights(source: TrustNode, edges: Sequence[TrustEdge]) -> None:
    """Accumulate ``outgoing_weight`` for every node touched by *edges*.

    The result does not depend on edge order.

    Parameters
    ----------
    source:
        The run source. Exempt from the self-retention term.
    edges:
        The full edge list of the run.
    """
    for edge in edges:
        edge.source.outgoing_weight += edge.weight

        for node in (edge.source, edge.dest):
            if node is source:
                continue
            if not node.outgoing_weights_discovered:
                node.outgoing_weight += SELF_RETENTION_WEIGHT
                node.outgoing_weights_discovered = True
