"""Lazy per-node upkeep and the elementary propagation step.

The edge list is the only enumeration of nodes available, so the
"once per round for every node" bookkeeping runs on demand: the first time
an edge touching a node is visited in round ``i``, that node is serviced
and its ``next_upkeep`` moves to ``i + 1``. Later touches in the same round
are no-ops.
"""
from __future__ import annotations

from dataclasses import dataclass

from appleseed.graph.node import TrustNode
from appleseed.params import AppleseedParams

BACKFLOW_WEIGHT = 1.0


@dataclass
class UpkeepContext:
    """Per-round state shared by every upkeep call in that round.

    Parameters
    ----------
    round_index:
        The round being walked.
    source:
        The run source.
    params:
        Validated run parameters.
    max_delta:
        Largest trust increase seen so far in this round.
    """

    round_index: int
    source: TrustNode
    params: AppleseedParams
    max_delta: float = float("-inf")


def propagate(
    src: TrustNode,
    dst: TrustNode,
    weight: float,
    params: AppleseedParams,
) -> None:
    """Push *src*'s weighted share of available energy onto *dst*'s next bucket.

    Only ``dst.incoming_next`` is mutated.
    """
    # A zero-weight edge carries nothing; the source's normalizer may be 0 here.
    if weight == 0.0:
        return
    total_energy_to_distribute = src.incoming * params.spreading_factor
    edge_fraction = weight / src.outgoing_weight
    dst.incoming_next += total_energy_to_distribute * edge_fraction


def maybe_upkeep(node: TrustNode, ctx: UpkeepContext) -> None:
    """Service *node* if its bookkeeping for ``ctx.round_index`` is still due."""
    if node.next_upkeep == ctx.round_index:
        upkeep(node, ctx)


def upkeep(node: TrustNode, ctx: UpkeepContext) -> None:
    """Run one round of bookkeeping for *node*.

    Accumulates retained energy as trust, rolls the energy buckets over,
    and sends a backflow share to the source. Recursion reaches at most the
    source, whose own upkeep never recurses.
    """
    # Must come first so the recursive call below cannot re-enter this node.
    node.next_upkeep = ctx.round_index + 1

    is_source = node is ctx.source

    if not is_source:
        delta = node.incoming_next * (1.0 - ctx.params.spreading_factor)
        if delta > ctx.max_delta:
            ctx.max_delta = delta
        node.trust += delta

    node.incoming = node.incoming_next
    node.incoming_next = 0.0

    if not is_source:
        maybe_upkeep(ctx.source, ctx)
        propagate(node, ctx.source, BACKFLOW_WEIGHT, ctx.params)
