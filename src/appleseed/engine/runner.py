"""The Appleseed round loop.

Injects the full energy budget at the source, runs the discovery pass,
then repeatedly walks the edge list. Each walk services every touched node
exactly once (lazily, via upkeep) and propagates energy along every edge.
The loop ends once the largest per-round trust increase is at or below the
threshold and at least MIN_ROUNDS rounds have completed.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from appleseed.engine.discovery import discover_outgoing_weights
from appleseed.engine.upkeep import UpkeepContext, maybe_upkeep, propagate
from appleseed.errors import NonConvergenceError
from appleseed.graph.edge import TrustEdge
from appleseed.graph.node import TrustNode
from appleseed.params import MIN_ROUNDS, AppleseedParams

logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    """Summary of a completed run.

    Parameters
    ----------
    rounds:
        Number of full edge-list walks performed.
    max_delta:
        Largest per-round trust increase in the final round. ``-inf`` when
        no node was serviced (e.g. an empty edge list).
    """

    rounds: int
    max_delta: float

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "rounds": self.rounds,
            "max_delta": self.max_delta if math.isfinite(self.max_delta) else None,
        }


def appleseed(
    source: TrustNode,
    edges: Sequence[TrustEdge],
    params: AppleseedParams | None = None,
) -> RunStats:
    """Compute trust from *source*'s perspective over *edges*, in place.

    Every node reachable through *edges*, and *source* itself, must be in
    its default state. Afterwards each node's ``trust`` field holds its
    score; ``source.trust`` is 0 and nodes with no path from *source* keep 0.

    Parameters
    ----------
    source:
        The node whose perspective is computed.
    edges:
        The trust graph's edges. Their order fixes intra-round scheduling.
    params:
        Run parameters. Defaults to ``AppleseedParams()``.

    Returns
    -------
    RunStats
        Round count and the final round's largest trust increase.

    Raises
    ------
    ParameterValidationError
        If a parameter is out of range. No node has been touched.
    NodeStateError
        If a node was not reset after a previous run.
    NonConvergenceError
        If ``params.max_rounds`` rounds complete without convergence.
    """
    if params is None:
        params = AppleseedParams()
    params.validate_ranges()

    source.trust = 0.0
    source.incoming_next = params.initial_energy

    discover_outgoing_weights(source, edges)
    logger.debug(
        "Starting run from %r over %d edges (energy=%s, spreading=%s, threshold=%s)",
        source.label,
        len(edges),
        params.initial_energy,
        params.spreading_factor,
        params.threshold,
    )

    rounds = 0
    while True:
        ctx = UpkeepContext(round_index=rounds, source=source, params=params)

        for edge in edges:
            edge.check_invariant(rounds)
            maybe_upkeep(edge.source, ctx)
            maybe_upkeep(edge.dest, ctx)
            propagate(edge.source, edge.dest, edge.weight, params)

        rounds += 1
        logger.debug("Round %d finished, max delta %.6g", rounds, ctx.max_delta)

        if ctx.max_delta <= params.threshold and rounds >= MIN_ROUNDS:
            break
        if params.max_rounds is not None and rounds >= params.max_rounds:
            logger.warning(
                "Run from %r stopped at the %d-round ceiling (max delta %.6g)",
                source.label,
                rounds,
                ctx.max_delta,
            )
            raise NonConvergenceError(rounds, ctx.max_delta)

    logger.info("Converged after %d rounds (max delta %.6g)", rounds, ctx.max_delta)
    return RunStats(rounds=rounds, max_delta=ctx.max_delta)
