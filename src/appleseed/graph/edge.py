"""TrustEdge — an immutable directed, weighted trust relation."""
from __future__ import annotations

import math
from dataclasses import dataclass

from appleseed.errors import InvalidEdgeWeightError
from appleseed.graph.node import TrustNode


@dataclass(frozen=True)
class TrustEdge:
    """Directed edge ``source -> dest`` carrying a non-negative weight.

    Holds non-owning references to its two nodes.
    """

    source: TrustNode
    dest: TrustNode
    weight: float

    def __post_init__(self) -> None:
        if not isinstance(self.weight, (int, float)) or isinstance(self.weight, bool):
            raise InvalidEdgeWeightError(self.weight)
        if not math.isfinite(self.weight) or self.weight < 0:
            raise InvalidEdgeWeightError(self.weight)

    def check_invariant(self, round_index: int) -> None:
        """Check both endpoints' bookkeeping for *round_index*."""
        self.source.check_invariant(round_index)
        self.dest.check_invariant(round_index)
