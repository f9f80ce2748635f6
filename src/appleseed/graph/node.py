"""TrustNode — mutable per-vertex state for a single Appleseed run.

Nodes are owned by the caller and must be in their default state before
each run. The engine mutates them in place and never resets them itself;
call ``reset()`` (or ``TrustGraph.reset()``) between runs.
"""
from __future__ import annotations

from dataclasses import dataclass

from appleseed.errors import NodeStateError


@dataclass(eq=False)
class TrustNode:
    """One vertex of the trust graph.

    Nodes compare and hash by identity, since edges refer to them by
    identity rather than by value.

    Parameters
    ----------
    label:
        Optional display name. Not read by the algorithm.
    trust:
        Accumulated, retained energy. Holds the score after a run.
    next_upkeep:
        Round index at which this node's bookkeeping is still pending.
    incoming:
        Energy available to this node as of the last completed round.
    incoming_next:
        Energy accumulating for the round in progress.
    outgoing_weights_discovered:
        Whether the self-retention term has been added to outgoing_weight.
    outgoing_weight:
        Normalizing denominator for this node's outgoing edges.
    """

    label: str = ""
    trust: float = 0.0
    next_upkeep: int = 0
    incoming: float = 0.0
    incoming_next: float = 0.0
    outgoing_weights_discovered: bool = False
    outgoing_weight: float = 0.0

    def reset(self) -> None:
        """Restore every algorithm field to its default. The label is kept."""
        self.trust = 0.0
        self.next_upkeep = 0
        self.incoming = 0.0
        self.incoming_next = 0.0
        self.outgoing_weights_discovered = False
        self.outgoing_weight = 0.0

    @property
    def is_fresh(self) -> bool:
        """True if every algorithm field holds its default value."""
        return (
            self.trust == 0.0
            and self.next_upkeep == 0
            and self.incoming == 0.0
            and self.incoming_next == 0.0
            and not self.outgoing_weights_discovered
            and self.outgoing_weight == 0.0
        )

    def check_invariant(self, round_index: int) -> None:
        """Raise NodeStateError if this node cannot be part of round *round_index*.

        A node serviced in every round it is touched is either still due
        (``next_upkeep == round_index``) or already done for this round
        (``next_upkeep == round_index + 1``). A node that never had
        bookkeeping cannot hold trust.
        """
        if self.next_upkeep == 0 and self.trust != 0.0:
            raise NodeStateError(
                repr(self), "trust accumulated before the first upkeep"
            )
        if self.next_upkeep not in (round_index, round_index + 1):
            raise NodeStateError(
                repr(self),
                f"next_upkeep={self.next_upkeep} during round {round_index}; "
                "was the node reset after its previous run?",
            )

    def __repr__(self) -> str:
        return (
            f"TrustNode(label={self.label!r}, trust={self.trust!r}, "
            f"next_upkeep={self.next_upkeep})"
        )
