"""Exception taxonomy for appleseed.

Parameter errors are raised before any node is touched. Node state faults
signal that the caller broke the reset precondition and are not meant to be
caught and retried.
"""
from __future__ import annotations


class ParameterValidationError(ValueError):
    """Base class for out-of-range AppleseedParams values."""


class InitialEnergyOutOfRangeError(ParameterValidationError):
    """Raised when initial_energy is not a finite, strictly positive number."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"initial_energy must be finite and > 0, got {value!r}")


class SpreadingFactorOutOfRangeError(ParameterValidationError):
    """Raised when spreading_factor lies outside [0, 1]."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"spreading_factor must be within [0, 1], got {value!r}")


class ThresholdOutOfRangeError(ParameterValidationError):
    """Raised when threshold is not strictly positive."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"threshold must be > 0, got {value!r}")


class MaxRoundsOutOfRangeError(ParameterValidationError):
    """Raised when a round ceiling is set below one round."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"max_rounds must be >= 1 when set, got {value!r}")


class InvalidEdgeWeightError(ValueError):
    """Raised when an edge weight is negative or not a finite number."""

    def __init__(self, weight: float) -> None:
        self.weight = weight
        super().__init__(
            f"Edge weight must be a finite non-negative number, got {weight!r}"
        )


class NodeNotFoundError(KeyError):
    """Raised when a label or handle is not present in a TrustGraph."""


class NodeStateError(AssertionError):
    """Raised when a node's bookkeeping fields are inconsistent mid-run.

    This almost always means nodes from a previous run were reused without
    calling ``reset()``. Scores produced past this point would be wrong, so
    the run is aborted.
    """

    def __init__(self, node_repr: str, reason: str) -> None:
        super().__init__(f"Inconsistent node state for {node_repr}: {reason}")


class NonConvergenceError(RuntimeError):
    """Raised when a run exceeds its configured ``max_rounds`` ceiling.

    Parameters
    ----------
    rounds:
        Number of completed rounds.
    max_delta:
        Largest per-round trust increase seen in the final round.
    """

    def __init__(self, rounds: int, max_delta: float) -> None:
        self.rounds = rounds
        self.max_delta = max_delta
        super().__init__(
            f"No convergence after {rounds} rounds "
            f"(last max delta {max_delta:.6g})"
        )
