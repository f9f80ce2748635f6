"""AppleseedParams — energy budget, spreading factor, and convergence bound.

Defaults follow the values found experimentally in the Appleseed
paper. Construction accepts any number; ranges are checked by
``validate_ranges()``, which the engine calls before touching a node.
"""
from __future__ import annotations

import math

from pydantic import BaseModel

from appleseed.errors import (
    InitialEnergyOutOfRangeError,
    MaxRoundsOutOfRangeError,
    SpreadingFactorOutOfRangeError,
    ThresholdOutOfRangeError,
)

DEFAULT_INITIAL_ENERGY = 200.0
DEFAULT_SPREADING_FACTOR = 0.85
DEFAULT_THRESHOLD = 0.01

# Rounds that must complete before the convergence test may stop a run.
MIN_ROUNDS = 3


class AppleseedParams(BaseModel):
    """Numeric configuration for a single Appleseed run.

    Parameters
    ----------
    initial_energy:
        Total energy injected at the source node. Must be finite and > 0.
    spreading_factor:
        Fraction of a node's available energy forwarded each round; the
        remaining ``1 - spreading_factor`` is kept as trust. Must be in [0, 1].
    threshold:
        A run stops once the largest per-round trust increase is at or below
        this value. Must be > 0.
    max_rounds:
        Optional round ceiling. ``None`` means the run only stops on
        convergence; otherwise exceeding it raises NonConvergenceError.
    """

    initial_energy: float = DEFAULT_INITIAL_ENERGY
    spreading_factor: float = DEFAULT_SPREADING_FACTOR
    threshold: float = DEFAULT_THRESHOLD
    max_rounds: int | None = None

    model_config = {"frozen": True}

    def validate_ranges(self) -> None:
        """Raise a ParameterValidationError subclass for any out-of-range value."""
        if not (math.isfinite(self.initial_energy) and self.initial_energy > 0):
            raise InitialEnergyOutOfRangeError(self.initial_energy)
        if not 0.0 <= self.spreading_factor <= 1.0:
            raise SpreadingFactorOutOfRangeError(self.spreading_factor)
        if not self.threshold > 0:
            raise ThresholdOutOfRangeError(self.threshold)
        if self.max_rounds is not None and self.max_rounds < 1:
            raise MaxRoundsOutOfRangeError(self.max_rounds)
