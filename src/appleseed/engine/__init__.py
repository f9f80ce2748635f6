"""Appleseed propagation engine.

The discovery pass computes outgoing-weight normalizers, upkeep performs the
lazy once-per-round bookkeeping, and the runner drives rounds until the
largest per-round trust increase falls to the threshold.
"""
from __future__ import annotations

from appleseed.engine.discovery import discover_outgoing_weights
from appleseed.engine.runner import RunStats, appleseed
from appleseed.engine.upkeep import UpkeepContext, maybe_upkeep, propagate, upkeep

__all__ = [
    "RunStats",
    "UpkeepContext",
    "appleseed",
    "discover_outgoing_weights",
    "maybe_upkeep",
    "propagate",
    "upkeep",
]
