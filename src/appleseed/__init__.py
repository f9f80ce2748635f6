"""appleseed — personalized trust ranking by spreading activation.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import appleseed
>>> appleseed.__version__
'0.1.0'

Quick start
-----------
::

    from appleseed import TrustGraph

    graph = TrustGraph()
    graph.add_edge("alice", "bob", 0.8)
    graph.add_edge("bob", "carol", 0.8)
    graph.run("alice")
    graph.trust_scores()  # {"alice": 0.0, "bob": ..., "carol": ...}
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ------------------------------------------------------------------
# Graph model
# ------------------------------------------------------------------
from appleseed.graph.arena import TrustGraph
from appleseed.graph.edge import TrustEdge
from appleseed.graph.node import TrustNode

# ------------------------------------------------------------------
# Parameters and errors
# ------------------------------------------------------------------
from appleseed.errors import (
    InitialEnergyOutOfRangeError,
    InvalidEdgeWeightError,
    MaxRoundsOutOfRangeError,
    NodeNotFoundError,
    NodeStateError,
    NonConvergenceError,
    ParameterValidationError,
    SpreadingFactorOutOfRangeError,
    ThresholdOutOfRangeError,
)
from appleseed.params import AppleseedParams

# ------------------------------------------------------------------
# Engine
# ------------------------------------------------------------------
from appleseed.engine.runner import RunStats, appleseed as run

__all__ = [
    # version
    "__version__",
    # graph
    "TrustEdge",
    "TrustGraph",
    "TrustNode",
    # parameters
    "AppleseedParams",
    # errors
    "InitialEnergyOutOfRangeError",
    "InvalidEdgeWeightError",
    "MaxRoundsOutOfRangeError",
    "NodeNotFoundError",
    "NodeStateError",
    "NonConvergenceError",
    "ParameterValidationError",
    "SpreadingFactorOutOfRangeError",
    "ThresholdOutOfRangeError",
    # engine
    "RunStats",
    "run",
]
