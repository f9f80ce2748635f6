"""Unit tests for appleseed.graph.edge — TrustEdge validation."""
from __future__ import annotations

import dataclasses

import pytest

from appleseed.errors import InvalidEdgeWeightError, NodeStateError
from appleseed.graph.edge import TrustEdge
from appleseed.graph.node import TrustNode


@pytest.fixture()
def pair() -> tuple[TrustNode, TrustNode]:
    return TrustNode(label="a"), TrustNode(label="b")


class TestTrustEdgeConstruction:
    def test_holds_node_references(self, pair: tuple[TrustNode, TrustNode]) -> None:
        a, b = pair
        edge = TrustEdge(source=a, dest=b, weight=0.8)
        assert edge.source is a
        assert edge.dest is b

    def test_zero_weight_is_allowed(self, pair: tuple[TrustNode, TrustNode]) -> None:
        a, b = pair
        assert TrustEdge(a, b, 0.0).weight == 0.0

    def test_integer_weight_is_allowed(self, pair: tuple[TrustNode, TrustNode]) -> None:
        a, b = pair
        assert TrustEdge(a, b, 2).weight == 2

    @pytest.mark.parametrize("weight", [-0.1, float("nan"), float("inf"), -float("inf")])
    def test_invalid_weight_raises(
        self, pair: tuple[TrustNode, TrustNode], weight: float
    ) -> None:
        a, b = pair
        with pytest.raises(InvalidEdgeWeightError):
            TrustEdge(a, b, weight)

    def test_non_numeric_weight_raises(self, pair: tuple[TrustNode, TrustNode]) -> None:
        a, b = pair
        with pytest.raises(InvalidEdgeWeightError):
            TrustEdge(a, b, "0.8")  # type: ignore[arg-type]

    def test_invalid_weight_error_is_value_error(self) -> None:
        assert issubclass(InvalidEdgeWeightError, ValueError)

    def test_edge_is_immutable(self, pair: tuple[TrustNode, TrustNode]) -> None:
        a, b = pair
        edge = TrustEdge(a, b, 0.8)
        with pytest.raises(dataclasses.FrozenInstanceError):
            edge.weight = 0.1  # type: ignore[misc]


class TestTrustEdgeCheckInvariant:
    def test_fresh_endpoints_pass(self, pair: tuple[TrustNode, TrustNode]) -> None:
        a, b = pair
        TrustEdge(a, b, 0.8).check_invariant(0)

    def test_stale_dest_raises(self, pair: tuple[TrustNode, TrustNode]) -> None:
        a, b = pair
        b.trust = 4.0
        with pytest.raises(NodeStateError):
            TrustEdge(a, b, 0.8).check_invariant(0)

    def test_stale_source_raises(self, pair: tuple[TrustNode, TrustNode]) -> None:
        a, b = pair
        a.next_upkeep = 9
        with pytest.raises(NodeStateError):
            TrustEdge(a, b, 0.8).check_invariant(0)
