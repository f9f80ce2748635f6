"""Unit tests for appleseed.engine.discovery — outgoing-weight normalizers."""
from __future__ import annotations

import pytest

from appleseed.engine.discovery import discover_outgoing_weights
from appleseed.graph.edge import TrustEdge
from appleseed.graph.node import TrustNode


Chain = tuple[TrustNode, TrustNode, TrustNode, list[TrustEdge]]


@pytest.fixture()
def chain() -> Chain:
    a, b, c = TrustNode(label="a"), TrustNode(label="b"), TrustNode(label="c")
    edges = [
        TrustEdge(a, b, 0.8),
        TrustEdge(a, c, 0.4),
        TrustEdge(b, c, 0.6),
    ]
    return a, b, c, edges


class TestDiscoverOutgoingWeights:
    def test_source_gets_plain_sum(self, chain: Chain) -> None:
        a, _, _, edges = chain
        discover_outgoing_weights(a, edges)
        assert a.outgoing_weight == pytest.approx(1.2)

    def test_source_is_not_marked_discovered(self, chain: Chain) -> None:
        a, _, _, edges = chain
        discover_outgoing_weights(a, edges)
        assert a.outgoing_weights_discovered is False

    def test_inner_node_gets_sum_plus_one(self, chain: Chain) -> None:
        a, b, _, edges = chain
        discover_outgoing_weights(a, edges)
        assert b.outgoing_weight == pytest.approx(1.6)

    def test_sink_gets_exactly_one(self, chain: Chain) -> None:
        a, _, c, edges = chain
        discover_outgoing_weights(a, edges)
        assert c.outgoing_weight == pytest.approx(1.0)

    def test_non_source_nodes_are_marked_discovered(self, chain: Chain) -> None:
        a, b, c, edges = chain
        discover_outgoing_weights(a, edges)
        assert b.outgoing_weights_discovered
        assert c.outgoing_weights_discovered

    def test_result_independent_of_edge_order(self) -> None:
        forward = [TrustNode() for _ in range(3)]
        backward = [TrustNode() for _ in range(3)]

        def build(nodes: list[TrustNode]) -> list[TrustEdge]:
            a, b, c = nodes
            return [TrustEdge(a, b, 0.8), TrustEdge(b, c, 0.3), TrustEdge(c, a, 0.5)]

        discover_outgoing_weights(forward[0], build(forward))
        discover_outgoing_weights(backward[0], list(reversed(build(backward))))

        for f, b in zip(forward, backward):
            assert f.outgoing_weight == pytest.approx(b.outgoing_weight)

    def test_source_with_incoming_edge_only_stays_zero(self) -> None:
        a, b = TrustNode(), TrustNode()
        discover_outgoing_weights(a, [TrustEdge(b, a, 0.7)])
        assert a.outgoing_weight == 0.0
        assert b.outgoing_weight == pytest.approx(1.7)

    def test_empty_edge_list_is_noop(self) -> None:
        a = TrustNode()
        discover_outgoing_weights(a, [])
        assert a.is_fresh
