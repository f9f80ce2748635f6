#!/usr/bin/env python3
"""Example: Driving the engine directly

Uses TrustNode and TrustEdge without the TrustGraph arena, and shows what
happens when nodes are reused without a reset.

Usage:
    python examples/02_bare_engine.py

Requirements:
    pip install appleseed-trust
"""
from __future__ import annotations

import logging

from appleseed import AppleseedParams, NodeStateError, TrustEdge, TrustNode, run


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    source = TrustNode(label="source")
    friend = TrustNode(label="friend")
    friend_of_friend = TrustNode(label="friend-of-friend")
    edges = [
        TrustEdge(source, friend, 0.9),
        TrustEdge(friend, friend_of_friend, 0.6),
    ]

    run(source, edges, AppleseedParams(spreading_factor=0.8))
    for node in (source, friend, friend_of_friend):
        print(f"  {node.label:<18} {node.trust:10.4f}")

    # Nodes carry per-run bookkeeping; running again without reset is refused.
    try:
        run(source, edges)
    except NodeStateError as exc:
        print(f"\nRefused: {exc}")

    for node in (source, friend, friend_of_friend):
        node.reset()
    run(source, edges, AppleseedParams(spreading_factor=0.8))
    print(f"\nAfter reset, friend trust = {friend.trust:.4f}")


if __name__ == "__main__":
    main()
