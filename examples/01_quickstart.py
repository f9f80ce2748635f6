#!/usr/bin/env python3
"""Example: Quickstart

Builds a small trust graph, computes trust from one member's point of
view, and prints the scores.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install appleseed-trust
"""
from __future__ import annotations

import appleseed
from appleseed import AppleseedParams, TrustGraph


def main() -> None:
    print(f"appleseed version: {appleseed.__version__}")

    # Step 1: Describe who trusts whom, and how much
    graph = TrustGraph()
    graph.add_edge("alice", "bob", 0.8)
    graph.add_edge("alice", "carol", 0.8)
    graph.add_edge("bob", "dave", 0.8)
    graph.add_edge("bob", "erin", 0.8)
    graph.add_edge("carol", "dave", 0.8)
    graph.add_edge("xavier", "yara", 0.9)

    # Step 2: Compute trust from alice's perspective
    stats = graph.run("alice", AppleseedParams(threshold=0.001))
    print(f"\nConverged after {stats.rounds} rounds")

    # Step 3: Read the scores
    for label, trust in graph.trust_scores().items():
        print(f"  {label:<8} {trust:10.4f}")

    # Step 4: Reset before computing another member's view
    graph.reset()
    graph.run("bob")
    print("\nFrom bob's perspective:")
    for label, trust in graph.trust_scores().items():
        print(f"  {label:<8} {trust:10.4f}")


if __name__ == "__main__":
    main()
