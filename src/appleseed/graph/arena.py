"""TrustGraph — a node arena addressed by stable integer handles.

Nodes live in a flat list; a handle is an index into it. Labels map to
handles so graphs can be built from named records. The arena owns node
allocation and explicit reset between runs; the engine itself never resets
anything.
"""
from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping

from appleseed.engine.runner import RunStats, appleseed
from appleseed.errors import NodeNotFoundError
from appleseed.graph.edge import TrustEdge
from appleseed.graph.node import TrustNode
from appleseed.params import AppleseedParams


class TrustGraph:
    """In-memory trust graph built from labelled edges.

    Example
    -------
    ::

        graph = TrustGraph()
        graph.add_edge("alice", "bob", 0.8)
        graph.add_edge("bob", "carol", 0.6)
        graph.run("alice")
        print(graph.trust_scores())
    """

    def __init__(self) -> None:
        self._nodes: list[TrustNode] = []
        self._handles: dict[str, int] = {}
        self._edges: list[TrustEdge] = []
        self._lock = threading.Lock()

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]]) -> "TrustGraph":
        """Build a graph from mappings with ``source``, ``dest`` and ``weight`` keys.

        Raises
        ------
        KeyError
            If a record is missing one of the required keys.
        InvalidEdgeWeightError
            If a weight is negative or not a finite number.
        """
        graph = cls()
        for record in records:
            graph.add_edge(
                str(record["source"]),
                str(record["dest"]),
                float(record["weight"]),  # type: ignore[arg-type]
            )
        return graph

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_node(self, label: str) -> int:
        """Return the handle for *label*, allocating a fresh node if needed."""
        with self._lock:
            return self._add_node(label)

    def _add_node(self, label: str) -> int:
        handle = self._handles.get(label)
        if handle is None:
            handle = len(self._nodes)
            self._nodes.append(TrustNode(label=label))
            self._handles[label] = handle
        return handle

    def add_edge(self, source: str, dest: str, weight: float) -> TrustEdge:
        """Append a directed edge between two labelled nodes.

        Edges are walked in insertion order during a run.
        """
        with self._lock:
            src = self._nodes[self._add_node(source)]
            dst = self._nodes[self._add_node(dest)]
            edge = TrustEdge(source=src, dest=dst, weight=weight)
            self._edges.append(edge)
        return edge

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def handle(self, label: str) -> int:
        """Return the handle of *label*.

        Raises
        ------
        NodeNotFoundError
            If no node carries *label*.
        """
        try:
            return self._handles[label]
        except KeyError:
            raise NodeNotFoundError(label) from None

    def node(self, key: int | str) -> TrustNode:
        """Return the node for a handle or a label."""
        if isinstance(key, str):
            return self._nodes[self.handle(key)]
        if not 0 <= key < len(self._nodes):
            raise NodeNotFoundError(key)
        return self._nodes[key]

    @property
    def labels(self) -> list[str]:
        """Node labels in handle order."""
        return [node.label for node in self._nodes]

    @property
    def nodes(self) -> tuple[TrustNode, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[TrustEdge, ...]:
        return tuple(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, label: object) -> bool:
        return label in self._handles

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Return every node to its default state before the next run."""
        with self._lock:
            for node in self._nodes:
                node.reset()

    def run(self, source: str, params: AppleseedParams | None = None) -> RunStats:
        """Run Appleseed from the node labelled *source*.

        Nodes must have been reset since the previous run; this method does
        not do it for you.
        """
        with self._lock:
            return appleseed(self.node(source), self._edges, params)

    def trust_scores(self) -> dict[str, float]:
        """Map each label to its current trust, in handle order."""
        return {node.label: node.trust for node in self._nodes}
