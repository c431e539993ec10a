"""Delta-stepping process over weighted graphs."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from nodify.process import Predicate, Process

_Edge = Tuple[Any, Any]


@dataclass
class DeltaStepping(Process):
    """A delta-stepping shortest-path exploration.

    It offers ``contains``, ``find_any`` and ``find_first``; the first node
    is the one with the lowest distance from the start. Weights must be
    non-negative integers. The default ``delta`` is zero, so a positive one
    must be set with :meth:`with_delta` before any edge can be relaxed.
    Searching consumes the process's buckets and distances.
    """

    node: Any
    delta: int = 0
    buckets: Dict[int, List[Any]] = field(default_factory=dict)
    dists: Dict[Any, int] = field(default_factory=dict)

    @classmethod
    def from_node(cls, node: Any) -> DeltaStepping:
        return cls(node, 0, {0: [node]}, {node: 0})

    def with_delta(self, delta: int) -> DeltaStepping:
        """Return the same process with ``delta`` as bucket width."""
        return replace(self, delta=delta)

    def contains(self, pred: Predicate) -> bool:
        return self.find_first(pred) is not None

    def find_any(self, pred: Predicate) -> Optional[Any]:
        return self.find_first(pred)

    def find_first(self, pred: Predicate) -> Optional[Any]:
        while True:
            index = self._first_bucket_index()
            if index is None:
                return None

            solved: Optional[_Edge] = None
            heavy_edges: List[_Edge] = []

            while index in self.buckets:
                for node in self.buckets.pop(index):
                    result, heavy = self._explore(node, pred)
                    if result is not None:
                        if solved is None or result[0] < solved[0]:
                            solved = result
                    elif solved is None:
                        heavy_edges.extend(heavy)

            if solved is not None:
                return solved[1]

            for new_dist, node in heavy_edges:
                self._relax(node, new_dist)

    def _first_bucket_index(self) -> Optional[int]:
        return min((key for key, bucket in self.buckets.items() if bucket), default=None)

    def _explore(self, node: Any, pred: Predicate) -> Tuple[Optional[_Edge], List[_Edge]]:
        """Check ``node``; relax its light edges and return its heavy ones."""
        base_dist = self.dists.get(node, 0)

        if pred(node.to_value()):
            return (base_dist, node), []

        heavy: List[_Edge] = []
        for weight, nxt in node.weighted_outgoing():
            new_dist = base_dist + weight
            if weight > self.delta:
                heavy.append((new_dist, nxt))
            else:
                self._relax(nxt, new_dist)
        return None, heavy

    def _relax(self, node: Any, new_dist: int) -> None:
        old_dist = self.dists.get(node)
        if old_dist is None or new_dist < old_dist:
            self.dists[node] = new_dist
            self.buckets.setdefault(new_dist // self.delta, []).append(node)