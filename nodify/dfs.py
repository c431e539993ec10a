"""Depth-first search process."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from nodify.process import Predicate, Process


@dataclass(frozen=True)
class DFS(Process):
    """A depth-first search offering ``contains`` and ``find_any``."""

    node: Any

    @classmethod
    def from_node(cls, node: Any) -> DFS:
        return cls(node)

    def contains(self, pred: Predicate) -> bool:
        return self.find_any(pred) is not None

    def find_any(self, pred: Predicate) -> Optional[Any]:
        visited: set = set()
        to_visit = [self.node]

        while to_visit:
            node = to_visit.pop()
            if pred(node.to_value()):
                return node
            if node not in visited:
                visited.add(node)
                to_visit.extend(n for n in node.outgoing() if n not in visited)

        return None