"""Parallel depth-first search process."""

from __future__ import annotations

import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Hashable, List, Optional

from nodify.process import Predicate, Process

#: Number of nodes a single task pops before handing its stack back.
THRESHOLD = 50_000


class _Found(Exception):
    """Carries a matching node out of a worker."""

    def __init__(self, node: Any) -> None:
        super().__init__(node)
        self.node = node


class _VisitedSet:
    """A set shared between workers, with an atomic insert."""

    def __init__(self) -> None:
        self._items: set = set()
        self._lock = threading.Lock()

    def insert(self, node: Hashable) -> bool:
        """Add ``node``; tell whether it was not there before."""
        with self._lock:
            if node in self._items:
                return False
            self._items.add(node)
            return True

    def __contains__(self, node: Hashable) -> bool:
        with self._lock:
            return node in self._items


def _next_until(
    visited: _VisitedSet, to_visit: List[Any], threshold: int, pred: Predicate
) -> List[Any]:
    """Explore at most ``threshold`` nodes from ``to_visit``; return what is left.

    Raises :class:`_Found` as soon as a newly discovered node satisfies ``pred``.
    """
    for _ in range(threshold):
        if not to_visit:
            break
        node = to_visit.pop()
        if visited.insert(node):
            for nxt in node.outgoing():
                if nxt in visited:
                    continue
                if pred(nxt.to_value()):
                    raise _Found(nxt)
                to_visit.append(nxt)
    return to_visit


@dataclass(frozen=True)
class ParallelDFS(Process):
    """A depth-first search spread over worker threads.

    It offers ``contains`` and ``find_any``. The predicate is checked on the
    nodes discovered through outgoing edges, not on the start node itself.
    """

    node: Any

    @classmethod
    def from_node(cls, node: Any) -> ParallelDFS:
        return cls(node)

    def contains(self, pred: Predicate) -> bool:
        return self.find_any(pred) is not None

    def find_any(self, pred: Predicate) -> Optional[Any]:
        max_task = os.cpu_count() or 1
        visited = _VisitedSet()
        to_visit = [self.node]

        try:
            with ThreadPoolExecutor(max_workers=max_task) as pool:
                while to_visit:
                    if len(to_visit) < max_task:
                        to_visit = _next_until(visited, to_visit, THRESHOLD, pred)
                        continue

                    split = len(to_visit) - max_task
                    batch = to_visit[split:]
                    del to_visit[split:]

                    results = pool.map(
                        lambda start: _next_until(visited, [start], THRESHOLD, pred),
                        batch,
                    )
                    for remaining in results:
                        to_visit.extend(remaining)
        except _Found as found:
            return found.node

        return None