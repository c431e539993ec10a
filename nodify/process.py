"""The process abstraction: a graph exploration rooted at one node."""

from __future__ import annotations

from typing import Any, Callable, Optional

Predicate = Callable[[Any], bool]


class ProcessNotSupported(TypeError):
    """Raised when a process does not offer the requested operation."""


class Process:
    """A graph exploration rooted at a start node.

    Subclasses implement :meth:`find_any`, :meth:`find_first` or both;
    :meth:`contains` is derived from :meth:`find_any`, which itself falls
    back on :meth:`find_first`.
    """

    node: Any

    def __init__(self, node: Any) -> None:
        self.node = node

    @classmethod
    def from_node(cls, node: Any) -> Process:
        """Build the process rooted at ``node``."""
        return cls(node)

    def contains(self, pred: Predicate) -> bool:
        """Tell whether any reachable node satisfies ``pred``."""
        return self.find_any(pred) is not None

    def find_any(self, pred: Predicate) -> Optional[Any]:
        """Return some reachable node satisfying ``pred``, not necessarily the first."""
        return self.find_first(pred)

    def find_first(self, pred: Predicate) -> Optional[Any]:
        """Return the first reachable node satisfying ``pred``.

        For a weighted graph the first node is the one closest to the start.
        """
        raise ProcessNotSupported(
            f"{type(self).__name__} does not support find_first"
        )