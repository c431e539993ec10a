"""Graph nodes: the abstractions every process walks over."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterator, Tuple, Type, TypeVar

if TYPE_CHECKING:
    from nodify.process import Process

P = TypeVar("P", bound="Process")


class Node(ABC):
    """A graph node that knows its outgoing neighbours.

    Processes rely on :meth:`outgoing` to travel the graph. Nodes are
    expected to be hashable, since processes remember visited nodes.
    """

    @abstractmethod
    def outgoing(self) -> Iterator[Node]:
        """Yield the outgoing neighbours of this node."""

    def to_process(self, process_cls: Type[P]) -> P:
        """Build a process of the given class rooted at this node."""
        return process_cls.from_node(self)

    def to_value(self) -> Any:
        """Return the value handed to predicates; the node itself by default."""
        return self


class Weighted(ABC):
    """A graph node whose outgoing edges carry a weight."""

    @abstractmethod
    def weighted_outgoing(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(weight, node)`` pairs for each outgoing edge."""