"""Turn any hashable value into a graph node through an outgoing function."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

from nodify.node import Node

OutgoingWrapper = Callable[[Any], Iterable[Any]]


@dataclass
class NodifyiedBuilder:
    """Builds :class:`Nodifyied` nodes sharing one outgoing function."""

    outgoing_wrapper: OutgoingWrapper

    def build(self, current: Any) -> Nodifyied:
        """Wrap ``current`` as a node using the builder's outgoing function."""
        return Nodifyied(current, self.outgoing_wrapper)

    def with_outgoing(self, outgoing_wrapper: OutgoingWrapper) -> NodifyiedBuilder:
        """Replace the outgoing function and return the builder."""
        self.outgoing_wrapper = outgoing_wrapper
        return self


@dataclass(frozen=True)
class Nodifyied(Node):
    """A node wrapping a plain value; equality and hashing use the value only."""

    current: Any
    outgoing_wrapper: OutgoingWrapper = field(compare=False, repr=False)

    def outgoing(self) -> Iterator[Nodifyied]:
        wrapper = self.outgoing_wrapper
        return (Nodifyied(value, wrapper) for value in wrapper(self.current))

    def to_value(self) -> Any:
        """Return the wrapped value."""
        return self.current