"""The Fibonacci sequence explored as a graph."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterator, List, Optional

from nodify.dfs import DFS
from nodify.node import Node
from nodify.nodifyied import NodifyiedBuilder

#: The term searched for by the command.
TARGET = 610

#: The integer searched for by the ``simple`` mode of the command.
SIMPLE_TARGET = 42


@dataclass(frozen=True)
class FiboNode(Node):
    """The state of the sequence: the previous term and the current one."""

    previous: int
    current: int

    @classmethod
    def first(cls) -> FiboNode:
        """Return the node holding the two first terms of the sequence."""
        return cls(previous=0, current=1)

    def outgoing(self) -> Iterator[FiboNode]:
        """Yield the single next state of the sequence."""
        yield FiboNode(previous=self.current, current=self.previous + self.current)


def fibonacci_step(node: FiboNode) -> Iterator[FiboNode]:
    """Yield the state following ``node``; usable as an outgoing function."""
    yield FiboNode(previous=node.current, current=node.previous + node.current)


def _successor(value: int) -> Iterator[int]:
    yield value + 1


def main(argv: Optional[List[str]] = None) -> int:
    """Search the Fibonacci sequence, or the integers, for a given term."""
    parser = argparse.ArgumentParser(
        prog="nodify-fibonacci",
        description="Search a sequence explored as a graph.",
    )
    parser.add_argument(
        "--mode",
        choices=("node", "nodifyied", "simple"),
        default="node",
        help="node: FiboNode as a node; nodifyied: FiboNode wrapped by a builder; "
        "simple: integers wrapped by a builder",
    )
    args = parser.parse_args(argv)

    if args.mode == "simple":
        found = (
            NodifyiedBuilder(_successor)
            .build(0)
            .to_process(DFS)
            .contains(lambda i: i == SIMPLE_TARGET)
        )
        print(found)
        return 0

    first = FiboNode.first()
    if args.mode == "node":
        root = first
    else:
        root = NodifyiedBuilder(fibonacci_step).build(first)

    result = root.to_process(DFS).contains(lambda node: node.current == TARGET)
    print(f"{first!r} => {result}")
    return 0