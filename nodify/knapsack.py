"""The 0/1 knapsack problem explored as a weighted graph.

Each state decides the first remaining item. Edge weights are the largest
item value minus the value taken, so every weight is non-negative and the
lightest path to a final state carries the greatest total value.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from nodify.delta import DeltaStepping
from nodify.node import Node, Weighted


@dataclass(frozen=True)
class Item:
    """A knapsack item."""

    value: int
    weight: int


#: The items solved by the command.
DEFAULT_ITEMS: Tuple[Item, ...] = (
    Item(value=1, weight=1),
    Item(value=7, weight=2),
    Item(value=11, weight=3),
)

#: The capacity used by the command.
DEFAULT_CAPACITY = 5

#: The bucket width used by the command.
DEFAULT_DELTA = 2


@dataclass(frozen=True)
class Knapsack(Node, Weighted):
    """A state: the remaining capacity and items, and the value gathered."""

    capacity: int
    items: Tuple[Item, ...]
    value: int
    max_value: int

    @classmethod
    def new(cls, capacity: int, items: Iterable[Item]) -> Knapsack:
        """Build the initial state; raise ``ValueError`` if there are no items."""
        items = tuple(items)
        if not items:
            raise ValueError("a knapsack needs at least one item")
        max_value = max(item.value for item in items)
        return cls(capacity=capacity, items=items, value=0, max_value=max_value)

    def is_solution(self) -> bool:
        """Tell whether every item has been decided."""
        return not self.items

    def weighted_outgoing(self) -> Iterator[Tuple[int, Knapsack]]:
        """Yield skipping the first item, then taking it if it fits."""
        if not self.items:
            return
        first, *rest = self.items
        rest = tuple(rest)

        yield self.max_value, Knapsack(self.capacity, rest, self.value, self.max_value)

        if first.weight <= self.capacity:
            yield self.max_value - first.value, Knapsack(
                self.capacity - first.weight,
                rest,
                self.value + first.value,
                self.max_value,
            )

    def outgoing(self) -> Iterator[Knapsack]:
        return (node for _, node in self.weighted_outgoing())


def main(argv: Optional[List[str]] = None) -> int:
    """Solve the sample knapsack and print the best value and its weight."""
    parser = argparse.ArgumentParser(
        prog="nodify-knapsack",
        description="Solve a sample 0/1 knapsack by delta stepping.",
    )
    parser.add_argument("--delta", type=int, default=DEFAULT_DELTA, help="bucket width")
    args = parser.parse_args(argv)
    if args.delta < 1:
        parser.error("delta must be a positive integer")

    root = Knapsack.new(DEFAULT_CAPACITY, DEFAULT_ITEMS)
    solution = (
        root.to_process(DeltaStepping)
        .with_delta(args.delta)
        .find_first(lambda node: node.is_solution())
    )
    if solution is None:
        print("No solution", file=sys.stderr)
        return 1

    weight = DEFAULT_CAPACITY - solution.capacity
    print(f"value = {solution.value}, weight = {weight}")
    return 0