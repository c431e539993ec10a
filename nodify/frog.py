"""The frog jump puzzle explored as a graph.

A frog starts on the first stone with speed one. From position ``p`` with
speed ``s`` it may jump to ``p + s + 1``, ``p + s - 1`` (when ``s - 1`` is
positive) or ``p + s``, taking the jump length as its new speed, provided a
stone lies there.
"""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from nodify.node import Node
from nodify.parallel_dfs import ParallelDFS

#: Stone count used by the command for plain frog nodes.
DEFAULT_COUNT = 1_000_000

#: Stone count used by the command for cached frog nodes.
DEFAULT_CACHED_COUNT = 10

#: Chance that an inner position holds a stone.
DEFAULT_PROBABILITY = 0.8


def _jumps(
    position: int, speed: int, has_stone: Sequence[bool]
) -> Iterator[Tuple[int, int]]:
    """Yield the ``(position, speed)`` pairs reachable by one jump."""
    if speed < 1:
        raise ValueError(f"frog speed must be at least 1, not {speed}")

    small_speed = speed - 1
    big_speed = speed + 1
    candidates = [(position + big_speed, big_speed)]
    if small_speed > 0:
        candidates.append((position + small_speed, small_speed))
    candidates.append((position + speed, speed))

    for pos, spd in candidates:
        if 0 <= pos < len(has_stone) and has_stone[pos]:
            yield pos, spd


@dataclass(frozen=True)
class FrogNode(Node):
    """The frog's position and speed; the stones only drive ``outgoing``.

    Equality and hashing use the position and speed alone.
    """

    position: int
    speed: int
    has_stone: Sequence[bool] = field(compare=False, hash=False, repr=False)

    def outgoing(self) -> Iterator[FrogNode]:
        for position, speed in _jumps(self.position, self.speed, self.has_stone):
            yield FrogNode(position, speed, self.has_stone)


@dataclass(frozen=True)
class CachedFrogNode(Node):
    """A frog state whose outgoing nodes are built once, up front.

    Equality and hashing use the position and speed alone.
    """

    position: int
    speed: int
    children: Tuple[CachedFrogNode, ...] = field(
        default=(), compare=False, hash=False, repr=False
    )

    @classmethod
    def build(
        cls, position: int, speed: int, has_stone: Sequence[bool]
    ) -> CachedFrogNode:
        """Build the node and, recursively, every node reachable from it."""
        stones = tuple(has_stone)
        cache: Dict[Tuple[int, int], CachedFrogNode] = {}

        # Positions strictly increase along jumps, so the recursion terminates.
        def make(pos: int, spd: int) -> CachedFrogNode:
            node = cache.get((pos, spd))
            if node is None:
                children = tuple(make(p, s) for p, s in _jumps(pos, spd, stones))
                node = cls(pos, spd, children)
                cache[(pos, spd)] = node
            return node

        return make(position, speed)

    def outgoing(self) -> Iterator[CachedFrogNode]:
        return iter(self.children)


def random_stones(count: int, probability: float) -> Tuple[bool, ...]:
    """Return a stone layout with stones at both ends and random ones between.

    Each of the ``count - 2`` inner positions holds a stone with the given
    probability.
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must lie in [0, 1], not {probability}")
    inner = (random.random() < probability for _ in range(max(count - 2, 0)))
    return (True, *inner, True)


def main(argv: Optional[List[str]] = None) -> int:
    """Draw a random river and tell whether the frog can cross it."""
    parser = argparse.ArgumentParser(
        prog="nodify-frog",
        description="Tell whether a frog can cross a random river.",
    )
    parser.add_argument("--count", type=int, default=None, help="number of positions")
    parser.add_argument(
        "--probability",
        type=float,
        default=DEFAULT_PROBABILITY,
        help="chance that an inner position holds a stone",
    )
    parser.add_argument(
        "--cached",
        action="store_true",
        help="build every reachable node before searching",
    )
    args = parser.parse_args(argv)

    count = args.count
    if count is None:
        count = DEFAULT_CACHED_COUNT if args.cached else DEFAULT_COUNT

    try:
        has_stone = random_stones(count, args.probability)
    except ValueError as error:
        parser.error(str(error))

    last = len(has_stone) - 1
    root: Node
    if args.cached:
        root = CachedFrogNode.build(0, 1, has_stone)
    else:
        root = FrogNode(0, 1, has_stone)
    is_last: Callable[[Node], bool] = lambda node: node.position == last

    start = time.perf_counter()
    is_solvable = root.to_process(ParallelDFS).contains(is_last)
    elapsed = time.perf_counter() - start

    print(repr(root))
    print(f"=> {is_solvable} ({elapsed:.6f}s)")
    return 0