from dataclasses import dataclass

import pytest

from nodify.delta import DeltaStepping
from nodify.dfs import DFS
from nodify.node import Node, Weighted
from nodify.process import Process


@dataclass(frozen=True)
class Counter(Node):
    value: int
    limit: int

    def outgoing(self):
        if self.value < self.limit:
            yield Counter(self.value + 1, self.limit)


@dataclass(frozen=True)
class Edge(Node, Weighted):
    value: int

    def weighted_outgoing(self):
        yield (3, Edge(self.value + 1))

    def outgoing(self):
        return (node for _, node in self.weighted_outgoing())


def test_node_is_abstract():
    with pytest.raises(TypeError):
        Node()


def test_weighted_is_abstract():
    with pytest.raises(TypeError):
        Weighted()


def test_to_value_is_reflexive():
    node = Counter(1, 5)
    assert Node.to_value(node) is node


def test_to_process_builds_dfs_rooted_at_node():
    node = Counter(0, 3)
    process = Node.to_process(node, DFS)
    assert isinstance(process, DFS)
    assert process.node == node


def test_to_process_with_base_process():
    node = Counter(0, 3)
    process = Node.to_process(node, Process)
    assert process.node is node


def test_outgoing_neighbours_are_explored():
    assert DFS.from_node(Counter(0, 2)).find_any(lambda n: n.value == 2) == Counter(2, 2)
    assert DFS.from_node(Counter(0, 2)).contains(lambda n: n.value == 3) is False


def test_weighted_outgoing_drives_distances():
    process = DeltaStepping.from_node(Edge(1)).with_delta(1)
    assert process.find_first(lambda n: n.value == 3) == Edge(3)
    assert process.dists[Edge(3)] == 6