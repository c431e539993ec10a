from itertools import islice

from nodify.dfs import DFS
from nodify.fibonacci import FiboNode, fibonacci_step, main
from nodify.nodifyied import NodifyiedBuilder


def _chain(node, length):
    for _ in range(length):
        yield node
        (node,) = list(node.outgoing())


def test_first_holds_the_two_first_terms():
    assert FiboNode.first() == FiboNode(previous=0, current=1)


def test_outgoing_of_first():
    assert list(FiboNode.first().outgoing()) == [FiboNode(previous=1, current=1)]


def test_outgoing_has_a_single_successor_following_the_recurrence():
    for node in _chain(FiboNode.first(), 20):
        successors = list(node.outgoing())
        assert len(successors) == 1
        (nxt,) = successors
        assert nxt.previous == node.current
        assert nxt.current == node.previous + node.current


def test_fibonacci_step_matches_outgoing():
    for node in _chain(FiboNode.first(), 15):
        assert list(fibonacci_step(node)) == list(node.outgoing())


def test_dfs_contains_610():
    assert FiboNode.first().to_process(DFS).contains(lambda n: n.current == 610)


def test_dfs_find_any_returns_the_matching_node():
    found = FiboNode.first().to_process(DFS).find_any(lambda n: n.current == 610)
    assert found.current == 610
    assert found in list(_chain(FiboNode.first(), 30))


def test_dfs_finds_first_node_itself():
    first = FiboNode.first()
    assert first.to_process(DFS).find_any(lambda n: n == first) == first


def test_nodifyied_fibonacci_contains_610():
    root = NodifyiedBuilder(fibonacci_step).build(FiboNode.first())
    assert root.to_process(DFS).contains(lambda n: n.current == 610)


def test_nodifyied_fibonacci_value_is_a_fibo_node():
    root = NodifyiedBuilder(fibonacci_step).build(FiboNode.first())
    found = root.to_process(DFS).find_any(lambda n: n.current == 610)
    value = found.to_value()
    assert isinstance(value, FiboNode)
    assert value.current == 610


def test_nodifyied_sequence_follows_fibo_nodes():
    root = NodifyiedBuilder(fibonacci_step).build(FiboNode.first())
    wrapped = [n.to_value() for n in islice(_chain(root, 10), 10)]
    assert wrapped == list(_chain(FiboNode.first(), 10))


def test_simple_nodifyied_finds_42():
    root = NodifyiedBuilder(lambda i: iter((i + 1,))).build(0)
    assert root.to_process(DFS).contains(lambda i: i == 42)


def test_main_node_mode(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "FiboNode(previous=0, current=1) => True"


def test_main_nodifyied_mode(capsys):
    assert main(["--mode", "nodifyied"]) == 0
    assert capsys.readouterr().out.strip() == "FiboNode(previous=0, current=1) => True"


def test_main_simple_mode(capsys):
    assert main(["--mode", "simple"]) == 0
    assert capsys.readouterr().out.strip() == "True"