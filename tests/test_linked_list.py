import pytest

from algorithmics.linked_list import Node, from_values, sorted_merge, to_values


def test_merge_source_example():
    merged = sorted_merge(from_values([5, 10, 15]), from_values([2, 3, 20]))
    assert to_values(merged) == [2, 3, 5, 10, 15, 20]


@pytest.mark.parametrize(
    "first, second",
    [([], []), ([1, 2], []), ([], [3]), ([1, 4, 9], [2, 2, 10, 11]), ([7], [1, 2, 3])],
)
def test_merge_matches_sorted(first, second):
    merged = sorted_merge(from_values(first), from_values(second))
    assert to_values(merged) == sorted(first + second)


def test_merge_reuses_original_nodes():
    first = from_values([1, 3])
    second = from_values([2])
    originals = {id(first), id(first.next), id(second)}
    merged = sorted_merge(first, second)
    ids = set()
    node = merged
    while node is not None:
        ids.add(id(node))
        node = node.next
    assert ids == originals


def test_merge_ties_take_second_first():
    a = Node(1)
    b = Node(1)
    merged = sorted_merge(a, b)
    assert merged is b
    assert merged.next is a


def test_round_trip():
    values = [4, 8, 15, 16, 23, 42]
    assert to_values(from_values(values)) == values


def test_empty_list_is_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_node_iteration():
    head = Node("a", Node("b", Node("c")))
    assert list(head) == ["a", "b", "c"]