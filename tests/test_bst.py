import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.bst import BinarySearchTree
from algokit.errors import EmptyError

BALANCED = [50, 30, 70, 20, 40, 60, 80]
CLRS = [15, 18, 17, 20, 6, 3, 4, 2, 7, 13, 9]


@pytest.fixture
def balanced():
    return BinarySearchTree(BALANCED)


@pytest.fixture
def clrs():
    return BinarySearchTree(CLRS)


def test_inorder_of_balanced_tree(balanced):
    assert balanced.inorder() == [20, 30, 40, 50, 60, 70, 80]
    assert len(balanced) == 7


def test_search_missing_value(balanced):
    assert balanced.search(8) is None
    assert 8 not in balanced


def test_search_present_value(balanced):
    assert balanced.search(60) == 60
    assert 60 in balanced


def test_minimum_and_maximum(balanced):
    assert balanced.minimum() == 20
    assert balanced.maximum() == 80


def test_minimum_and_maximum_of_empty_tree():
    tree = BinarySearchTree()
    with pytest.raises(EmptyError):
        tree.minimum()
    with pytest.raises(EmptyError):
        tree.maximum()


@pytest.mark.parametrize("value, expected", [(30, 40), (40, 50), (80, None)])
def test_successor(balanced, value, expected):
    assert balanced.successor(value) == expected


@pytest.mark.parametrize("value, expected", [(50, 40), (60, 50), (20, None)])
def test_predecessor(balanced, value, expected):
    assert balanced.predecessor(value) == expected


@pytest.mark.parametrize("value, expected", [(15, 17), (13, 15)])
def test_successor_clrs(clrs, value, expected):
    assert clrs.successor(value) == expected


@pytest.mark.parametrize("value, expected", [(6, 4), (4, 3)])
def test_predecessor_clrs(clrs, value, expected):
    assert clrs.predecessor(value) == expected


def test_successor_of_missing_value_raises(balanced):
    with pytest.raises(KeyError):
        balanced.successor(8)
    with pytest.raises(KeyError):
        balanced.predecessor(8)


def test_delete_node_with_two_children(clrs):
    assert clrs.delete(6) is True
    assert clrs.inorder() == [2, 3, 4, 7, 9, 13, 15, 17, 18, 20]
    assert 6 not in clrs
    assert len(clrs) == len(CLRS) - 1


def test_delete_root(clrs):
    assert clrs.delete(15)
    assert clrs.inorder() == sorted(v for v in CLRS if v != 15)
    assert clrs.predecessor(17) == 13


def test_delete_missing_value_leaves_tree(balanced):
    assert balanced.delete(8) is False
    assert balanced.inorder() == sorted(BALANCED)
    assert len(balanced) == len(BALANCED)


def test_delete_everything_empties_tree(balanced):
    for value in BALANCED:
        assert balanced.delete(value)
    assert balanced.inorder() == []
    assert len(balanced) == 0
    with pytest.raises(EmptyError):
        balanced.minimum()


def test_duplicates_are_kept():
    tree = BinarySearchTree([5, 5, 3, 5])
    assert tree.inorder() == [3, 5, 5, 5]
    tree.delete(5)
    assert tree.inorder() == [3, 5, 5]


@given(st.lists(st.integers()))
def test_inorder_is_sorted(values):
    tree = BinarySearchTree(values)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)


@given(st.lists(st.integers(), unique=True, min_size=1))
def test_successor_and_predecessor_follow_sorted_order(values):
    tree = BinarySearchTree(values)
    ordered = sorted(values)
    for before, after in zip(ordered, ordered[1:]):
        assert tree.successor(before) == after
        assert tree.predecessor(after) == before
    assert tree.successor(ordered[-1]) is None
    assert tree.predecessor(ordered[0]) is None
    assert tree.minimum() == ordered[0]
    assert tree.maximum() == ordered[-1]


@given(st.lists(st.integers(-20, 20)), st.lists(st.integers(-20, 20)))
def test_delete_matches_list_removal(values, removals):
    tree = BinarySearchTree(values)
    remaining = list(values)
    for value in removals:
        expected = value in remaining
        if expected:
            remaining.remove(value)
        assert tree.delete(value) is expected
    assert tree.inorder() == sorted(remaining)
    assert len(tree) == len(remaining)