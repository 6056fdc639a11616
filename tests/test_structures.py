import pytest

from percolation.errors import InvalidArgument, OutOfRange
from percolation.structures import DisjointSet


def test_new_set_has_singletons():
    sets = DisjointSet(4)
    assert [sets.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert sets.components == 4
    assert len(sets) == 4


def test_union_connects_and_counts_components():
    sets = DisjointSet(5)
    sets.union(0, 1)
    sets.union(3, 4)
    assert sets.connected(0, 1)
    assert sets.connected(4, 3)
    assert not sets.connected(1, 3)
    assert sets.components == 3


def test_union_of_joined_elements_is_noop():
    sets = DisjointSet(3)
    sets.union(0, 1)
    sets.union(1, 0)
    assert sets.components == 2
    assert sets.size[sets.find(0)] == 2


def test_equal_sizes_attach_second_root_under_first():
    sets = DisjointSet(2)
    sets.union(1, 0)
    assert sets.find(0) == 1


def test_smaller_tree_goes_under_larger_root():
    sets = DisjointSet(4)
    sets.union(0, 1)
    sets.union(0, 2)
    sets.union(3, 0)
    assert sets.find(3) == 0
    assert sets.size[0] == 4


def test_find_compresses_path():
    sets = DisjointSet(4)
    sets.union(0, 1)
    sets.union(2, 3)
    sets.union(0, 2)
    assert sets.parent[3] == 2
    assert sets.find(3) == 0
    assert sets.parent[3] == 0


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_out_of_range_index_rejected(index):
    sets = DisjointSet(3)
    with pytest.raises(OutOfRange):
        sets.find(index)
    with pytest.raises(OutOfRange):
        sets.union(0, index)
    assert sets.components == 3


def test_negative_count_rejected():
    with pytest.raises(InvalidArgument):
        DisjointSet(-1)


@pytest.mark.parametrize("left, right", [(0, 3), (-1, 0), (5, 5)])
def test_connected_rejects_out_of_range_index(left, right):
    sets = DisjointSet(3)
    with pytest.raises(OutOfRange):
        sets.connected(left, right)
