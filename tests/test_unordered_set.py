import pytest

from containerkit.unordered_set import UnorderedSet


@pytest.fixture
def pair():
    return UnorderedSet([1, 2, 3]), UnorderedSet([2, 3, 4])


def test_add():
    s = UnorderedSet()
    assert s.add(1) is True
    assert s.add(2) is True
    assert s.add(3) is True
    assert 1 in s and 2 in s and 3 in s
    assert s.add(1) is False
    assert len(s) == 3


def test_remove():
    s = UnorderedSet([1, 2, 3])
    assert s.remove(2) is True
    assert 2 not in s
    assert s.remove(2) is False
    assert len(s) == 2


def test_contains():
    s = UnorderedSet([1, 2])
    assert 1 in s
    assert 2 in s
    assert 3 not in s


def test_size():
    s = UnorderedSet()
    s.add(1)
    s.add(2)
    assert len(s) == 2


def test_clear():
    s = UnorderedSet([1, 2])
    s.clear()
    assert len(s) == 0
    assert 1 not in s


def test_to_list():
    s = UnorderedSet([1, 2])
    result = s.to_list()
    assert len(result) == 2
    assert sorted(result) == [1, 2]


def test_difference(pair):
    set1, set2 = pair
    assert set1.difference(set2) == UnorderedSet([1])


def test_intersection(pair):
    set1, set2 = pair
    assert set1.intersection(set2) == UnorderedSet([2, 3])


def test_symmetric_difference(pair):
    set1, set2 = pair
    assert set1.symmetric_difference(set2) == UnorderedSet([1, 4])


def test_union(pair):
    set1, set2 = pair
    assert set1.union(set2) == UnorderedSet([1, 2, 3, 4])


def test_operations_leave_operands_unchanged(pair):
    set1, set2 = pair
    set1.union(set2)
    set1.symmetric_difference(set2)
    assert set1 == UnorderedSet([1, 2, 3])
    assert set2 == UnorderedSet([2, 3, 4])


def test_iterator():
    s = UnorderedSet([1, 2, 3])
    it = s.iterator()
    expected = {1, 2, 3}
    while it.has_next():
        value = next(it)
        assert value in expected
        expected.discard(value)
    assert expected == set()
    with pytest.raises(StopIteration, match="no more elements"):
        next(it)


def test_equality_ignores_order():
    assert UnorderedSet([3, 1, 2]) == UnorderedSet([1, 2, 3])
    assert UnorderedSet([1, 2]) != UnorderedSet([1, 2, 3])