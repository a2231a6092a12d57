import pytest

from containerkit.deque import Deque


@pytest.mark.parametrize(
    "method, expected", [("push_first", [2, 1]), ("push_last", [1, 2])]
)
def test_push(method, expected):
    q = Deque()
    for size, value in enumerate((1, 2), start=1):
        getattr(q, method)(value)
        assert len(q) == size
    assert q.to_list() == expected


@pytest.mark.parametrize(
    "push, pop", [("push_first", "pop_first"), ("push_last", "pop_last")]
)
def test_pop(push, pop):
    q = Deque()
    for value in (1, 2):
        getattr(q, push)(value)
    assert [getattr(q, pop)() for _ in range(2)] == [2, 1]
    with pytest.raises(IndexError, match="empty deque"):
        getattr(q, pop)()


def test_size():
    q = Deque()
    assert len(q) == 0
    q.push_first(1)
    q.push_last(2)
    assert len(q) == 2
    q.pop_first()
    assert len(q) == 1
    q.pop_last()
    assert len(q) == 0


@pytest.mark.parametrize("peek, expected", [("first", 1), ("last", 2)])
def test_peek(peek, expected):
    with pytest.raises(IndexError, match="empty deque"):
        getattr(Deque(), peek)()
    q = Deque([1, 2])
    assert getattr(q, peek)() == expected
    assert len(q) == 2


def test_swap():
    deq1 = Deque([1, 2, 3, 4])
    deq2 = Deque([5, 6, 7])
    deq1.swap(deq2)
    assert (len(deq1), len(deq2)) == (3, 4)
    assert deq1.to_list() == [5, 6, 7]
    assert deq2.to_list() == [1, 2, 3, 4]


def test_iteration_and_initial_items():
    q = Deque("abc")
    assert list(q) == ["a", "b", "c"]
    assert q.pop_last() == "c"
    assert q.pop_first() == "a"
    assert q.to_list() == ["b"]