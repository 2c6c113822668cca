import pytest

from libft.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b"])
    node = lst.push_front("a")
    assert lst.head is node
    assert list(lst) == ["a", "b"]
    assert lst.last().content == "b"


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front(1)
    assert lst.last() is node


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert list(lst) == [1, 2]


def test_nodes_are_linked():
    lst = LinkedList(["x", "y"])
    assert lst.head == Node("x", Node("y"))


def test_len_tracks_pushes():
    lst = LinkedList()
    for count, item in enumerate(range(5), start=1):
        lst.push_back(item)
        assert len(lst) == count


def test_last_after_mixed_pushes():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert lst.last().content == 3
    assert lst.last().next is None
    assert list(lst) == [1, 2, 3]


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert len(lst) == 0


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(9)
    assert list(lst) == [9]
    assert lst.last().content == 9


def test_iterate_visits_each_content():
    seen = []
    lst = LinkedList([3, 1, 2])
    lst.iterate(seen.append)
    assert seen == [3, 1, 2]


def test_iterate_can_mutate_contents():
    lst = LinkedList([[1], [2]])
    lst.iterate(lambda item: item.append(0))
    assert list(lst) == [[1, 0], [2, 0]]


def test_map_returns_new_list():
    lst = LinkedList(["a", "bc"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["A", "BC"]
    assert list(lst) == ["a", "bc"]
    assert mapped.head is not lst.head


def test_map_preserves_length():
    lst = LinkedList(range(6))
    assert len(lst.map(lambda x: x * x)) == len(lst)


def test_map_of_empty():
    mapped = LinkedList().map(lambda x: x)
    assert len(mapped) == 0


def test_map_failure_releases_produced_contents():
    deleted = []

    def f(item):
        if item == 3:
            raise RuntimeError("boom")
        return item * 10

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == [10, 20]
    assert list(lst) == [1, 2, 3, 4]


def test_repr_lists_contents():
    assert repr(LinkedList([1, 2])) == "LinkedList([1, 2])"