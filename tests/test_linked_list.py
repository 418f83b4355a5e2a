import pytest

from libft.linked_list import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_keeps_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_push_back_appends_and_updates_last():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert lst.last().content == 2
    assert list(lst) == [1, 2]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    assert lst.head is node


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back("x")
    assert lst.head is node
    assert len(lst) == 1


def test_last_follows_externally_linked_nodes():
    lst = LinkedList([1])
    extra = Node(5)
    lst.head.next = extra
    assert lst.last() is extra
    lst.push_back(6)
    assert list(lst) == [1, 5, 6]


def test_nodes_chain():
    lst = LinkedList(["p", "q"])
    assert lst.head.content == "p"
    assert lst.head.next.content == "q"
    assert lst.head.next.next is None


def test_clear_calls_delete_in_order():
    items = [1, 2, 3]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList(["a"])
    lst.clear()
    assert list(lst) == []


def test_clear_then_reuse():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(3)
    assert list(lst) == [3]


def test_iterate_visits_each_value():
    items = ["x", "y", "z"]
    seen = []
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_iterate_on_empty_calls_nothing():
    seen = []
    LinkedList().iterate(seen.append)
    assert seen == []


def test_map_builds_new_list_and_leaves_original():
    items = ["a", "b"]
    lst = LinkedList(items)
    mapped = lst.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == items
    assert mapped.head is not lst.head


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_produced_values():
    deleted = []

    def f(value):
        if value == "bad":
            raise RuntimeError("boom")
        return value * 2

    lst = LinkedList(["a", "b", "bad", "c"])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == ["aa", "bb"]
    assert list(lst) == ["a", "b", "bad", "c"]


def test_map_failure_without_delete_propagates():
    def f(value):
        raise ValueError(value)

    with pytest.raises(ValueError):
        LinkedList([1]).map(f)


@pytest.mark.parametrize("items", [[], [0], [None, None], list(range(10))])
def test_len_matches_iteration(items):
    lst = LinkedList(items)
    assert len(lst) == len(list(lst)) == len(items)