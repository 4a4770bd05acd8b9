import pytest

from weiss.linked_list import List, UniqueList


def _unique_123():
    li = UniqueList()
    li.push_back(1)
    li.push_back(2)
    li.push_back(3)
    return li


def _list_123():
    li = List()
    li.push_back(1)
    li.push_back(2)
    li.push_back(3)
    return li


def test_unique_push_back():
    li = UniqueList()
    li.push_back(1)
    assert next(iter(li)) == 1


def test_unique_size():
    assert len(_unique_123()) == 3


def test_unique_print(capsys):
    _unique_123().print()
    assert capsys.readouterr().out == "1 2 3 \n"


def test_unique_contains():
    li = _unique_123()
    assert li.contains(1)
    assert not li.contains(0)


def test_unique_insert():
    li = _unique_123()
    assert li.insert(4)
    assert len(li) == 4
    assert not li.insert(1)
    assert len(li) == 4


def test_unique_remove():
    li = _unique_123()
    li.remove(2)
    assert len(li) == 2
    li.remove(4)
    assert len(li) == 2
    assert list(li) == [1, 3]


def test_unique_remove_last_element():
    li = _unique_123()
    li.remove(3)
    assert list(li) == [1, 2]


def test_list_minus():
    li = _list_123()
    it = li.end() - 2
    assert it.value == 2


def test_list_plus():
    li = _list_123()
    it = li.begin() + 2
    assert it.value == 3


def test_list_splice():
    li = _list_123()
    it = li.begin() + 1
    li0 = List()
    li0.push_back(4)
    li0.push_back(5)
    li.splice(it, li0)
    it = li.begin()
    it = it.next()
    assert it.value == 4
    it = it.next()
    assert it.value == 5
    assert len(li0) == 0
    assert list(li) == [1, 4, 5, 2, 3]
    assert len(li) == 5


def test_list_reverse_iteration():
    li = _list_123()
    assert list(reversed(li)) == [3, 2, 1]
    li0 = li.copy()
    assert list(reversed(li0)) == [3, 2, 1]


def test_copy_is_independent():
    li = _list_123()
    li0 = li.copy()
    li0.push_back(4)
    assert list(li) == [1, 2, 3]
    assert list(li0) == [1, 2, 3, 4]


def test_front_back_and_pops():
    li = List([1, 2, 3])
    assert li.front() == 1
    assert li.back() == 3
    assert li.pop_front() == 1
    assert li.pop_back() == 3
    assert list(li) == [2]


def test_push_front_order():
    li = List()
    li.push_front(1)
    li.push_front(2)
    assert list(li) == [2, 1]


def test_empty_list_errors():
    li = List()
    with pytest.raises(IndexError):
        li.front()
    with pytest.raises(IndexError):
        li.pop_back()
    with pytest.raises(ValueError):
        li.erase(li.end())


def test_insert_returns_new_position():
    li = List([1, 3])
    pos = li.insert(li.begin().next(), 2)
    assert pos.value == 2
    assert list(li) == [1, 2, 3]


def test_erase_returns_following_position():
    li = List([1, 2, 3])
    pos = li.erase(li.begin())
    assert pos.value == 2
    assert len(li) == 2


def test_erase_range():
    li = List([1, 2, 3])
    stop = li.erase_range(li.begin(), li.end() - 1)
    assert stop == li.end() - 1
    assert list(li) == [3]


def test_position_bounds():
    li = List([1])
    with pytest.raises(IndexError):
        li.end().value
    with pytest.raises(IndexError):
        li.end().next()


def test_position_assignment():
    li = List([1, 2])
    li.begin().value = 7
    assert list(li) == [7, 2]


def test_clear():
    li = _list_123()
    li.clear()
    assert len(li) == 0
    assert li.begin() == li.end()