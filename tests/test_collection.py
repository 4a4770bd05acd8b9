import pytest

from weiss.collection import Collection, OrderedCollection


def test_construct_is_empty():
    collection = Collection()
    assert collection.is_empty()


def test_insert_and_contains():
    collection = Collection()
    collection.insert(1)
    assert not collection.is_empty()
    assert collection.contains(1)


def test_make_empty():
    collection = Collection()
    collection.insert(1)
    collection.make_empty()
    assert collection.is_empty()


def test_remove():
    collection = Collection()
    collection.insert(1)
    collection.insert(2)
    collection.remove(1)
    assert not collection.contains(1)
    assert collection.contains(2)


def test_remove_missing_raises():
    collection = Collection()
    collection.insert(1)
    with pytest.raises(ValueError):
        collection.remove(5)


def test_ordered_basic():
    c = OrderedCollection()
    c.insert(1)
    c.insert(2)
    c.insert(3)
    assert c.find_max() == 3
    assert c.find_min() == 1


def test_ordered_remove_changes_extremes():
    c = OrderedCollection()
    for value in (1, 2, 3):
        c.insert(value)
    c.remove(3)
    assert c.find_max() == 2
    c.remove(1)
    assert c.find_min() == 2


def test_ordered_empty_raises():
    c = OrderedCollection()
    assert c.is_empty()
    with pytest.raises(ValueError):
        c.find_min()
    with pytest.raises(ValueError):
        c.find_max()


def test_ordered_make_empty_and_remove_missing():
    c = OrderedCollection()
    c.insert(4)
    with pytest.raises(ValueError):
        c.remove(7)
    c.make_empty()
    assert c.is_empty()