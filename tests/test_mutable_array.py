import pytest

from bwkit.log import FatalError
from bwkit.mutable_array import MutableArray


def _filled(count):
    array = MutableArray()
    items = [object() for _ in range(count)]
    for item in items:
        array.append(item)
    return array, items


def test_append_keeps_order():
    array, items = _filled(3)
    assert list(array) == items
    assert len(array) == len(items)
    assert array.first() is items[0]
    assert array.last() is items[-1]


def test_append_none_is_fatal():
    with pytest.raises(FatalError):
        MutableArray().append(None)


def test_insert_positions():
    array, items = _filled(2)
    front, middle, back, negative = object(), object(), object(), object()
    array.insert(front, 0)
    array.insert(middle, 2)
    array.insert(back, 100)
    array.insert(negative, -5)
    assert list(array) == [negative, front, items[0], middle, items[1], back]


def test_insert_none_is_fatal():
    with pytest.raises(FatalError):
        MutableArray().insert(None, 0)


def test_remove_at_returns_item_and_shifts():
    array, items = _filled(3)
    assert array.remove_at(1) is items[1]
    assert list(array) == [items[0], items[2]]
    assert array.remove_at(5) is None
    assert array.remove_at(-1) is None
    assert len(array) == 2


def test_remove_by_identity():
    array, items = _filled(3)
    assert array.remove(items[2]) is items[2]
    assert items[2] not in array
    assert items[0] in array


def test_remove_missing_returns_none(capsys):
    array, items = _filled(2)
    assert array.remove(object()) is None
    assert "OBJECT NOT IN ARRAY" in capsys.readouterr().err
    assert list(array) == items


def test_remove_first_and_last():
    array, items = _filled(3)
    assert array.remove_first() is items[0]
    assert array.remove_last() is items[2]
    assert list(array) == [items[1]]
    empty = MutableArray()
    assert empty.remove_first() is None
    assert empty.remove_last() is None


def test_clear_and_describe():
    array, _ = _filled(2)
    assert array.describe() == "MutableArray(2)"
    array.clear()
    assert len(array) == 0
    assert array.describe() == "MutableArray(0)"
    assert array.first() is None