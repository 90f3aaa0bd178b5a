from bwkit.arrays import Array


def test_length_and_iteration():
    items = ["a", "b", "c"]
    array = Array(items)
    assert len(array) == 3
    assert list(array) == items


def test_empty_array():
    array = Array()
    assert len(array) == 0
    assert array.first() is None
    assert array.last() is None
    assert array.object_at(0) is None


def test_object_at_bounds():
    array = Array([10, 20])
    assert array.object_at(1) == 20
    assert array.object_at(2) is None
    assert array.object_at(-1) is None


def test_first_and_last():
    array = Array(["x", "y", "z"])
    assert array.first() == "x"
    assert array.last() == "z"


def test_contains_uses_identity():
    inner = [1]
    array = Array([inner])
    assert inner in array
    assert [1] not in array


def test_contains_none_is_false():
    array = Array([None])
    assert (None in array) is False


def test_copy_from_array():
    original = Array([object(), object()])
    copy = Array(original)
    assert list(copy) == list(original)
    assert copy.first() is original.first()


def test_describe():
    assert Array([1, 2, 3]).describe() == "Array(3)"


def test_copy_is_independent_of_source_list():
    source = [1, 2]
    array = Array(source)
    source.append(3)
    assert len(array) == 2