import bisect
import random

import pytest

from corekit.indexed import IndexedMap, IndexedSet


def test_set_keeps_sorted_unique_values():
    values = [5, 3, 9, 3, 1, 7, 5]
    s = IndexedSet(values)
    assert list(s) == sorted(set(values))
    assert len(s) == len(set(values))


def test_add_reports_novelty():
    s = IndexedSet()
    assert s.add(4) is True
    assert s.add(4) is False
    assert len(s) == 1


def test_discard_reports_presence():
    s = IndexedSet([1, 2, 3])
    assert s.discard(2) is True
    assert s.discard(2) is False
    assert list(s) == [1, 3]


def test_positional_access_matches_sorted_list():
    rng = random.Random(7)
    values = rng.sample(range(10_000), 500)
    s = IndexedSet(values)
    expected = sorted(values)
    assert [s[i] for i in range(len(s))] == expected
    assert s[-1] == expected[-1]


def test_getitem_out_of_range():
    s = IndexedSet([1, 2])
    with pytest.raises(IndexError):
        s[2]
    with pytest.raises(IndexError):
        s[-3]
    with pytest.raises(IndexError):
        IndexedSet()[0]


def test_index_and_contains():
    values = ["pear", "apple", "fig", "kiwi"]
    s = IndexedSet(values)
    for position, value in enumerate(sorted(values)):
        assert s.index(value) == position
        assert value in s
    assert "plum" not in s
    with pytest.raises(ValueError):
        s.index("plum")


def test_upper_bound_matches_bisect_left():
    rng = random.Random(3)
    values = sorted(rng.sample(range(0, 1000, 2), 100))
    s = IndexedSet(values)
    for probe in range(-5, 1005):
        assert s.upper_bound(probe) == bisect.bisect_left(values, probe)


def test_random_inserts_and_removals_stay_consistent():
    rng = random.Random(11)
    model = set()
    s = IndexedSet()
    for _ in range(3000):
        value = rng.randrange(300)
        if rng.random() < 0.6:
            assert s.add(value) == (value not in model)
            model.add(value)
        else:
            assert s.discard(value) == (value in model)
            model.discard(value)
    ordered = sorted(model)
    assert list(s) == ordered
    assert len(s) == len(ordered)
    for position, value in enumerate(ordered):
        assert s[position] == value
        assert s.index(value) == position


def test_update_and_difference_update_counts():
    s = IndexedSet([1, 2, 3])
    assert s.update([3, 4, 5]) == 2
    assert s.difference_update([1, 9, 5]) == 2
    assert list(s) == [2, 3, 4]


def test_iadd_and_isub_with_values_and_sets():
    s = IndexedSet([1])
    s += 2
    s += IndexedSet([3, 4])
    assert list(s) == [1, 2, 3, 4]
    s -= 1
    s -= IndexedSet([3, 9])
    assert list(s) == [2, 4]


def test_update_with_self_does_not_loop():
    s = IndexedSet([1, 2, 3])
    assert s.update(s) == 0
    assert list(s) == [1, 2, 3]


def test_clear_empties_set():
    s = IndexedSet(range(10))
    s.clear()
    assert len(s) == 0
    assert list(s) == []
    assert s.upper_bound(5) == 0


def test_map_sorted_pairs_and_positions():
    m = IndexedMap({"b": 2, "a": 1, "c": 3})
    assert list(m) == [("a", 1), ("b", 2), ("c", 3)]
    assert m[0] == ("a", 1)
    assert m[-1] == ("c", 3)
    assert len(m) == 3


def test_map_insert_keeps_existing_value():
    m = IndexedMap()
    assert m.insert("k", "first") is True
    assert m.insert("k", "second") is False
    assert m.get("k") == "first"
    assert len(m) == 1


def test_map_get_missing_is_none_and_contains():
    m = IndexedMap([("x", 10)])
    assert m.get("x") == 10
    assert m.get("y") is None
    assert "x" in m
    assert "y" not in m


def test_map_erase():
    m = IndexedMap([(1, "one"), (2, "two")])
    assert m.erase(1) is True
    assert m.erase(1) is False
    assert list(m) == [(2, "two")]


def test_map_index_and_upper_bound():
    keys = [10, 20, 30, 40]
    m = IndexedMap((key, str(key)) for key in keys)
    for position, key in enumerate(keys):
        assert m.index(key) == position
        assert m.upper_bound(key) == position
    assert m.upper_bound(25) == bisect.bisect_left(keys, 25)
    assert m.upper_bound(99) == len(keys)
    with pytest.raises(ValueError):
        m.index(25)


def test_map_update_and_difference_update():
    m = IndexedMap({"a": 1})
    other = IndexedMap({"a": 100, "b": 2, "c": 3})
    assert m.update(other) == 2
    assert m.get("a") == 1
    assert m.difference_update(IndexedMap({"b": 0, "z": 0})) == 1
    assert m.difference_update(["c"]) == 1
    assert list(m) == [("a", 1)]


def test_map_clear():
    m = IndexedMap({1: 1, 2: 2})
    m.clear()
    assert len(m) == 0
    assert m.get(1) is None


def test_map_random_consistency_with_dict():
    rng = random.Random(5)
    model = {}
    m = IndexedMap()
    for _ in range(2000):
        key = rng.randrange(200)
        if rng.random() < 0.6:
            value = rng.randrange(1000)
            assert m.insert(key, value) == (key not in model)
            model.setdefault(key, value)
        else:
            assert m.erase(key) == (key in model)
            model.pop(key, None)
    assert list(m) == sorted(model.items())
    for key, value in model.items():
        assert m.get(key) == value