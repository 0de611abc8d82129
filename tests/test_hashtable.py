import io

import pytest

from wordgrid.hashtable import CAPACITIES, HashTable, HashTableError
from wordgrid.probers import DoubleHashProber, LinearProber


def identity(key):
    return key


def test_new_table_is_empty():
    table = HashTable()
    assert table.empty()
    assert len(table) == 0
    assert not table


def test_insert_and_find():
    table = HashTable()
    table.insert("apple", 1)
    table.insert("pear", 2)
    assert table.find("apple") == ("apple", 1)
    assert table.find("pear") == ("pear", 2)
    assert table.find("plum") is None
    assert len(table) == 2
    assert table


def test_insert_existing_key_updates_value():
    table = HashTable()
    table.insert("k", 1)
    table.insert("k", 5)
    assert len(table) == 1
    assert table.at("k") == 5


def test_at_and_getitem_missing_raise_key_error():
    table = HashTable()
    with pytest.raises(KeyError):
        table.at("missing")
    with pytest.raises(KeyError):
        table["missing"]


def test_setitem_updates_existing_and_rejects_missing():
    table = HashTable()
    table.insert("a", 1)
    table["a"] += 10
    assert table["a"] == 11
    with pytest.raises(KeyError):
        table["b"] = 3
    assert "b" not in table


def test_contains():
    table = HashTable()
    table.insert("x", 0)
    assert "x" in table
    assert "y" not in table


def test_remove_decrements_size_and_missing_is_noop():
    table = HashTable()
    table.insert("a", 1)
    table.insert("b", 2)
    table.remove("a")
    assert len(table) == 1
    table.remove("a")
    table.remove("zzz")
    assert len(table) == 1
    assert table.at("b") == 2


def test_removed_entry_still_visible_until_resize():
    table = HashTable(resize_alpha=0.9)
    table.insert("a", 1)
    table.remove("a")
    assert len(table) == 0
    assert table.find("a") == ("a", 1)


def test_reinsert_after_remove_counts_again():
    table = HashTable()
    table.insert("a", 1)
    table.remove("a")
    table.insert("a", 7)
    assert len(table) == 1
    assert table.at("a") == 7


def test_resize_drops_deleted_entries():
    table = HashTable(resize_alpha=0.4, hash_func=identity)
    table.insert(0, "zero")
    table.remove(0)
    for key in range(1, 6):
        table.insert(key, str(key))
    assert table.find(0) is None
    assert len(table) == 5


def test_many_inserts_trigger_growth_and_keep_all_items():
    table = HashTable()
    for i in range(500):
        table.insert(f"key{i}", i)
    assert len(table) == 500
    assert all(table.at(f"key{i}") == i for i in range(500))
    buf = io.StringIO()
    table.report_all(buf)
    assert len(buf.getvalue().splitlines()) == 500


def test_double_hash_prober_table():
    table = HashTable(0.7, DoubleHashProber())
    for i in range(200):
        table.insert(f"w{i}", i * 2)
    for i in range(0, 200, 3):
        table.remove(f"w{i}")
    live = [i for i in range(200) if i % 3]
    assert len(table) == len(live)
    assert all(table[f"w{i}"] == i * 2 for i in live)


def test_full_table_raises():
    table = HashTable(resize_alpha=2.0, prober=LinearProber())
    for i in range(CAPACITIES[0]):
        table.insert(i, i)
    with pytest.raises(HashTableError):
        table.insert(CAPACITIES[0], 0)


def test_report_all_format():
    table = HashTable(hash_func=identity)
    table.insert(3, "x")
    table.insert(5, "y")
    buf = io.StringIO()
    table.report_all(buf)
    assert buf.getvalue() == "Bucket 3: 3 x\nBucket 5: 5 y\n"


def test_linear_probing_collision_goes_to_next_slot():
    table = HashTable(hash_func=lambda key: 4)
    table.insert("first", 1)
    table.insert("second", 2)
    buf = io.StringIO()
    table.report_all(buf)
    assert buf.getvalue() == "Bucket 4: first 1\nBucket 5: second 2\n"


def test_custom_key_equal():
    table = HashTable(
        hash_func=lambda key: hash(key.lower()),
        key_equal=lambda a, b: a.lower() == b.lower(),
    )
    table.insert("Hello", 1)
    table.insert("HELLO", 2)
    assert len(table) == 1
    assert table.find("hello") == ("Hello", 2)


def test_total_probes_count_and_clear():
    table = HashTable(hash_func=identity)
    assert table.total_probes() == 0
    table.insert(1, "a")
    assert table.total_probes() == 1
    table.find(1)
    assert table.total_probes() == 2
    table.clear_total_probes()
    assert table.total_probes() == 0