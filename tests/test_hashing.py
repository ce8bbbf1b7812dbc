import pytest

from dsakit.hashing import (
    ChainedHashTable,
    OpenAddressingTable,
    TableFullError,
    int_hash,
    string_hash,
)


def test_int_hash_is_within_capacity():
    for key in (0, 7, 123, -4, 99999):
        assert 0 <= int_hash(key, 10) < 10


def test_int_hash_of_multiple_of_capacity():
    assert int_hash(30, 10) == int_hash(0, 10)


def test_string_hash_range_and_determinism():
    for name in ("Alice", "Bob", "Charlie", "David", "Eve"):
        value = string_hash(name, 10)
        assert 0 <= value < 10
        assert value == string_hash(name, 10)


def test_string_hash_of_empty_string():
    assert string_hash("", 10) == 0


def test_chained_insert_and_search():
    table = ChainedHashTable(10)
    for key in (12, 22, 5):
        table.insert(key)
    assert table.search(12)
    assert 22 in table
    assert not table.search(32)
    assert table.buckets()[int_hash(12, 10)] == [12, 22]


def test_chained_remove_removes_all_occurrences():
    table = ChainedHashTable(10)
    table.insert(7)
    table.insert(7)
    table.insert(17)
    table.remove(7)
    assert 7 not in table
    assert table.buckets()[int_hash(17, 10)] == [17]


def test_chained_remove_absent_key_is_harmless():
    table = ChainedHashTable(4)
    table.insert(1)
    table.remove(99)
    assert table.buckets() == [[], [1], [], []]


def test_chained_string_table():
    table = ChainedHashTable(10, string_hash)
    for name in ("Alice", "Bob", "Charlie", "David"):
        table.insert(name)
    assert table.search("Alice")
    assert not table.search("Eve")
    table.remove("Bob")
    assert "Bob" not in table
    assert "Alice" in table
    assert sorted(k for bucket in table.buckets() for k in bucket) == ["Alice", "Charlie", "David"]


def test_chained_format():
    table = ChainedHashTable(3)
    table.insert(4)
    lines = table.format().splitlines()
    assert len(lines) == 3
    index = int_hash(4, 3)
    assert lines[index] == f"Index {index}: 4 -> NULL"
    for position, line in enumerate(lines):
        if position != index:
            assert line == f"Index {position}: NULL"


def test_chained_invalid_capacity():
    with pytest.raises(ValueError):
        ChainedHashTable(0)


def test_buckets_are_copies():
    table = ChainedHashTable(2)
    table.buckets()[0].append(8)
    assert 8 not in table


def test_linear_probing_example():
    table = OpenAddressingTable(10)
    used = [table.insert_linear(key) for key in (10, 20, 30, 25)]
    assert used == [0, 1, 2, 5]
    assert [table.slots()[i] for i in used] == [10, 20, 30, 25]


def test_quadratic_probing_example():
    table = OpenAddressingTable(10)
    used = [table.insert_quadratic(key) for key in (10, 20, 30, 25)]
    assert used == [0, 1, 4, 5]


def test_double_hashing_example():
    table = OpenAddressingTable(10)
    used = [table.insert_double_hash(key) for key in (10, 20, 30, 25)]
    assert used == [0, 3, 4, 5]


@pytest.mark.parametrize("method", ["insert_linear", "insert_quadratic", "insert_double_hash"])
def test_inserted_keys_are_stored(method):
    table = OpenAddressingTable(7)
    keys = [3, 10, 17, 5]
    indices = [getattr(table, method)(key) for key in keys]
    assert len(set(indices)) == len(keys)
    assert sorted(k for k in table.slots() if k is not None) == sorted(keys)


def test_linear_probing_full_table():
    table = OpenAddressingTable(3)
    for key in (1, 2, 3):
        table.insert_linear(key)
    with pytest.raises(TableFullError):
        table.insert_linear(4)


def test_quadratic_probing_can_fail_with_free_slots():
    table = OpenAddressingTable(4)
    table.insert_quadratic(0)
    table.insert_quadratic(4)
    with pytest.raises(TableFullError):
        table.insert_quadratic(8)
    assert None in table.slots()


def test_double_hash_needs_two_slots():
    table = OpenAddressingTable(1)
    with pytest.raises(ValueError):
        table.insert_double_hash(3)


def test_open_addressing_format():
    table = OpenAddressingTable(3)
    slot = table.insert_linear(4)
    lines = table.format().splitlines()
    assert lines[slot] == f"{slot}: 4"
    assert sum(line.endswith("Empty") for line in lines) == 2


def test_open_addressing_invalid_size():
    with pytest.raises(ValueError):
        OpenAddressingTable(0)