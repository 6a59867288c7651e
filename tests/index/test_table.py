"""Tests for TableIndex wrapper."""

import pytest

from entityindex import IndexKey, IndexWarning, TableIndex


@pytest.fixture
def handle(index):
    return index.table(0, 69)


def test_table_returns_bound_handle(handle):
    assert isinstance(handle, TableIndex)
    assert handle.id == IndexKey(partition=0, table=69)


def test_handle_create_and_getitem(handle, index):
    """handle[key] returns the bucket."""
    handle.create(420, 1)

    assert handle[1] == [420]
    assert handle.get(1) == index.get(0, 69, 1)


def test_handle_contains(handle):
    """entity in handle checks existence."""
    handle.create(420, 1)

    assert 420 in handle
    assert 421 not in handle
    assert "420" not in handle


def test_handle_delitem_swaps(handle):
    """del handle[entity] deletes by entity id."""
    for entity in (10, 20, 30):
        handle.create(entity, 1)

    del handle[10]

    assert handle[1] == [30, 20]
    assert 10 not in handle


def test_handle_delitem_absent_is_noop(handle):
    del handle[12345]
    assert handle[0] == []


def test_handle_key_of_record_count(handle):
    handle.create(5, 7)
    handle.create(6, 7)

    assert handle.key_of(5) == 7
    assert handle.record(6).position == 1
    assert handle.count(7) == 2


def test_handle_refile_warns(handle):
    handle.create(5, 7)
    with pytest.warns(IndexWarning):
        handle.create(5, 8)


def test_handles_share_state(index):
    first = index.table(0, 69)
    second = index.table(0, 69)
    other = index.table(0, 70)

    first.create(1, 1)

    assert second[1] == [1]
    assert other[1] == []


def test_handle_repr(handle):
    assert repr(handle) == "TableIndex(partition=0, table=69)"
