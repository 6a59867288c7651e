"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from entityindex import Index, IndexSettings, InMemoryJournal, LocalStorage


@pytest.fixture
def settings():
    """Explicit settings so ENTITYINDEX_* variables never leak into tests."""
    return IndexSettings(
        thread_safe=True,
        warn_on_refile=True,
        record_operations=False,
        journal_size=1000,
    )


@pytest.fixture
def storage():
    """Fresh LocalStorage instance."""
    return LocalStorage()


@pytest.fixture
def index(storage, settings):
    """Fresh Index over the storage fixture."""
    return Index(storage=storage, settings=settings)


@pytest.fixture
def journal():
    return InMemoryJournal(max_records=100)


@pytest.fixture
def traced_index(settings, journal):
    """Index that records mutations into the journal fixture."""
    return Index(settings=settings, journal=journal)
