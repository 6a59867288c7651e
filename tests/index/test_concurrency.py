"""Tests for per-table locking.

Why these tests exist:
- A multi-threaded host may call the index concurrently
- The three maps of one table must change together
"""

import threading

from entityindex import EntityRecord, Index, IndexKey, IndexSettings


def test_same_table_shares_one_lock(index):
    assert index._guard(IndexKey(0, 1)) is index._guard(IndexKey(0, 1))


def test_tables_hash_onto_the_stripe_pool(index):
    pool = set(map(id, index._locks))
    for table in range(200):
        assert id(index._guard(IndexKey(0, table))) in pool


def test_unseen_tables_do_not_grow_lock_pool():
    """Reads and deletes against arbitrary table ids allocate no locks."""
    index = Index(settings=IndexSettings(lock_stripes=8))
    before = index._locks

    for table in range(10_000):
        index.get(0, table, 1)
        index.exists(0, table, 5)
        index.count(0, table, 1)
        index.delete(0, table, 5)

    assert index._locks is before
    assert len(index._locks) == 8


def test_lock_disabled_when_not_thread_safe():
    index = Index(settings=IndexSettings(thread_safe=False))
    index.create(0, 1, 1, 1)

    assert index._guard(IndexKey(0, 1)) not in index._locks
    assert index.get(0, 1, 1) == [1]


def test_restore_waits_for_table_lock(index):
    """restore() cannot swap state while a table lock is held."""
    index.create(0, 1, 1, 1)
    data = index.snapshot()
    index.create(0, 1, 2, 1)

    lock = index._guard(IndexKey(0, 1))
    done = threading.Event()

    def restore() -> None:
        index.restore(data)
        done.set()

    with lock:
        worker = threading.Thread(target=restore)
        worker.start()
        assert not done.wait(timeout=0.2)
        assert index.get(0, 1, 1) == [1, 2]

    worker.join()
    assert done.is_set()
    assert index.get(0, 1, 1) == [1]


def test_concurrent_creates_and_deletes_stay_consistent(index):
    """Threads racing on one bucket leave it consistent."""
    workers = 8
    per_worker = 50
    barrier = threading.Barrier(workers)

    def work(worker: int) -> None:
        barrier.wait()
        base = worker * per_worker
        for entity in range(base, base + per_worker):
            index.create(0, 1, entity, 0)
        for entity in range(base, base + per_worker, 2):
            index.delete(0, 1, entity)

    threads = [threading.Thread(target=work, args=(w,)) for w in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    bucket = index.get(0, 1, 0)
    assert sorted(bucket) == [e for e in range(workers * per_worker) if e % 2]
    for position, entity in enumerate(bucket):
        assert index.record(0, 1, entity) == EntityRecord(key=0, position=position)
