"""Tests for the process-wide store dependency"""

import threading

import chirpy.core.db as core_db
from chirpy.core.config import settings
from chirpy.core.db import get_db


def test_concurrent_first_calls_share_one_database(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_path", str(tmp_path / "database.json"))

    for _ in range(20):
        monkeypatch.setattr(core_db, "_database", None)
        start = threading.Barrier(8, timeout=5)
        instances = []

        def worker():
            start.wait()
            instances.append(get_db())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert len(instances) == 8
        assert len({id(instance) for instance in instances}) == 1


def test_get_db_returns_same_instance(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "database_path", str(tmp_path / "database.json"))
    monkeypatch.setattr(core_db, "_database", None)

    assert get_db() is get_db()
    assert (tmp_path / "database.json").exists()
