"""
Test Persistence Layer Functionality

Session counters live in the in-memory backend, optionally with a TTL and a
background cleanup task.
"""

import asyncio
import time

import pytest
from fasthtml.common import fast_app

from starcounter import ApplicationConfig, Counter, Environment, MemoryRepo, get_memory_persistence, reset_config, set_config
from starcounter.adapters.fasthtml import configure_app


def config_with_ttl(ttl):
    config = ApplicationConfig.for_environment(Environment.TESTING)
    config.persistence.session_ttl = ttl
    return config


def test_memory_repo_is_shared():
    assert MemoryRepo() is MemoryRepo()
    assert get_memory_persistence() is MemoryRepo()
    assert Counter(id="shared").persistence_backend is MemoryRepo()


def test_save_load_and_exists():
    backend = MemoryRepo()
    counter = Counter(id="basic")
    counter.increment()

    assert backend.exists("basic")
    assert not backend.exists("missing")
    assert backend.load("missing") is None
    assert backend.load("basic").read().counter == 1
    print("✓ Basic save/load works")


def test_ttl_expiry():
    counter = Counter(id="ttl")
    assert counter.save(ttl=1)
    assert counter.exists()

    time.sleep(1.1)

    assert not counter.exists()
    assert MemoryRepo().load("ttl") is None
    print("✓ TTL functionality works")


def test_saving_without_ttl_drops_previous_expiry():
    counter = Counter(id="sticky")
    counter.save(ttl=1)
    counter.save()

    time.sleep(1.1)
    assert counter.exists()


def test_delete():
    counter = Counter(id="gone")
    assert counter.delete()
    assert not counter.exists()
    assert not counter.delete()
    print("✓ Deletion works")


def test_purge_expired():
    backend = MemoryRepo()
    Counter(id="expired1").save(ttl=1)
    Counter(id="expired2").save(ttl=1)
    Counter(id="kept")
    time.sleep(1.1)

    assert backend.purge_expired() == 2
    assert len(backend) == 1
    assert backend.exists("kept")
    print("✓ Cleanup works")


def test_session_ttl_comes_from_configuration():
    set_config(config_with_ttl(1))
    first = Counter.get(None)
    first.increment()
    time.sleep(1.1)

    second = Counter.get(None)
    assert second is not first
    assert second.read().counter == 0


def test_configured_ttl_does_not_outlive_its_config():
    app, rt = fast_app(secret_key="starcounter-testing")
    configure_app(app, rt, [Counter], config=config_with_ttl(1))
    assert Counter.session_ttl() == 1
    assert Counter.ttl is None

    reset_config()
    assert Counter.session_ttl() is None
    Counter(id="no-expiry")
    time.sleep(1.1)
    assert MemoryRepo().exists("no-expiry")


def test_cleanup_needs_running_loop():
    backend = MemoryRepo()
    backend.configure_cleanup(True, interval=1)
    try:
        backend.start_cleanup()
        assert not backend.cleanup_running
    finally:
        backend.configure_cleanup(False)


@pytest.mark.asyncio
async def test_background_cleanup_task():
    backend = MemoryRepo()
    backend.configure_cleanup(True, interval=1)
    try:
        Counter(id="short").save(ttl=1)
        backend.start_cleanup()
        assert backend.cleanup_running

        await asyncio.sleep(2.2)
        assert len(backend) == 0
    finally:
        backend.stop_cleanup()
        backend.configure_cleanup(False)

    assert not backend.cleanup_running
    print("✓ Background cleanup works")
