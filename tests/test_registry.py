"""
Tests for isologger.registry — lookup-or-create and the module singleton.
"""

import threading

from isologger import Logger
from isologger import registry as _registry_mod
from isologger.handlers import MemorySink
from isologger.levels import ALL, DEBUG, DEFAULT_FILTER, WARN
from isologger.registry import LoggerRegistry, get_registry, init_registry


# =============================================================================
# LoggerRegistry
# =============================================================================

class TestLoggerRegistry:

    def test_get_creates_named_logger(self):
        reg = LoggerRegistry()
        log = reg.get('foo')
        assert isinstance(log, Logger)
        assert log.name == 'foo'
        assert log.filter_level == DEFAULT_FILTER

    def test_get_is_idempotent(self):
        reg = LoggerRegistry()
        assert reg.get('foo') is reg.get('foo')

    def test_names_contains_len(self):
        reg = LoggerRegistry()
        reg.get('a')
        reg.get('b')
        reg.get('a')
        assert reg.names() == ['a', 'b']
        assert 'a' in reg
        assert 'c' not in reg
        assert len(reg) == 2

    def test_clear(self):
        reg = LoggerRegistry()
        first = reg.get('a')
        reg.clear()
        assert len(reg) == 0
        assert reg.get('a') is not first

    def test_custom_factory(self):
        made = []

        def factory(name):
            made.append(name)
            return Logger(context={'name': name.upper(), 'filter_level': WARN})

        reg = LoggerRegistry(factory=factory)
        log = reg.get('db')
        reg.get('db')
        assert made == ['db']
        assert log.name == 'DB'
        assert log.filter_level == WARN

    def test_registries_are_independent(self):
        assert LoggerRegistry().get('x') is not LoggerRegistry().get('x')

    def test_concurrent_get_returns_one_instance(self):
        reg = LoggerRegistry()
        barrier = threading.Barrier(8)
        results = []
        lock = threading.Lock()

        def worker():
            barrier.wait()
            log = reg.get('race')
            with lock:
                results.append(log)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert len({id(log) for log in results}) == 1
        assert len(reg) == 1


# =============================================================================
# Module-level singleton
# =============================================================================

class TestSingleton:

    def test_get_registry_creates_default(self):
        assert _registry_mod._registry is None
        reg = get_registry()
        assert isinstance(reg, LoggerRegistry)
        assert get_registry() is reg

    def test_logger_get_uses_registry(self):
        log = Logger.get('svc')
        assert get_registry().get('svc') is log

    def test_init_registry_replaces(self):
        old = Logger.get('svc')
        reg = init_registry()
        assert get_registry() is reg
        assert Logger.get('svc') is not old

    def test_init_registry_default_filter(self):
        init_registry(default_filter=ALL)
        assert Logger.get('loud').filter_level == ALL

    def test_init_registry_without_filter_uses_default(self):
        init_registry()
        assert Logger.get('plain').filter_level == DEFAULT_FILTER

    def test_init_registry_sink(self):
        sink = MemorySink()
        init_registry(default_filter=DEFAULT_FILTER | DEBUG, sink=sink)
        Logger.get('app').debug('ready')
        assert sink.records[0][0] == 'debug'
        assert sink.records[0][1].endswith('[app] [Debug] ready')
