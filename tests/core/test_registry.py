import logging
import threading

import pytest

from fabrica.utils.registry import Registry


def _registry(default=None):
    registry = Registry("widget", default=default)
    registry.register("alpha", lambda **kw: ("alpha", kw))
    registry.register("beta", lambda **kw: ("beta", kw))
    return registry


def test_build_is_case_insensitive_and_passes_kwargs():
    registry = _registry()
    assert registry.build("ALPHA", size=3) == ("alpha", {"size": 3})
    assert registry.keys() == ("alpha", "beta")
    assert "Beta" in registry


def test_duplicate_registration_raises():
    registry = _registry()
    with pytest.raises(ValueError, match="already registered"):
        registry.register("alpha", object)


def test_unknown_key_without_default_raises_key_error():
    registry = _registry()
    with pytest.raises(KeyError, match="Available: alpha, beta"):
        registry.build("gamma")


def test_unknown_key_falls_back_to_default_with_warning(caplog):
    registry = _registry(default="beta")
    registry.logger.propagate = True
    try:
        with caplog.at_level(logging.WARNING, logger=registry.logger.name):
            assert registry.build("unknown-xyz") == ("beta", {})
    finally:
        registry.logger.propagate = False
    assert "falling back to 'beta'" in caplog.text
    assert registry.resolve(None) == "beta"
    assert registry.resolve("") == "beta"


def test_get_caches_one_instance_per_key():
    registry = Registry("counter", default="one")
    calls = []

    def build():
        calls.append(1)
        return object()

    registry.register("one", build)
    results = []
    threads = [threading.Thread(target=lambda: results.append(registry.get("one"))) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(r is results[0] for r in results)
    assert registry.get("missing") is results[0]


def test_membership_and_lookup_normalize_the_same_way():
    registry = _registry()
    assert " Alpha " in registry
    assert registry.resolve(" Alpha ") == "alpha"
    assert registry.build(" alpha")[0] == "alpha"
