"""Tests for the per-thread shared generator."""

import threading

from structlog.testing import capture_logs

from py_rand.core.lcg_random import LCGRandom
from py_rand.utils.random import get_system_random, reset_system_random


def _collect_from_thread():
    result = {}

    def worker():
        prng = get_system_random()
        result["prng"] = prng
        result["seed"] = prng.get_seed()
        result["again"] = get_system_random()

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()
    return result


class TestSystemRandom:
    """Test thread scoping of the shared generator."""

    def test_same_thread_same_instance(self):
        """Test that repeated access returns one instance."""
        assert get_system_random() is get_system_random()

    def test_marked_as_system_random(self):
        """Test that the shared instance carries the bookkeeping flag."""
        assert get_system_random().is_system_random
        assert not LCGRandom(1).is_system_random

    def test_threads_get_distinct_instances(self):
        """Test that two threads never share a generator."""
        first = _collect_from_thread()
        second = _collect_from_thread()

        assert first["prng"] is first["again"]
        assert first["prng"] is not second["prng"]
        assert first["prng"] is not get_system_random()
        assert first["seed"] != second["seed"]

    def test_reset_creates_new_instance(self):
        """Test that reset drops the current thread's generator."""
        before = get_system_random()
        reset_system_random()
        assert get_system_random() is not before

    def test_reset_without_instance(self):
        """Test that resetting twice is harmless."""
        reset_system_random()
        reset_system_random()


class TestReseedDiagnostics:
    """Test warnings for reseeding a shared generator."""

    def test_set_seed_on_shared_instance_warns(self):
        """Test that set_seed on the shared generator is logged."""
        prng = get_system_random()
        with capture_logs() as logs:
            prng.set_seed(5)

        assert prng.get_seed() == 5
        assert any(
            entry["event"] == "system_random_reseeded" and entry["operation"] == "set_seed"
            for entry in logs
        )

    def test_combine_seed_on_shared_instance_warns(self):
        """Test that combine_seed on the shared generator is logged."""
        with capture_logs() as logs:
            get_system_random().combine_seed(5)

        assert [entry["log_level"] for entry in logs if entry["event"] == "system_random_reseeded"] == ["warning"]

    def test_private_instance_is_silent(self):
        """Test that ordinary generators reseed without warnings."""
        with capture_logs() as logs:
            LCGRandom(1).set_seed(2)

        assert not [entry for entry in logs if entry["event"] == "system_random_reseeded"]

    def test_warning_can_be_disabled(self, monkeypatch):
        """Test the warn_on_system_reseed setting."""
        monkeypatch.setenv("PY_RAND_WARN_ON_SYSTEM_RESEED", "false")
        with capture_logs() as logs:
            get_system_random().set_seed(5)

        assert not [entry for entry in logs if entry["event"] == "system_random_reseeded"]
