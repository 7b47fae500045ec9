"""Tests for the environment stores.

``Environment`` is an isolated in-memory store; ``ProcessEnvironment``
writes through to ``os.environ`` (or any mapping handed to it).
"""

import os

import pytest

from dotconf.env import Environment, EnvironmentStore, ProcessEnvironment


class TestEnvironment:
    """Verify the in-memory Environment store."""

    def test_get_and_set(self) -> None:
        """Setting a variable should make it retrievable."""
        env = Environment()
        env.set("HOME", "/root")
        assert env.get("HOME") == "/root"

    def test_get_missing_returns_none(self) -> None:
        """Getting a missing key should return None."""
        env = Environment()
        assert env.get("MISSING") is None

    def test_get_missing_with_default(self) -> None:
        """Getting a missing key with a default should return the default."""
        env = Environment()
        assert env.get("MISSING", "fallback") == "fallback"

    def test_set_overwrites(self) -> None:
        """Setting an existing key should overwrite the value."""
        env = Environment()
        env.set("X", "old")
        env.set("X", "new")
        assert env.get("X") == "new"

    def test_contains(self) -> None:
        """'in' should report whether a key is set."""
        env = Environment({"X": "val"})
        assert "X" in env
        assert "Y" not in env

    def test_initial_is_copied(self) -> None:
        """Changing the store should not change the dict it started from."""
        initial = {"A": "1"}
        env = Environment(initial)
        env.set("A", "2")
        assert initial == {"A": "1"}

    def test_items_and_len(self) -> None:
        """Items and len() should reflect every variable."""
        env = Environment()
        env.set("A", "1")
        env.set("B", "2")
        assert dict(env.items()) == {"A": "1", "B": "2"}
        assert len(env) == 2

    def test_does_not_touch_process(self) -> None:
        """Writes to an Environment must not reach os.environ."""
        env = Environment()
        env.set("DOTCONF_TEST_ISOLATED", "1")
        assert "DOTCONF_TEST_ISOLATED" not in os.environ


class TestProcessEnvironment:
    """Verify the os.environ-backed store."""

    def test_writes_reach_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """set() should be visible through os.environ."""
        # setenv first so monkeypatch restores the variable afterwards
        monkeypatch.setenv("DOTCONF_TEST_PROC", "before")
        store = ProcessEnvironment()
        store.set("DOTCONF_TEST_PROC", "yes")
        assert os.environ["DOTCONF_TEST_PROC"] == "yes"
        assert store.get("DOTCONF_TEST_PROC") == "yes"

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """get() should see variables set by anyone else."""
        monkeypatch.setenv("DOTCONF_TEST_PROC", "from-outside")
        assert ProcessEnvironment().get("DOTCONF_TEST_PROC") == "from-outside"

    def test_custom_mapping(self) -> None:
        """A wrapped mapping should be used instead of os.environ."""
        backing: dict[str, str] = {}
        store = ProcessEnvironment(backing)
        store.set("K", "v")
        assert backing == {"K": "v"}
        assert "K" in store
        assert store.get("MISSING", "d") == "d"


class TestStoreProtocol:
    """Both stores should satisfy the EnvironmentStore protocol."""

    @pytest.mark.parametrize(
        "store",
        [Environment(), ProcessEnvironment({})],
        ids=["memory", "process"],
    )
    def test_set_then_get(self, store: EnvironmentStore) -> None:
        """Last write should win through the protocol methods."""
        store.set("K", "1")
        store.set("K", "2")
        assert store.get("K") == "2"
