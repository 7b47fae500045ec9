"""Environment stores — where loaded variables live.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
inherited from its parent.  Loading a ``.env`` file means writing into
that block, and reading a setting means looking it up again.

Rather than hard-wiring ``os.environ`` everywhere, the loader talks to
an ``EnvironmentStore`` — anything with ``get`` and ``set``.  Two are
provided:

- **ProcessEnvironment** — the real process block (``os.environ``).
  Changes are visible to child processes started afterwards.
- **Environment** — a plain dict, independent of the process.  Tests
  use it so they never leak variables into each other.

Key properties shared by both:
    - **Strings only** — both keys and values are strings.
    - **Last write wins** — ``set`` overwrites silently.

Neither store is locked.  ``os.environ`` is process-wide, so callers
that load or read from several threads must synchronise themselves.
"""

import os
from collections.abc import MutableMapping
from typing import Protocol


class EnvironmentStore(Protocol):
    """The two operations the loader needs from an environment."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        ...

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        ...


class Environment:
    """An in-memory key-value store for environment variables.

    Each instance is an independent copy — modifying one does not
    affect any other, or the real process environment.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs, for inspecting what a load wrote."""
        return list(self._vars.items())

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set."""
        return key in self._vars

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)


class ProcessEnvironment:
    """The running process's environment, seen through the store protocol.

    By default this wraps ``os.environ``; any other mutable mapping can
    be passed in instead (handy with ``monkeypatch.setattr``).
    """

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        """Wrap *environ*, or ``os.environ`` when None."""
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._environ.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* in the process environment."""
        self._environ[key] = value

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is set."""
        return key in self._environ
