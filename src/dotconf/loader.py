"""Loader — read an env file and write its entries into the environment.

A load happens in two phases:

1. **Read and parse** — the whole file is read (UTF-8) and every line
   parsed.  Nothing has been written yet.
2. **Apply** — each entry is written to the store, in file order, so a
   key repeated later in the file wins.

Because parsing finishes before anything is applied, a load is all or
nothing: a malformed line anywhere in the file raises and leaves the
environment exactly as it was.  Loading a second file afterwards
overwrites keys the first one set.

The module-level ``init``, ``init_with_path``, ``parse_dotconf_file``
and ``var`` work on the real process environment.  Build a ``Loader``
with a different store (for example ``Environment()``) to keep loads
isolated::

    loader = Loader(store=Environment())
    loader.init_with_path("settings.env")
    timeout = loader.var("TIMEOUT").to_isize()
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from dotconf.env import EnvironmentStore, ProcessEnvironment
from dotconf.errors import IoError, LineError
from dotconf.logging import Logger, LogLevel
from dotconf.parser import Entry, parse
from dotconf.value import Value

if TYPE_CHECKING:
    from os import PathLike

DEFAULT_PATH = ".env"
DEFAULT_ENCODING = "utf-8"


class Loader:
    """Load env files into one environment store.

    Usage::

        loader = Loader()            # process environment, ./.env
        loader.init()
        loader.var("HOST").to_string()

    """

    def __init__(
        self,
        *,
        store: EnvironmentStore | None = None,
        default_path: str | PathLike[str] = DEFAULT_PATH,
        encoding: str = DEFAULT_ENCODING,
        logger: Logger | None = None,
    ) -> None:
        """Create a loader.

        Args:
            store: Where entries are written and read from.
                If None, the process environment is used.
            default_path: File loaded by ``init()``, relative to the
                current working directory at call time.
            encoding: Text encoding of env files.
            logger: Optional audit log; nothing is recorded without one.

        """
        self.store: EnvironmentStore = store if store is not None else ProcessEnvironment()
        self.default_path = Path(default_path)
        self.encoding = encoding
        self.logger = logger

    def init(self) -> None:
        """Load the default env file (``.env`` unless configured otherwise).

        Raises:
            IoError: If the file cannot be read.
            LineError: If any line is malformed; nothing is applied.

        """
        self.init_with_path(self.default_path)

    def init_with_path(self, path: str | PathLike[str]) -> None:
        """Load the env file at *path* into the store.

        Raises:
            IoError: If the file cannot be read.
            LineError: If any line is malformed; nothing is applied.

        """
        entries = self.parse_file(path)
        source = str(path)
        seen: set[str] = set()
        for entry in entries:
            if entry.key in seen:
                msg = f"duplicate key {entry.key} on line {entry.lineno}"
                self._log(LogLevel.WARNING, msg, source)
            seen.add(entry.key)
            self.store.set(entry.key, entry.value)
            self._log(LogLevel.DEBUG, f"set {entry.key}", source)
        self._log(LogLevel.INFO, f"loaded {len(entries)} entries from {source}", source)

    def parse_file(self, path: str | PathLike[str]) -> list[Entry]:
        """Read and parse the env file at *path* without applying it.

        Returns:
            Every entry in file order, duplicates included.

        Raises:
            IoError: If the file cannot be read or decoded.
            LineError: On the first malformed line.

        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            self._log(LogLevel.ERROR, f"cannot read file: {reason}", str(path))
            raise IoError(file_path, reason) from e

        try:
            return list(parse(text))
        except LineError as e:
            self._log(LogLevel.ERROR, str(e), str(path))
            raise

    def var(self, key: str) -> Value:
        """Look up *key* in the store right now."""
        return Value.of(key, self.store.get(key))

    def _log(self, level: LogLevel, message: str, source: str) -> None:
        if self.logger is not None:
            self.logger.log(level, message, source=source)


def init() -> None:
    """Load ``.env`` from the current directory into the process environment."""
    Loader().init()


def init_with_path(path: str | PathLike[str]) -> None:
    """Load the env file at *path* into the process environment."""
    Loader().init_with_path(path)


def parse_dotconf_file(path: str | PathLike[str]) -> list[Entry]:
    """Read and parse the env file at *path* without touching the environment."""
    return Loader().parse_file(path)


def var(key: str) -> Value:
    """Look up *key* in the process environment."""
    return Value.of(key, ProcessEnvironment().get(key))
