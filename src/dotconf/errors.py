"""Error hierarchy — every failure the loader can report.

All errors derive from ``DotconfError`` so callers can catch the whole
family with one ``except`` clause, or pick out a single kind:

- **IoError** — the env file is missing, unreadable, or not UTF-8.
- **LineError** — a line could not be parsed.  Concrete kinds:
  ``MalformedLineError`` (no ``=``), ``EmptyKeyError`` (blank key) and
  ``NulByteError`` (NUL in key or value).
- **NotFoundError** — a lookup asked for a key that is not set.
- **ParseError** — a value is set but cannot be converted to the
  requested type.

Low-level exceptions (``OSError``, ``UnicodeDecodeError``) are caught at
the file boundary and re-raised as ``IoError`` with the original
exception chained as ``__cause__``, so callers never need to know which
builtin the filesystem raised.
"""

from pathlib import Path


class DotconfError(Exception):
    """Base class for every error raised by this package."""


class IoError(DotconfError):
    """Raised when an env file cannot be read.

    This error is recoverable: a missing ``.env`` is often fine, and
    callers are free to catch and ignore it.
    """

    def __init__(self, path: Path, reason: str) -> None:
        """Record the path that failed and why."""
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")


class LineError(DotconfError):
    """Base class for errors tied to one line of an env file.

    Attributes:
        lineno: 1-based line number within the parsed text.
        line: The raw line, exactly as it appeared.

    """

    def __init__(self, lineno: int, line: str, reason: str) -> None:
        """Record where the bad line sits and what is wrong with it."""
        self.lineno = lineno
        self.line = line
        super().__init__(f"line {lineno}: {reason}: {line.strip()!r}")


class MalformedLineError(LineError):
    """Raised when a line has no ``=`` separator."""

    def __init__(self, lineno: int, line: str) -> None:
        """Create the error for *line* at *lineno*."""
        super().__init__(lineno, line, "missing '=' separator")


class EmptyKeyError(LineError):
    """Raised when the text before ``=`` is blank."""

    def __init__(self, lineno: int, line: str) -> None:
        """Create the error for *line* at *lineno*."""
        super().__init__(lineno, line, "empty key")


class NotFoundError(DotconfError):
    """Raised when a looked-up key is not set."""

    def __init__(self, key: str) -> None:
        """Create the error for the missing *key*."""
        self.key = key
        super().__init__(f"environment variable not found: {key}")


class ParseError(DotconfError):
    """Raised when a value cannot be converted to the requested type.

    Attributes:
        key: The variable being converted, or None for a bare string.
        raw: The string that failed to convert.
        target: Name of the requested type (``"isize"``, ``"bool"`` ...).

    """

    def __init__(self, raw: str, target: str, key: str | None = None) -> None:
        """Describe the failed conversion of *raw* into *target*."""
        self.key = key
        self.raw = raw
        self.target = target
        where = f" for {key}" if key is not None else ""
        super().__init__(f"invalid {target} value{where}: {raw!r}")


class NulByteError(LineError):
    """Raised when a key or value contains a NUL character.

    The process environment cannot hold NUL, so such a line is rejected
    while parsing, before anything is written.
    """

    def __init__(self, lineno: int, line: str) -> None:
        """Create the error for *line* at *lineno*."""
        super().__init__(lineno, line, "NUL character in key or value")
