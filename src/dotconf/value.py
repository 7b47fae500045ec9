"""Typed accessors — read a variable back as the type you need.

Environment values are always strings.  ``Value`` wraps the result of
one lookup and converts on demand::

    port = var("PORT").to_isize()
    debug = var("DEBUG").to_bool()

Each conversion either returns the converted value or raises:

- ``NotFoundError`` if the variable was not set at lookup time;
- ``ParseError`` if it was set but is not valid for the type.

The conversions themselves are plain functions (``parse_isize``,
``parse_bool`` ...) so they can be used on any string.  They are strict:
no surrounding whitespace, no digit separators, and integers must fit
in 64 bits.  Booleans are case-insensitive: ``true``, ``True`` and
``TRUE`` all read as True.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from dotconf.errors import NotFoundError, ParseError

T = TypeVar("T")

ISIZE_MIN = -(2**63)
ISIZE_MAX = 2**63 - 1
USIZE_MAX = 2**64 - 1

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

_BOOLS = {"true": True, "false": False}


def parse_isize(raw: str) -> int:
    """Parse *raw* as a signed 64-bit integer.

    Raises:
        ParseError: If *raw* is not an integer or is out of range.

    """
    if _SIGNED_INT.fullmatch(raw) is None:
        raise ParseError(raw, "isize")
    value = int(raw)
    if not ISIZE_MIN <= value <= ISIZE_MAX:
        raise ParseError(raw, "isize")
    return value


def parse_usize(raw: str) -> int:
    """Parse *raw* as an unsigned 64-bit integer.

    Raises:
        ParseError: If *raw* is not a non-negative integer or is out of range.

    """
    if _UNSIGNED_INT.fullmatch(raw) is None:
        raise ParseError(raw, "usize")
    value = int(raw)
    if value > USIZE_MAX:
        raise ParseError(raw, "usize")
    return value


def parse_f64(raw: str) -> float:
    """Parse *raw* as a float (``1.5``, ``-2e3``, ``inf``, ``nan``).

    Raises:
        ParseError: If *raw* is not a float literal.

    """
    if _FLOAT.fullmatch(raw) is None:
        raise ParseError(raw, "f64")
    return float(raw)


def parse_bool(raw: str) -> bool:
    """Parse ``true`` or ``false`` in any letter case.

    Raises:
        ParseError: For any other string.

    """
    try:
        return _BOOLS[raw.lower()]
    except KeyError as e:
        raise ParseError(raw, "bool") from e


@dataclass(frozen=True)
class Value:
    """The result of looking up one environment variable.

    Attributes:
        key: The variable name that was looked up.
        raw: The string value, or None if the variable was not set.

    The value is captured when the handle is created; later changes to
    the environment are seen by the next lookup, not by this handle.
    """

    key: str
    raw: str | None = None

    @classmethod
    def of(cls, key: str, raw: str | None) -> "Value":
        """Build a handle for *key* holding *raw* (None = not set)."""
        return cls(key=key, raw=raw)

    @property
    def is_set(self) -> bool:
        """Return True if the variable had a value."""
        return self.raw is not None

    def to_string(self) -> str:
        """Return the raw string.

        Raises:
            NotFoundError: If the variable was not set.

        """
        if self.raw is None:
            raise NotFoundError(self.key)
        return self.raw

    def to_isize(self) -> int:
        """Return the value as a signed 64-bit integer."""
        return self._convert(parse_isize)

    def to_usize(self) -> int:
        """Return the value as an unsigned 64-bit integer."""
        return self._convert(parse_usize)

    def to_f64(self) -> float:
        """Return the value as a float."""
        return self._convert(parse_f64)

    def to_bool(self) -> bool:
        """Return the value as a bool (``true``/``false``, any case)."""
        return self._convert(parse_bool)

    def _convert(self, parse: Callable[[str], T]) -> T:
        """Run *parse* over the raw string, tagging errors with our key."""
        raw = self.to_string()
        try:
            return parse(raw)
        except ParseError as e:
            raise ParseError(raw, e.target, key=self.key) from e

    def __str__(self) -> str:
        """Render the value, or the not-found message if unset."""
        if self.raw is None:
            return str(NotFoundError(self.key))
        return self.raw
