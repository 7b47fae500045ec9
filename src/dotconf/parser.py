"""Parser — turn the text of an env file into key/value entries.

The format is deliberately tiny::

    # full-line comment
    HOST = example.com      # inline comment
    PORT=8080
    TAG = build\\#42         # escaped hash, value is "build#42"
    EMPTY =

Rules, applied line by line:

1. Blank lines and lines whose first non-space character is ``#`` are
   skipped.
2. The line is cut at the first ``#`` that is not preceded by a
   backslash.  ``\\#`` becomes a literal ``#``.
3. The rest is split on the *first* ``=``; a line without one is an
   error.  Later ``=`` characters belong to the value.
4. Key and value are trimmed.  A blank key is an error, and so is a
   NUL character in key or value; a blank value is allowed.

Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line.  A leading byte-order
mark is dropped.

``parse`` is a generator: entries come out one at a time, and a bad
line raises only when the iteration reaches it.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from dotconf.errors import EmptyKeyError, MalformedLineError, NulByteError

COMMENT = "#"
SEPARATOR = "="
ESCAPE = "\\"
NUL = "\0"
BOM = "\ufeff"

# \n, \r\n and \r only; \f, \x85, U+2028 and friends stay inside the line.
_NEWLINE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Entry:
    """One parsed ``KEY = VALUE`` pair.

    Unpacks like a plain pair (``key, value = entry``); the line number
    rides along for error messages and is ignored by ``==``.
    """

    key: str
    value: str
    lineno: int = field(default=0, compare=False)

    def __iter__(self) -> Iterator[str]:
        """Yield the key, then the value."""
        return iter((self.key, self.value))


def strip_comment(line: str) -> str:
    """Return *line* cut at its first unescaped ``#``.

    Escaped hashes (``\\#``) are unescaped on the way through.
    """
    out: list[str] = []
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == ESCAPE and line.startswith(COMMENT, i + 1):
            out.append(COMMENT)
            i += 2
            continue
        if ch == COMMENT:
            break
        out.append(ch)
        i += 1
    return "".join(out)


def parse_line(line: str, lineno: int = 1) -> Entry | None:
    """Parse a single line.

    Args:
        line: The raw line, without its newline.
        lineno: Position of the line, used in error messages.

    Returns:
        The entry, or None for blank and comment-only lines.

    Raises:
        MalformedLineError: If the line has no ``=``.
        EmptyKeyError: If the key is blank.
        NulByteError: If the key or value contains NUL.

    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT):
        return None

    content = strip_comment(line)
    key, sep, value = content.partition(SEPARATOR)
    if not sep:
        raise MalformedLineError(lineno, line)

    key = key.strip()
    if not key:
        raise EmptyKeyError(lineno, line)
    if NUL in content:
        raise NulByteError(lineno, line)
    return Entry(key=key, value=value.strip(), lineno=lineno)


def parse(text: str) -> Iterator[Entry]:
    """Yield an entry for every key/value line in *text*.

    A leading byte-order mark is ignored.

    Raises:
        MalformedLineError: When a line without ``=`` is reached.
        EmptyKeyError: When a line with a blank key is reached.
        NulByteError: When a key or value containing NUL is reached.

    """
    text = text.removeprefix(BOM)
    for lineno, line in enumerate(_NEWLINE.split(text), start=1):
        entry = parse_line(line, lineno)
        if entry is not None:
            yield entry
