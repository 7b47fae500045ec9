"""dotconf — a small ``.env`` loader with typed lookups.

Load ``KEY = VALUE`` lines into the process environment, then read them
back as the type you need::

    import dotconf

    dotconf.init()                        # ./.env
    dotconf.init_with_path("local.env")   # later files overwrite earlier ones

    host = dotconf.var("HOST").to_string()
    port = dotconf.var("PORT").to_isize()
    debug = dotconf.var("DEBUG").to_bool()

A missing file raises ``IoError``, which is safe to ignore::

    with contextlib.suppress(dotconf.IoError):
        dotconf.init()
"""

from dotconf.env import Environment, EnvironmentStore, ProcessEnvironment
from dotconf.errors import (
    DotconfError,
    EmptyKeyError,
    IoError,
    LineError,
    MalformedLineError,
    NotFoundError,
    NulByteError,
    ParseError,
)
from dotconf.loader import (
    DEFAULT_ENCODING,
    DEFAULT_PATH,
    Loader,
    init,
    init_with_path,
    parse_dotconf_file,
    var,
)
from dotconf.logging import LogEntry, Logger, LogLevel
from dotconf.parser import Entry, parse, parse_line
from dotconf.value import Value, parse_bool, parse_f64, parse_isize, parse_usize

__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_PATH",
    "DotconfError",
    "EmptyKeyError",
    "Entry",
    "Environment",
    "EnvironmentStore",
    "IoError",
    "LineError",
    "LogEntry",
    "LogLevel",
    "Loader",
    "Logger",
    "MalformedLineError",
    "NotFoundError",
    "NulByteError",
    "ParseError",
    "ProcessEnvironment",
    "Value",
    "init",
    "init_with_path",
    "parse",
    "parse_bool",
    "parse_dotconf_file",
    "parse_f64",
    "parse_isize",
    "parse_line",
    "parse_usize",
    "var",
]
