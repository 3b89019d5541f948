from __future__ import annotations

from iniview.core.engine import ParseOutcome, run_parse
from iniview.core.errors import BufferReadError, IniviewError
from iniview.parsers import (
    Buffer,
    IniParseError,
    IniParser,
    ParseErrorKind,
    Record,
    View,
    parse_ini,
)

__version__ = "0.1.0"

__all__ = [
    "Buffer",
    "View",
    "Record",
    "IniParser",
    "parse_ini",
    "run_parse",
    "ParseOutcome",
    "IniviewError",
    "IniParseError",
    "ParseErrorKind",
    "BufferReadError",
    "__version__",
]
