from __future__ import annotations

from iniview.parsers.common import build_index, format_record, lookup, records_to_dicts
from iniview.parsers.errors import IniParseError, ParseErrorKind
from iniview.parsers.ini_parser import IniParser, parse_ini
from iniview.parsers.types import Buffer, Record, View

__all__ = [
    "Buffer",
    "View",
    "Record",
    "IniParser",
    "parse_ini",
    "IniParseError",
    "ParseErrorKind",
    "build_index",
    "lookup",
    "format_record",
    "records_to_dicts",
]
