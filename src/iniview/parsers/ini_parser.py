from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Union

from iniview.parsers.errors import END_OF_FILE, END_OF_LINE, IniParseError, ParseErrorKind
from iniview.parsers.types import Buffer, BufferSource, Record, View

logger = logging.getLogger(__name__)


class ByteClass(Enum):
    CR = "cr"
    LF = "lf"
    BLANK = "blank"
    COMMENT = "comment"
    SECTION_OPEN = "section_open"
    OTHER = "other"


_CR = ord("\r")
_LF = ord("\n")
_EQUALS = ord("=")
_SECTION_CLOSE = ord("]")

_BYTE_CLASSES: Dict[int, ByteClass] = {
    _CR: ByteClass.CR,
    _LF: ByteClass.LF,
    ord(" "): ByteClass.BLANK,
    ord("\t"): ByteClass.BLANK,
    ord(";"): ByteClass.COMMENT,
    ord("["): ByteClass.SECTION_OPEN,
}

_LINE_TERMINATORS = (ByteClass.CR, ByteClass.LF)


def classify(byte: int) -> ByteClass:
    return _BYTE_CLASSES.get(byte, ByteClass.OTHER)


class IniParser:
    """
    Single-pass INI scanner.

    Walks the buffer once with a cursor and emits Records whose section, key
    and value are Views into that same buffer. Every error is fatal: the
    first malformed line raises IniParseError and no records are returned.

    Supported:
      [section]
      key = value
      ; comment lines
      \\n, \\r\\n and lone \\r line endings
    """

    def __init__(
        self,
        buffer: Union[Buffer, BufferSource],
        *,
        allow_empty: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        self.buffer = buffer if isinstance(buffer, Buffer) else Buffer(buffer, encoding=encoding)
        self.cursor = 0
        self.line = 1
        self.section: View = self.buffer.empty_view()
        self.records: List[Record] = []
        self._allow_empty = allow_empty
        self._consumed = False

    @property
    def at_end(self) -> bool:
        return self.cursor >= len(self.buffer)

    def _current(self) -> ByteClass:
        return classify(self.buffer[self.cursor])

    def parse(self) -> List[Record]:
        if self._consumed:
            raise RuntimeError("IniParser instances are single-use; create a new parser to parse again")
        self._consumed = True

        if not self._allow_empty and len(self.buffer) == 0:
            raise IniParseError(
                ParseErrorKind.EMPTY_INPUT, self.line, expected="at least one line", found=END_OF_FILE
            )

        while not self.at_end:
            kind = self._current()
            if kind in _LINE_TERMINATORS:
                self._count_line_terminator()
                self.cursor += 1
            elif kind is ByteClass.BLANK:
                self.cursor += 1
            elif kind is ByteClass.COMMENT:
                self.discard_comment()
            elif kind is ByteClass.SECTION_OPEN:
                self.parse_section_header()
            else:
                self.parse_kv()

        logger.debug("%s: %d record(s) over %d line(s)", self.buffer.name, len(self.records), self.line)
        return self.records

    def _count_line_terminator(self) -> None:
        # \r\n counts once, on the \n
        if self.buffer[self.cursor] == _CR:
            nxt = self.cursor + 1
            if nxt < len(self.buffer) and self.buffer[nxt] == _LF:
                return
        self.line += 1

    def discard_whitespace(self) -> None:
        while not self.at_end and self._current() is ByteClass.BLANK:
            self.cursor += 1

    def discard_comment(self) -> None:
        # stops on the terminator so the dispatch loop counts it
        while not self.at_end and self._current() not in _LINE_TERMINATORS:
            self.cursor += 1

    def parse_section_header(self) -> None:
        opened_on = self.line
        self.cursor += 1
        begin = self.cursor

        while not self.at_end:
            byte = self.buffer[self.cursor]
            if byte == _SECTION_CLOSE:
                self.section = self.buffer.view(begin, self.cursor - begin)
                self.cursor += 1
                logger.debug("line %d: entering section [%s]", opened_on, self.section)
                return
            if classify(byte) in _LINE_TERMINATORS:
                self._count_line_terminator()
            self.cursor += 1

        raise IniParseError(
            ParseErrorKind.UNTERMINATED_SECTION, opened_on, expected="']'", found=END_OF_FILE
        )

    def parse_kv(self) -> None:
        # Allowed whitespace:
        #   key  =  value
        #  ^1  ^2  ^3    ^4
        # 1 and 3 are skipped up front, 2 and 4 never extend the recorded end.
        line = self.line

        self.discard_whitespace()
        key_begin = self.cursor
        key_end: Optional[int] = None

        while True:
            if self.at_end:
                raise IniParseError(
                    ParseErrorKind.MISSING_KEY_TERMINATOR, line, expected="'='", found=END_OF_FILE
                )
            byte = self.buffer[self.cursor]
            if byte == _EQUALS:
                self.cursor += 1
                break
            kind = classify(byte)
            if kind in _LINE_TERMINATORS:
                raise IniParseError(
                    ParseErrorKind.UNTERMINATED_KEY, line, expected="'='", found=END_OF_LINE
                )
            if kind is not ByteClass.BLANK:
                key_end = self.cursor + 1
            self.cursor += 1

        if key_end is None:
            raise IniParseError(ParseErrorKind.MISSING_KEY, line, expected="key", found="'='")

        self.discard_whitespace()
        value_begin = self.cursor
        value_end: Optional[int] = None

        while not self.at_end:
            kind = self._current()
            if kind in _LINE_TERMINATORS:
                break
            if kind is not ByteClass.BLANK:
                value_end = self.cursor + 1
            self.cursor += 1

        if value_end is None:
            raise IniParseError(
                ParseErrorKind.MISSING_VALUE,
                line,
                expected="value",
                found=END_OF_FILE if self.at_end else END_OF_LINE,
            )

        self.records.append(
            Record(
                section=self.section,
                key=self.buffer.view(key_begin, key_end - key_begin),
                value=self.buffer.view(value_begin, value_end - value_begin),
                line=line,
            )
        )


def parse_ini(
    data: Union[Buffer, BufferSource],
    *,
    allow_empty: bool = True,
    encoding: str = "utf-8",
) -> List[Record]:
    """
    Parse INI text/bytes into an ordered list of Records.

    Raises IniParseError on the first syntax error.
    """
    return IniParser(data, allow_empty=allow_empty, encoding=encoding).parse()
