from __future__ import annotations

from enum import Enum
from typing import Optional

from iniview.core.errors import IniviewError


class ParseErrorKind(str, Enum):
    UNTERMINATED_SECTION = "unterminated_section"
    UNTERMINATED_KEY = "unterminated_key"
    MISSING_KEY_TERMINATOR = "missing_key_terminator"
    MISSING_KEY = "missing_key"
    MISSING_VALUE = "missing_value"
    EMPTY_INPUT = "empty_input"


END_OF_LINE = "end of line"
END_OF_FILE = "end of file"


class IniParseError(IniviewError):
    """
    Fatal INI syntax error. Parsing stops at the first one.

    `line` is 1-based; `expected`/`found` describe the mismatch for humans.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        line: int,
        *,
        expected: Optional[str] = None,
        found: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.line = line
        self.expected = expected
        self.found = found
        super().__init__(self._render())

    def _render(self) -> str:
        if self.expected and self.found:
            detail = f"Expected {self.expected}, found {self.found}"
        elif self.expected:
            detail = f"Expected {self.expected}"
        else:
            detail = self.kind.value.replace("_", " ").capitalize()
        return f"[line {self.line}] {detail}"
