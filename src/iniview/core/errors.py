from __future__ import annotations

from enum import IntEnum
from typing import Union
from pathlib import Path


class ExitCode(IntEnum):
    OK = 0
    PARSE_ERROR = 1
    ERROR = 2


class IniviewError(Exception):
    """Base class for every error raised by iniview."""


class BufferReadError(IniviewError):
    """
    The input could not be turned into an in-memory buffer.
    Raised before any parsing starts.
    """

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to read {self.path}: {reason}")


class ConfigError(IniviewError):
    """A config file or override could not be read or validated."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"config: {detail}")
