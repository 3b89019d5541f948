from __future__ import annotations

import codecs
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, field_validator


# ================================
# Enums
# ================================


class OutputFormat(str, Enum):
    PLAIN = "plain"
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


# ================================
# Parse config (defaults only)
# ================================


class ParseConfig(BaseModel):
    """
    How input is turned into records.
    Global/repo/CLI overrides are merged by core/config.py.
    """

    empty_input: Literal["records", "error"] = Field(
        default="records",
        description="Treat a zero-length input as an empty record list or as an error.",
    )
    encoding: str = Field(default="utf-8", min_length=1)
    decode_errors: Literal["strict", "replace", "ignore", "backslashreplace"] = "replace"

    @field_validator("encoding")
    @classmethod
    def _encoding_must_exist(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v

    @property
    def allow_empty(self) -> bool:
        return self.empty_input == "records"


# ================================
# Output config (defaults only)
# ================================


class OutputConfig(BaseModel):
    format: OutputFormat = OutputFormat.PLAIN
    show_lines: bool = Field(
        default=False, description="Prefix each record with its source line number."
    )


class AppConfig(BaseModel):
    parse: ParseConfig = Field(default_factory=ParseConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
