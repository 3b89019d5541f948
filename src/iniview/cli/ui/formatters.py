from __future__ import annotations

import json
import re
from typing import Optional, Sequence

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from iniview.core.errors import BufferReadError
from iniview.core.models import OutputFormat
from iniview.parsers.common import format_record, records_to_dicts
from iniview.parsers.errors import IniParseError
from iniview.parsers.types import Buffer, Record

_LINE_SPLIT = re.compile(rb"\r\n|\r|\n")


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


def _raw(console: Console, text: str) -> None:
    # record text is user data: no markup, emoji codes, highlighting or wrapping
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def source_line(buffer: Buffer, line: int, *, encoding: str = "utf-8") -> Optional[str]:
    """Text of a 1-based line, split the way the parser counts lines."""
    lines = _LINE_SPLIT.split(buffer.data)
    if line < 1 or line > len(lines):
        return None
    return lines[line - 1].decode(encoding, "replace")


# ----------------------------
# Records
# ----------------------------

def render_records(
    console: Console,
    records: Sequence[Record],
    *,
    fmt: OutputFormat = OutputFormat.PLAIN,
    show_lines: bool = False,
    encoding: str = "utf-8",
    errors: str = "replace",
    title: Optional[str] = None,
) -> None:
    if fmt == OutputFormat.TABLE:
        render_records_table(
            console, records, title=title, show_lines=show_lines, encoding=encoding, errors=errors
        )
        return

    if fmt in (OutputFormat.JSON, OutputFormat.YAML):
        rows = records_to_dicts(records, encoding=encoding, errors=errors, with_lines=show_lines)
        if fmt == OutputFormat.JSON:
            _raw(console, json.dumps(rows, indent=2, ensure_ascii=False))
        else:
            _raw(console, yaml.safe_dump(rows, sort_keys=False, allow_unicode=True).rstrip("\n"))
        return

    for r in records:
        text = format_record(r, encoding=encoding, errors=errors)
        if show_lines:
            text = f"{r.line}: {text}"
        _raw(console, text)


def render_records_table(
    console: Console,
    records: Sequence[Record],
    *,
    title: Optional[str] = None,
    show_lines: bool = False,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> None:
    if not records:
        console.print("[muted]No records.[/muted]")
        return

    table = Table(title=title or f"Records ({len(records)})", show_lines=False)
    if show_lines:
        table.add_column("Line", justify="right", no_wrap=True)
    table.add_column("Section", style="section", no_wrap=True)
    table.add_column("Key", style="key")
    table.add_column("Value")

    for r in records:
        section, key, value = r.as_text(encoding, errors)
        row = []
        if show_lines:
            row.append(str(r.line))
        # user data, never markup
        row.extend([Text(section), Text(key), Text(_short(value, 120))])
        table.add_row(*row)

    console.print(table)


# ----------------------------
# Errors
# ----------------------------

def render_parse_error(
    console: Console,
    err: IniParseError,
    *,
    buffer: Optional[Buffer] = None,
    encoding: str = "utf-8",
) -> None:
    name = buffer.name if buffer is not None else "<input>"
    msg = Text()
    msg.append("error", style="error")
    msg.append(f": {name}: {err}")
    console.print(msg, soft_wrap=True)

    if buffer is None:
        return
    text = source_line(buffer, err.line, encoding=encoding)
    if text is not None:
        gutter = f"{err.line:>5} | "
        console.print(Text(gutter, style="muted") + Text(_short(text, 160)), soft_wrap=True)


def render_error(console: Console, message: str) -> None:
    msg = Text()
    msg.append("error", style="error")
    msg.append(f": {message}")
    console.print(msg, soft_wrap=True)


def render_read_error(console: Console, err: BufferReadError) -> None:
    render_error(console, str(err))
