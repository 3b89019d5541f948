from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from iniview.cli.ui.formatters import (
    render_error,
    render_parse_error,
    render_read_error,
    render_records,
    render_records_table,
)

THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "error": "bold red",
        "muted": "dim",
        "section": "cyan",
        "key": "bold",
        "path": "magenta",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    err_console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    configure_logging(verbose)
    return UI(
        console=Console(theme=THEME),
        err_console=Console(theme=THEME, stderr=True),
        verbose=verbose,
    )


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(
        RichHandler(
            console=Console(stderr=True),
            level=level,
            show_path=False,
            rich_tracebacks=False,
        )
    )


__all__ = [
    "UI",
    "get_ui",
    "configure_logging",
    "render_records",
    "render_records_table",
    "render_error",
    "render_parse_error",
    "render_read_error",
]
