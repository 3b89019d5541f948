from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from iniview.cli.ui import get_ui, render_records
from iniview.cli.utils.parsing import load_config_for, parse_or_exit
from iniview.core.errors import ExitCode
from iniview.core.models import OutputFormat


def build_overrides(
    *,
    fmt: Optional[OutputFormat] = None,
    lines: Optional[bool] = None,
    encoding: Optional[str] = None,
    empty_is_error: Optional[bool] = None,
) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {"parse": {}, "output": {}}
    if fmt is not None:
        overrides["output"]["format"] = fmt.value
    if lines is not None:
        overrides["output"]["show_lines"] = bool(lines)
    if encoding is not None:
        overrides["parse"]["encoding"] = encoding
    if empty_is_error is not None:
        overrides["parse"]["empty_input"] = "error" if empty_is_error else "records"
    return overrides


def show_cmd(
    file: Path = typer.Argument(..., help="INI file to parse."),
    fmt: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", case_sensitive=False, help="Output format (overrides config)."
    ),
    lines: Optional[bool] = typer.Option(
        None, "--lines/--no-lines", help="Show the source line of each record."
    ),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", help="Encoding used to display keys and values."
    ),
    empty_is_error: Optional[bool] = typer.Option(
        None, "--empty-error/--empty-ok", help="Treat an empty file as an error."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
) -> None:
    """Print every record as `[section] key = value`."""
    ui = get_ui(verbose=verbose)

    loaded = load_config_for(
        ui,
        file,
        build_overrides(fmt=fmt, lines=lines, encoding=encoding, empty_is_error=empty_is_error),
    )
    cfg = loaded.config

    outcome = parse_or_exit(ui, file, loaded)

    render_records(
        ui.console,
        outcome.records,
        fmt=cfg.output.format,
        show_lines=cfg.output.show_lines,
        encoding=cfg.parse.encoding,
        errors=cfg.parse.decode_errors,
        title=f"{file} ({len(outcome)} records)",
    )

    if ui.verbose:
        ui.err_console.print(f"[muted]{len(outcome)} record(s) in {outcome.duration_ms} ms[/muted]")

    raise typer.Exit(code=int(ExitCode.OK))
