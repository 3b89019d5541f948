from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from iniview.cli.ui import UI, render_error, render_parse_error, render_read_error
from iniview.core.config import LoadedConfig, load_config
from iniview.core.engine import ParseOutcome, run_parse
from iniview.core.errors import BufferReadError, ConfigError, ExitCode
from iniview.core.reader import read_buffer
from iniview.parsers.errors import IniParseError


def load_config_for(
    ui: UI, file: Path, cli_overrides: Optional[Dict[str, Any]] = None
) -> LoadedConfig:
    try:
        return load_config(start_dir=file.resolve().parent, cli_overrides=cli_overrides)
    except ConfigError as e:
        render_error(ui.err_console, str(e))
        raise typer.Exit(code=int(ExitCode.ERROR))


def parse_or_exit(ui: UI, file: Path, loaded: LoadedConfig) -> ParseOutcome:
    """
    Read, parse and decode `file`, or report the failure and exit.
    Nothing is printed to stdout on failure.
    """
    cfg = loaded.config.parse

    if ui.verbose:
        ui.err_console.print("[bold]Config sources:[/bold]")
        ui.err_console.print(f"  global: {loaded.global_path or '-'}")
        ui.err_console.print(f"  repo:   {loaded.repo_path or '-'}")

    try:
        buffer = read_buffer(file)
    except BufferReadError as e:
        render_read_error(ui.err_console, e)
        raise typer.Exit(code=int(ExitCode.ERROR))

    try:
        outcome = run_parse(buffer, cfg)
    except IniParseError as e:
        render_parse_error(ui.err_console, e, buffer=buffer, encoding=cfg.encoding)
        raise typer.Exit(code=int(ExitCode.PARSE_ERROR))

    # every record must decode before any of them is printed
    for r in outcome.records:
        try:
            r.as_text(cfg.encoding, cfg.decode_errors)
        except UnicodeDecodeError as e:
            render_error(
                ui.err_console,
                f"{buffer.name}: [line {r.line}] cannot decode as {cfg.encoding}: {e.reason}",
            )
            raise typer.Exit(code=int(ExitCode.ERROR))

    return outcome
