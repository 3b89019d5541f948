from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from iniview.cli.commands.show import build_overrides
from iniview.cli.ui import get_ui
from iniview.cli.utils.parsing import load_config_for, parse_or_exit
from iniview.core.errors import ExitCode


def check_cmd(
    file: Path = typer.Argument(..., help="INI file to validate."),
    empty_is_error: Optional[bool] = typer.Option(
        None, "--empty-error/--empty-ok", help="Treat an empty file as an error."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
) -> None:
    """Validate syntax only. Exit 1 on the first error."""
    ui = get_ui(verbose=verbose)
    loaded = load_config_for(ui, file, build_overrides(empty_is_error=empty_is_error))

    outcome = parse_or_exit(ui, file, loaded)

    sections = {r.section.tobytes() for r in outcome.records}
    ui.console.print(
        f"[ok]OK[/ok]: {len(outcome)} record(s) in {len(sections)} section(s)",
        highlight=False,
    )
    raise typer.Exit(code=int(ExitCode.OK))
