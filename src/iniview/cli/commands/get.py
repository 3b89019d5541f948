from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from iniview.cli.commands.show import build_overrides
from iniview.cli.ui import get_ui
from iniview.cli.utils.parsing import load_config_for, parse_or_exit
from iniview.core.errors import ExitCode
from iniview.parsers.common import build_index, lookup


def get_cmd(
    file: Path = typer.Argument(..., help="INI file to read."),
    key: str = typer.Argument(..., help="Key to look up."),
    section: Optional[str] = typer.Option(
        None, "--section", "-s", help="Section to search (default: global, then first match)."
    ),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-i", help="Case-insensitive match."),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Encoding of keys and values."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
) -> None:
    """Print the value of KEY. Last occurrence wins."""
    ui = get_ui(verbose=verbose)
    loaded = load_config_for(ui, file, build_overrides(encoding=encoding))
    cfg = loaded.config.parse

    outcome = parse_or_exit(ui, file, loaded)

    index = build_index(
        outcome.records,
        case_insensitive=ignore_case,
        encoding=cfg.encoding,
        errors=cfg.decode_errors,
    )
    value = lookup(index, key, section=section, case_insensitive=ignore_case)
    if value is None:
        where = f" in [{section}]" if section is not None else ""
        ui.err_console.print(f"Key not found: {key}{where}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=int(ExitCode.ERROR))

    ui.console.print(value, markup=False, emoji=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=int(ExitCode.OK))
