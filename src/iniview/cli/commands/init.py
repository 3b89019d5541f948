from __future__ import annotations

from pathlib import Path

import typer

from iniview.cli.utils.files import ensure_dir, write_file
from iniview.core.config import DEFAULT_REPO_CONFIG_FILES


DEFAULT_CONFIG_TOML = """\
[parse]
# "records": an empty file is an empty record list
# "error":   an empty file is rejected
empty_input = "records"
encoding = "utf-8"
decode_errors = "replace"

[output]
# plain | table | json | yaml
format = "plain"
show_lines = false
"""


def init_cmd(
    path: Path = typer.Argument(Path("."), help="Directory to initialize."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config."),
) -> None:
    """Write a default config file."""
    root = path.resolve()
    ensure_dir(root)

    target = root / DEFAULT_REPO_CONFIG_FILES[0]
    if write_file(target, DEFAULT_CONFIG_TOML, force=force):
        typer.echo(f"Initialized {target}")
    else:
        typer.echo(f"Exists, not overwritten: {target} (use --force)")
