from __future__ import annotations

import typer
from rich.console import Console

from iniview.cli.commands.check import check_cmd
from iniview.cli.commands.get import get_cmd
from iniview.cli.commands.init import init_cmd
from iniview.cli.commands.show import show_cmd

app = typer.Typer(
    name="iniview",
    help="Parse INI files into ordered [section] key = value records.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        from iniview import __version__

        console.print(f"iniview {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback, is_eager=True
    ),
) -> None:
    pass


app.command("show")(show_cmd)
app.command("check")(check_cmd)
app.command("get")(get_cmd)
app.command("init")(init_cmd)
