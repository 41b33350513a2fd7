
from __future__ import annotations

import typer

from phosys_parser.cli.commands.check import check_command
from phosys_parser.cli.commands.export import export_command
from phosys_parser.cli.commands.show import show_command

app = typer.Typer(
    name="phosys",
    help="PHOSYS (.language) document inspector and exporter",
    add_completion=False,
)

app.command("show")(show_command)
app.command("check")(check_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
