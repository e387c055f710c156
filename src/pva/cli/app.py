"""Typer root app — wires all subcommands together."""

from __future__ import annotations

import json

import typer

from pva import __version__

app = typer.Typer(
    name="pva",
    help="pva — report on the videos in an Apple Photos library.",
    add_completion=False,
    no_args_is_help=True,
)


@app.command("version")
def version_cmd() -> None:
    """Print version info as JSON."""
    print(json.dumps({"version": __version__, "package": "pva"}))


# --- Register direct commands ---

from pva.cli.report import register as register_report  # noqa: E402
from pva.cli.stats import register as register_stats  # noqa: E402
from pva.cli.locate import register as register_locate  # noqa: E402
from pva.cli.schema import register as register_schema  # noqa: E402
from pva.cli.config_cmd import config_app  # noqa: E402

register_report(app)
register_stats(app)
register_locate(app)
register_schema(app)
app.add_typer(config_app, name="config", help="Show/set configuration")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
