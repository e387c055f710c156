"""pva stats command."""

from __future__ import annotations

from pathlib import Path

import typer

from pva.cli.catalog import collect_stats, load_config, open_repository
from pva.cli.output import output_json, output_text
from pva.report.formatters import render_stats


def register(app: typer.Typer) -> None:
    @app.command("stats")
    def stats_cmd(
        db: Path = typer.Argument(None, help="Path to Photos.sqlite"),
        as_json: bool = typer.Option(False, "--json", help="Print statistics as JSON"),
    ) -> None:
        """Show library-wide photo and video statistics."""
        config = load_config(db)
        repo = open_repository(config, quiet=as_json)
        try:
            stats = collect_stats(repo)
            if as_json:
                output_json(stats.model_dump(), pretty=True)
            else:
                output_text(render_stats(stats))
        finally:
            repo.close()
