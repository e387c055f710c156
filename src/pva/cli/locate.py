"""pva locate / guide commands — find catalog videos inside the Photos app."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer

from pva.cli.catalog import load_config, open_repository
from pva.cli.output import error, output_text, warn, write_output
from pva.core.constants import DEFAULT_GUIDE_LIMIT
from pva.core.exceptions import (
    AssetNotFoundError,
    InvalidCriteriaError,
    OutputWriteError,
    QueryError,
)
from pva.db.models import FilterCriteria
from pva.report.guide import render_guide, render_locate


def register(app: typer.Typer) -> None:
    @app.command("locate")
    def locate_cmd(
        asset_id: int = typer.Argument(..., help="Asset ID (from the report's ID column)"),
        db: Path = typer.Argument(None, help="Path to Photos.sqlite"),
    ) -> None:
        """Explain how to find one video in the Photos app."""
        config = load_config(db)
        repo = open_repository(config)
        try:
            output_text(render_locate(repo.get_video(asset_id)))
        except (AssetNotFoundError, QueryError) as e:
            error(str(e))
            raise typer.Exit(1)
        finally:
            repo.close()

    @app.command("guide")
    def guide_cmd(
        db: Path = typer.Argument(None, help="Path to Photos.sqlite"),
        limit: int = typer.Option(DEFAULT_GUIDE_LIMIT, "--limit", "-n", help="Number of videos (longest first)"),
        output: Path = typer.Option(None, "--output", "-o", help="Write the guide to this file"),
    ) -> None:
        """Export a search guide for the longest videos."""
        try:
            criteria = FilterCriteria.parse(limit=limit)
        except InvalidCriteriaError as e:
            error(str(e))
            raise typer.Exit(1)

        config = load_config(db)
        repo = open_repository(config, quiet=output is None)
        try:
            try:
                records = repo.find_videos(criteria)
            except QueryError as e:
                warn(str(e))
                records = []
            text = render_guide(records, str(config.db_path), datetime.now())
            write_output(text, output)
        except OutputWriteError as e:
            error(str(e))
            raise typer.Exit(1)
        finally:
            repo.close()
