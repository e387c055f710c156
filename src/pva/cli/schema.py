"""pva schema command — describe the catalog's tables and ZASSET columns."""

from __future__ import annotations

from pathlib import Path

import typer

from pva.cli.catalog import load_config, open_repository
from pva.cli.output import error, output_text, warn
from pva.core.constants import ASSET_TABLE, SCHEMA_SAMPLE_ROWS
from pva.core.exceptions import QueryError
from pva.report.schema import render_schema


def register(app: typer.Typer) -> None:
    @app.command("schema")
    def schema_cmd(
        db: Path = typer.Argument(None, help="Path to Photos.sqlite"),
        sample: int = typer.Option(SCHEMA_SAMPLE_ROWS, "--sample", "-n", min=0, help="Sample rows to show"),
    ) -> None:
        """Show catalog tables, ZASSET columns, media type counts and sample rows."""
        config = load_config(db)
        repo = open_repository(config)
        try:
            try:
                tables = repo.list_tables()
                columns = repo.table_info(ASSET_TABLE)
            except QueryError as e:
                error(str(e))
                raise typer.Exit(1)

            try:
                counts = repo.media_type_counts()
            except QueryError as e:
                warn(str(e))
                counts = None
            try:
                samples = repo.sample_rows(sample) if sample else []
            except QueryError as e:
                warn(str(e))
                samples = []

            output_text(render_schema(tables, columns, counts, samples, sample))
        finally:
            repo.close()
