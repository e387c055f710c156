"""pva report command — filtered, sorted and grouped video listings."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer

from pva.cli.catalog import collect_stats, console, load_config, open_repository
from pva.cli.output import debug, error, warn, write_output
from pva.core.constants import DEFAULT_SORT_BY, GROUP_PERIODS, OUTPUT_FORMATS, SORT_FIELDS
from pva.core.exceptions import InvalidCriteriaError, OutputWriteError, QueryError
from pva.core.resolution import ResolutionBucket
from pva.db.models import FilterCriteria
from pva.report.formatters import render_csv, render_json, render_stats, render_table
from pva.report.grouping import group_records

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def register(app: typer.Typer) -> None:
    @app.command("report")
    def report_cmd(
        db: Path = typer.Argument(None, help="Path to Photos.sqlite"),
        limit: int = typer.Option(None, "--limit", "-n", help="Number of results (default 100, 0 for all)"),
        format: str = typer.Option(None, "--format", "-f", help="Output format: table, csv, json"),
        output: Path = typer.Option(None, "--output", "-o", help="Write the report to this file"),
        min_duration: float = typer.Option(None, "--min-duration", help="Minimum duration in seconds"),
        max_duration: float = typer.Option(None, "--max-duration", help="Maximum duration in seconds"),
        date_from: datetime = typer.Option(None, "--date-from", formats=DATE_FORMATS, help="Created on or after (UTC)"),
        date_to: datetime = typer.Option(None, "--date-to", formats=DATE_FORMATS, help="Created on or before (UTC)"),
        resolution: str = typer.Option(None, "--resolution", "-r", help="sd, hd, fullhd, 4k, 8k"),
        search: str = typer.Option(None, "--search", "-s", help="Filename contains this text (case-sensitive)"),
        sort_by: str = typer.Option(None, "--sort-by", help="duration, date, size, filename"),
        group_by: str = typer.Option(None, "--group-by", help="Group by day, month or year"),
        stats_only: bool = typer.Option(False, "--stats-only", help="Show only library statistics"),
        debug_sql: bool = typer.Option(False, "--debug", help="Print the generated SQL to stderr"),
    ) -> None:
        """Report on the videos in a Photos library."""
        config = load_config(db)
        fmt = (format or config.format).lower()
        if fmt not in OUTPUT_FORMATS:
            error(f"Unknown format: {fmt}. Use table, csv, or json.")
            raise typer.Exit(1)
        if group_by and group_by.lower() not in GROUP_PERIODS:
            error(f"Unknown group period: {group_by}. Use day, month, or year.")
            raise typer.Exit(1)
        sort_key = (sort_by or config.sort_by).lower()
        if sort_key not in SORT_FIELDS:
            warn(f"Unknown sort field: {sort_key}. Sorting by {DEFAULT_SORT_BY}.")
            sort_key = DEFAULT_SORT_BY

        try:
            criteria = FilterCriteria.parse(
                min_duration=min_duration,
                max_duration=max_duration,
                date_from=date_from,
                date_to=date_to,
                resolution=ResolutionBucket.from_name(resolution) if resolution else None,
                search_term=search or None,
                sort_by=sort_key,
                limit=config.limit if limit is None else limit,
                group_by=group_by.lower() if group_by else None,
            )
        except InvalidCriteriaError as e:
            error(str(e))
            raise typer.Exit(1)

        quiet = fmt != "table" and output is None
        repo = open_repository(config, quiet=quiet)
        try:
            if stats_only:
                write_output(render_stats(collect_stats(repo)), output)
                return

            query = repo.builder.build(criteria)
            if debug_sql or config.debug:
                debug(f"{query.sql}\nparams: {list(query.params)}")

            try:
                records = repo.fetch(query)
            except QueryError as e:
                warn(str(e))
                records = []
            if not quiet:
                console.print(f"Found {len(records)} videos")

            groups = group_records(records, criteria.group_by) if criteria.group_by else None

            if fmt == "csv":
                text = render_csv(records, groups)
            elif fmt == "json":
                text = render_json(records, groups)
            else:
                text = render_stats(collect_stats(repo)) + render_table(
                    records, groups, sort_by=criteria.sort_by, group_by=criteria.group_by
                )
            write_output(text, output)
        except (InvalidCriteriaError, OutputWriteError) as e:
            error(str(e))
            raise typer.Exit(1)
        finally:
            repo.close()
