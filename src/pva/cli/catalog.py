"""Shared helpers for commands that read the Photos catalog."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from pva.cli.output import error, warn
from pva.core.config import PVAConfig, get_config
from pva.core.exceptions import CatalogConnectionError
from pva.db.models import LibraryStats
from pva.db.repository import Repository

console = Console(stderr=True, highlight=False)


def read_config(db: Path | None = None) -> PVAConfig:
    """Effective config, or exit with status 1 when a setting is invalid."""
    try:
        return get_config(db_path=db)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        error(f"Invalid configuration (check PVA_* variables and config.json): {problems}")
        raise typer.Exit(1)


def load_config(db: Path | None) -> PVAConfig:
    """Effective config, failing when no catalog path is known."""
    config = read_config(db)
    if config.db_path is None:
        error("Please provide the Photos.sqlite file path (argument or PVA_DB_PATH)")
        raise typer.Exit(1)
    return config


def open_repository(config: PVAConfig, quiet: bool = False) -> Repository:
    """Open the catalog or exit with status 1."""
    try:
        repo = Repository(config.db_path)
    except CatalogConnectionError as e:
        error(str(e))
        raise typer.Exit(1)
    if not quiet:
        console.print(
            f"[green]✓[/green] Connected to Photos database: {escape(str(config.db_path))}",
            soft_wrap=True,
        )
    return repo


def collect_stats(repo: Repository) -> LibraryStats:
    stats, problems = repo.get_stats()
    for message in problems:
        warn(message)
    return stats
