"""pva config command — show/set configuration."""

from __future__ import annotations

import typer
from pydantic import ValidationError

from pva.cli.catalog import read_config
from pva.cli.output import error, output_json, output_text, progress
from pva.core.config import CONFIG_KEYS, PVAConfig, _load_config_file, save_config

config_app = typer.Typer()


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    config = read_config()
    output_json({
        "db_path": str(config.db_path) if config.db_path else "(not set)",
        "limit": config.limit,
        "format": config.format,
        "sort_by": config.sort_by,
        "debug": config.debug,
    })


@config_app.command("path")
def config_path() -> None:
    """Show path to the configured Photos catalog."""
    config = read_config()
    output_text(str(config.db_path) if config.db_path else "(not set)")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help=f"One of: {', '.join(CONFIG_KEYS)}"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Persist a default to ~/.config/pva/config.json."""
    if key not in CONFIG_KEYS:
        error(f"Unknown config key: {key}. Use one of: {', '.join(CONFIG_KEYS)}")
        raise typer.Exit(1)
    try:
        parsed = getattr(PVAConfig.model_validate({key: value}), key)
    except ValidationError as e:
        error(f"Invalid value for {key}: {e.errors()[0]['msg']}")
        raise typer.Exit(1)

    data = _load_config_file()
    data[key] = str(parsed) if key == "db_path" else parsed
    path = save_config(data)
    progress(f"Saved {key} to {path}")
