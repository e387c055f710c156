"""Read-only SQLite connection to a Photos library catalog."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from pva.core.constants import ASSET_TABLE
from pva.core.exceptions import CatalogConnectionError


def get_connection(db_path: Path) -> sqlite3.Connection:
    """Open the catalog read-only and check that it holds an asset table."""
    path = Path(db_path).expanduser()
    if not path.is_file():
        raise CatalogConnectionError(f"Database file not found: {path}", str(path))

    uri = path.resolve().as_uri() + "?mode=ro"
    try:
        conn = sqlite3.connect(uri, uri=True)
    except sqlite3.Error as e:
        raise CatalogConnectionError(f"Cannot open database {path}: {e}", str(path)) from e

    conn.row_factory = sqlite3.Row
    try:
        row = conn.execute(
            "SELECT COUNT(*) FROM sqlite_master WHERE type = 'table' AND name = ?",
            (ASSET_TABLE,),
        ).fetchone()
    except sqlite3.Error as e:
        conn.close()
        raise CatalogConnectionError(f"Not a valid database: {path} ({e})", str(path)) from e

    if not row[0]:
        conn.close()
        raise CatalogConnectionError(
            f"Not a Photos library catalog (no {ASSET_TABLE} table): {path}", str(path)
        )
    return conn
