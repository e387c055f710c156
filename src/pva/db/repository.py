"""Read access to the Photos catalog: video listings, lookups, statistics and schema."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from pydantic import ValidationError

from pva.core.constants import (
    ASSET_TABLE,
    KIND_PHOTO,
    KIND_VIDEO,
    MASTER_TABLE,
    MEDIA_TYPE_COLUMNS,
    SCHEMA_SAMPLE_ROWS,
)
from pva.core.exceptions import AssetNotFoundError, QueryError
from pva.db.connection import get_connection
from pva.db.models import AssetRecord, FilterCriteria, LibraryStats
from pva.db.query import Query, QueryBuilder

# (field, SQL) pairs for LibraryStats; each runs on its own so one
# failing aggregate does not hide the others
STATS_QUERIES: list[tuple[str, str]] = [
    ("total_videos", f"SELECT COUNT(*) FROM {ASSET_TABLE} WHERE ZKIND = {KIND_VIDEO}"),
    (
        "videos_with_duration",
        f"SELECT COUNT(*) FROM {ASSET_TABLE} WHERE ZKIND = {KIND_VIDEO} AND ZDURATION > 0",
    ),
    ("total_photos", f"SELECT COUNT(*) FROM {ASSET_TABLE} WHERE ZKIND = {KIND_PHOTO}"),
    (
        "total_duration_sec",
        f"SELECT COALESCE(SUM(ZDURATION), 0) FROM {ASSET_TABLE} "
        f"WHERE ZKIND = {KIND_VIDEO} AND ZDURATION > 0",
    ),
    (
        "favorite_videos",
        f"SELECT COUNT(*) FROM {ASSET_TABLE} WHERE ZKIND = {KIND_VIDEO} AND ZFAVORITE = 1",
    ),
    (
        "hidden_videos",
        f"SELECT COUNT(*) FROM {ASSET_TABLE} WHERE ZKIND = {KIND_VIDEO} AND ZHIDDEN = 1",
    ),
    (
        "trashed_videos",
        f"SELECT COUNT(*) FROM {ASSET_TABLE} WHERE ZKIND = {KIND_VIDEO} AND ZTRASHEDSTATE = 1",
    ),
]


class Repository:
    """Owns the single catalog connection for one invocation."""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.conn = get_connection(db_path)
        self.builder = QueryBuilder(has_original_filenames=self._has_original_filenames())

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> Repository:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _table_columns(self, table: str) -> set[str]:
        rows = self.conn.execute(
            "SELECT name FROM pragma_table_info(?)", (table,)
        ).fetchall()
        return {r["name"] for r in rows}

    def _has_original_filenames(self) -> bool:
        try:
            return (
                "ZORIGINALFILENAME" in self._table_columns(MASTER_TABLE)
                and "ZMASTER" in self._table_columns(ASSET_TABLE)
            )
        except sqlite3.Error:
            return False

    def execute(self, query: Query) -> list[sqlite3.Row]:
        try:
            return self.conn.execute(query.sql, query.params).fetchall()
        except sqlite3.Error as e:
            raise QueryError(f"Error executing query: {e}", query.sql) from e

    # --- Videos ---

    def fetch(self, query: Query) -> list[AssetRecord]:
        rows = self.execute(query)
        try:
            return [AssetRecord.from_row(r) for r in rows]
        except ValidationError as e:
            raise QueryError(f"Unreadable catalog row: {e}", query.sql) from e

    def find_videos(self, criteria: FilterCriteria) -> list[AssetRecord]:
        """Run the filtered video listing. Raises QueryError on failure."""
        return self.fetch(self.builder.build(criteria))

    def get_video(self, asset_id: int) -> AssetRecord:
        records = self.fetch(self.builder.by_id(asset_id))
        if not records:
            raise AssetNotFoundError(
                f"Video with Asset ID {asset_id} not found or is not a video."
            )
        return records[0]

    # --- Statistics ---

    def get_stats(self) -> tuple[LibraryStats, list[str]]:
        """Collect library-wide aggregates.

        Returns the stats plus one warning per aggregate that failed; a
        failed aggregate is left as None.
        """
        values: dict[str, float | int] = {}
        warnings: list[str] = []
        for name, sql in STATS_QUERIES:
            try:
                row = self.conn.execute(sql).fetchone()
            except sqlite3.Error as e:
                warnings.append(f"Could not compute {name}: {e}")
                continue
            values[name] = row[0] if row and row[0] is not None else 0
        return LibraryStats(**values), warnings

    # --- Schema ---

    def list_tables(self) -> list[str]:
        rows = self.execute(
            Query("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
        )
        return [r["name"] for r in rows]

    def table_info(self, table: str) -> list[dict]:
        """Column name, declared type, NOT NULL flag and default for ``table``."""
        rows = self.execute(
            Query('SELECT name, type, "notnull", dflt_value FROM pragma_table_info(?)', (table,))
        )
        return [dict(r) for r in rows]

    def media_type_counts(self) -> tuple[str, list[tuple[int | None, int]]] | None:
        """Asset counts per media type, using the first type column the catalog has."""
        columns = self._table_columns(ASSET_TABLE)
        column = next((c for c in MEDIA_TYPE_COLUMNS if c in columns), None)
        if column is None:
            return None
        # column comes from MEDIA_TYPE_COLUMNS, never from input
        sql = (
            f"SELECT {column} AS kind, COUNT(*) AS count FROM {ASSET_TABLE} "
            f"GROUP BY {column} ORDER BY {column}"
        )
        rows = self.execute(Query(sql))
        return column, [(r["kind"], r["count"]) for r in rows]

    def sample_rows(self, limit: int = SCHEMA_SAMPLE_ROWS) -> list[dict]:
        """A few raw ZASSET rows, videos preferred, any asset otherwise."""
        rows = []
        if "ZKIND" in self._table_columns(ASSET_TABLE):
            rows = self.execute(
                Query(f"SELECT * FROM {ASSET_TABLE} WHERE ZKIND = ? LIMIT ?", (KIND_VIDEO, limit))
            )
        if not rows:
            rows = self.execute(Query(f"SELECT * FROM {ASSET_TABLE} LIMIT ?", (limit,)))
        return [dict(r) for r in rows]
