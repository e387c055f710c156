"""Plain-text overview of a catalog's tables and ZASSET layout.

Used to check that a Photos library has the columns the video report
reads, and to look around when a macOS release changes the schema.
"""

from __future__ import annotations

from pva.core.constants import (
    ASSET_TABLE,
    KIND_PHOTO,
    KIND_VIDEO,
    SCHEMA_SAMPLE_COLUMNS,
    VIDEO_COLUMN_KEYWORDS,
)

RULE = "=" * 50
SAMPLE_VALUES_WIDTH = 40


def _heading(title: str) -> list[str]:
    return ["", title, RULE]


def guess_column_purpose(name: str) -> str:
    upper = name.upper()
    if "DURATION" in upper:
        return "Video duration in seconds"
    if "WIDTH" in upper:
        return "Video/image width in pixels"
    if "HEIGHT" in upper:
        return "Video/image height in pixels"
    if "FILENAME" in upper:
        return "Original filename"
    if "DATE" in upper and "CREATED" in upper:
        return "Creation date"
    if "KIND" in upper or "MEDIATYPE" in upper:
        return "Media type (0=photo, 1=video)"
    return "Related to media properties"


def video_columns(columns: list[dict]) -> list[dict]:
    return [
        c for c in columns
        if any(keyword in c["name"].upper() for keyword in VIDEO_COLUMN_KEYWORDS)
    ]


def render_tables(tables: list[str]) -> list[str]:
    lines = _heading("All tables in the database:")
    lines += [f"{i}. {name}" for i, name in enumerate(tables, 1)]

    lines += _heading("Asset-related tables:")
    asset_tables = [name for name in tables if "ASSET" in name.upper()]
    if asset_tables:
        lines += [f"{i}. {name}" for i, name in enumerate(asset_tables, 1)]
    else:
        lines.append("No tables with 'ASSET' in name found.")
    return lines


def render_structure(table: str, columns: list[dict]) -> list[str]:
    lines = _heading(f"Table: {table}")
    lines.append(f"{'Column Name':<25} {'Type':<15} {'Not Null':<10} {'Default':<10}")
    lines.append("-" * 65)
    for c in columns:
        default = "NULL" if c["dflt_value"] is None else str(c["dflt_value"])
        not_null = "YES" if c["notnull"] == 1 else "NO"
        lines.append(f"{c['name']:<25} {c['type'] or '':<15} {not_null:<10} {default:<10}")
    lines += ["", f"Total columns: {len(columns)}"]
    return lines


def render_video_columns(table: str, columns: list[dict]) -> list[str]:
    lines = _heading(f"Video-relevant columns in {table}:")
    relevant = video_columns(columns)
    if not relevant:
        lines.append("No obviously video-relevant columns found.")
        return lines
    lines.append(f"{'Column Name':<30} {'Type':<15} Description")
    lines.append("-" * 70)
    for c in relevant:
        lines.append(f"{c['name']:<30} {c['type'] or '':<15} {guess_column_purpose(c['name'])}")
    return lines


def _kind_label(value) -> str:
    if value == KIND_PHOTO:
        return "Photos"
    if value == KIND_VIDEO:
        return "Videos"
    return f"Unknown ({value})"


def render_media_counts(table: str, counts: tuple[str, list[tuple]] | None) -> list[str]:
    lines = _heading(f"Media type counts in {table}:")
    if counts is None:
        lines.append("Could not determine media type counts.")
        return lines
    column, rows = counts
    lines.append(f"Using column: {column}")
    lines += [f"  {_kind_label(value)}: {count}" for value, count in rows]
    return lines


def _sample_values(rows: list[dict], column: str) -> str:
    values = []
    for row in rows:
        value = row.get(column)
        if value is not None and value not in values:
            values.append(value)
    text = ", ".join(str(v) for v in values[:3])
    if len(text) > SAMPLE_VALUES_WIDTH:
        text = text[: SAMPLE_VALUES_WIDTH + 1] + "..."
    return text


def render_samples(table: str, rows: list[dict], limit: int) -> list[str]:
    lines = _heading(f"Sample data from {table} (limit {limit}):")
    if not rows:
        lines.append("No data found in table.")
        return lines
    lines.append(f"{'Column':<20} Sample Values")
    lines.append("-" * 50)
    for column in list(rows[0])[:SCHEMA_SAMPLE_COLUMNS]:
        lines.append(f"{column:<20} {_sample_values(rows, column)}")
    return lines


def render_schema(
    tables: list[str],
    columns: list[dict],
    counts: tuple[str, list[tuple]] | None,
    samples: list[dict],
    sample_limit: int,
    table: str = ASSET_TABLE,
) -> str:
    """Full schema overview: table list, ZASSET layout, media counts and samples."""
    lines = render_tables(tables)
    lines += render_structure(table, columns)
    lines += render_video_columns(table, columns)
    lines += render_media_counts(table, counts)
    lines += render_samples(table, samples, sample_limit)
    return "\n".join(lines) + "\n"
