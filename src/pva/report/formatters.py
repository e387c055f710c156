"""Render video listings as a text table, CSV or JSON.

All three renderers derive their per-video values from ``ReportRow`` so a
duration, resolution bucket or size estimate reads the same in every format.

JSON layout (stable, consumed by scripts):

- flat: ``[{rank, duration_seconds, duration_formatted, filename,
  date_created, width, height, resolution_category, estimated_size_mb,
  asset_id, favorite, hidden, trashed}, ...]``
- grouped: ``{group_key: {"summary": {total_videos, total_duration_seconds,
  total_duration_formatted, total_estimated_size_mb}, "videos": [...]}}``

The member list of a group is keyed ``"videos"`` rather than ``"records"``;
scripts consuming grouped exports rely on that name.
"""

from __future__ import annotations

import csv
import io
import json
from collections import Counter

from pydantic import BaseModel

from pva.core.constants import DATE_FORMAT_SHORT, LONG_MIN_SEC, SHORT_MAX_SEC
from pva.core.dates import format_date
from pva.core.resolution import ResolutionBucket, classify, estimate_size_mb
from pva.db.models import AssetRecord, LibraryStats
from pva.report.grouping import Group

TABLE_WIDTH = 140
ROW_FORMAT = "{:<4} {:<12} {:<45} {:<20} {:<12} {:<12} {:<8} {}"
FILENAME_MAX = 43

CSV_HEADER = [
    "Rank", "Duration (seconds)", "Duration (formatted)", "Original Filename",
    "Date Created", "Width", "Height", "Resolution Category",
    "Estimated Size (MB)", "Asset ID", "Favorite", "Hidden", "Trashed",
]
CSV_GROUPED_HEADER = ["Group", *CSV_HEADER]


def format_duration(secs: float | None) -> str:
    """Format seconds as H:MM:SS (hours unpadded)."""
    if secs is None or secs < 0:
        return "N/A"
    total = int(secs)
    h = total // 3600
    m = (total % 3600) // 60
    s = total % 60
    return f"{h}:{m:02d}:{s:02d}"


def duration_band(secs: float | None) -> str:
    """Short (< 1 min), Medium (1-10 min inclusive) or Long (> 10 min)."""
    secs = secs or 0
    if secs < SHORT_MAX_SEC:
        return "Short"
    if secs <= LONG_MIN_SEC:
        return "Medium"
    return "Long"


def format_dimensions(width: int | None, height: int | None) -> str:
    if width and height and width > 0 and height > 0:
        return f"{width}x{height}"
    return "N/A"


def format_flags(record: AssetRecord) -> str:
    """F = favorite, H = hidden, T = trashed."""
    return "".join(
        flag for flag, on in (("F", record.favorite), ("H", record.hidden), ("T", record.trashed))
        if on
    )


def truncate(text: str, width: int = FILENAME_MAX) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


class ReportRow(BaseModel):
    rank: int
    duration_seconds: float
    duration_formatted: str
    filename: str | None
    date_created: str
    width: int | None
    height: int | None
    resolution_category: str
    estimated_size_mb: float | None
    asset_id: int
    favorite: bool
    hidden: bool
    trashed: bool

    @classmethod
    def from_record(cls, record: AssetRecord, rank: int) -> ReportRow:
        return cls(
            rank=rank,
            duration_seconds=record.duration_sec,
            duration_formatted=format_duration(record.duration_sec),
            filename=record.filename,
            date_created=format_date(record.date_created_raw),
            width=record.width,
            height=record.height,
            resolution_category=classify(record.width, record.height).value,
            estimated_size_mb=estimate_size_mb(record.duration_sec, record.width, record.height),
            asset_id=record.asset_id,
            favorite=record.favorite,
            hidden=record.hidden,
            trashed=record.trashed,
        )


def build_rows(records: list[AssetRecord]) -> list[ReportRow]:
    return [ReportRow.from_record(r, i) for i, r in enumerate(records, 1)]


def group_summary(group: Group) -> dict:
    return {
        "total_videos": len(group.records),
        "total_duration_seconds": group.subtotal_duration,
        "total_duration_formatted": format_duration(group.subtotal_duration),
        "total_estimated_size_mb": group.subtotal_size_mb,
    }


# --- Table ---


def _table_header(filename_title: str) -> list[str]:
    return [
        ROW_FORMAT.format(
            "Rank", "Duration", filename_title, "Date Created",
            "Dimensions", "Est. Size", "Flags", "ID",
        ),
        "-" * TABLE_WIDTH,
    ]


def _table_row(row: ReportRow, record: AssetRecord) -> str:
    size = f"~{row.estimated_size_mb} MB" if row.estimated_size_mb is not None else "N/A"
    return ROW_FORMAT.format(
        row.rank,
        row.duration_formatted,
        truncate(row.filename or "N/A"),
        format_date(record.date_created_raw, DATE_FORMAT_SHORT),
        format_dimensions(row.width, row.height),
        size,
        format_flags(record),
        row.asset_id,
    )


def render_summary(records: list[AssetRecord]) -> list[str]:
    total = sum(r.duration_sec for r in records)
    lines = [
        "SUMMARY:",
        f"  Videos analyzed: {len(records)}",
        f"  Total duration: {format_duration(total)}",
    ]
    if not records:
        return lines

    bands = Counter(duration_band(r.duration_sec) for r in records)
    buckets = Counter(classify(r.width, r.height) for r in records)
    lines += [
        f"  Average duration: {format_duration(total / len(records))}",
        "  Duration breakdown:",
        f"    Short (< 1 min): {bands['Short']}",
        f"    Medium (1-10 min): {bands['Medium']}",
        f"    Long (> 10 min): {bands['Long']}",
        "  Resolution breakdown:",
    ]
    lines += [
        f"    {bucket.value}: {buckets[bucket]}" for bucket in ResolutionBucket if buckets[bucket]
    ]
    lines += [
        "  Special flags:",
        f"    Favorites: {sum(r.favorite for r in records)}",
        f"    Hidden: {sum(r.hidden for r in records)}",
        f"    Trashed: {sum(r.trashed for r in records)}",
    ]
    return lines


def render_table(
    records: list[AssetRecord],
    groups: list[Group] | None = None,
    sort_by: str = "duration",
    group_by: str | None = None,
) -> str:
    """Fixed-width table, one block per group when grouped, then a summary."""
    lines = ["", "=" * TABLE_WIDTH]

    if groups is None:
        lines += [f"TOP {len(records)} VIDEOS BY {sort_by.upper()}", "=" * TABLE_WIDTH]
        lines += _table_header("Original Filename")
        for row, record in zip(build_rows(records), records):
            lines.append(_table_row(row, record))
        lines.append("-" * TABLE_WIDTH)
    else:
        lines += [
            f"TOP {len(records)} VIDEOS GROUPED BY {(group_by or '').upper()}",
            "=" * TABLE_WIDTH,
        ]
        for group in groups:
            lines += ["", f"{group.key.upper()} ({len(group.records)} videos)", "-" * TABLE_WIDTH]
            lines += _table_header("Filename")
            for row, record in zip(build_rows(group.records), group.records):
                lines.append(_table_row(row, record))
            size = group.subtotal_size_mb
            size_str = f"~{size} MB" if size > 0 else "N/A"
            lines.append(
                f"    Group total: {format_duration(group.subtotal_duration)}, Size: {size_str}"
            )
        lines += ["", "=" * TABLE_WIDTH]

    lines += render_summary(records)
    return "\n".join(lines) + "\n"


# --- CSV ---


def _csv_values(row: ReportRow) -> list:
    return [
        row.rank,
        row.duration_seconds,
        row.duration_formatted,
        row.filename,
        row.date_created,
        row.width,
        row.height,
        row.resolution_category,
        row.estimated_size_mb,
        row.asset_id,
        "Yes" if row.favorite else "No",
        "Yes" if row.hidden else "No",
        "Yes" if row.trashed else "No",
    ]


def render_csv(records: list[AssetRecord], groups: list[Group] | None = None) -> str:
    """CSV with a header row; grouped output adds a "<key> TOTAL" row per group."""
    buf = io.StringIO()
    writer = csv.writer(buf)

    if groups is None:
        writer.writerow(CSV_HEADER)
        for row in build_rows(records):
            writer.writerow(_csv_values(row))
        return buf.getvalue()

    writer.writerow(CSV_GROUPED_HEADER)
    for group in groups:
        for row in build_rows(group.records):
            writer.writerow([group.key, *_csv_values(row)])
        summary = group_summary(group)
        writer.writerow([
            f"{group.key} TOTAL",
            summary["total_videos"],
            summary["total_duration_seconds"],
            summary["total_duration_formatted"],
            "GROUP SUMMARY",
            "", "", "", "",
            summary["total_estimated_size_mb"],
            "", "", "", "",
        ])
    return buf.getvalue()


# --- JSON ---


def render_json(records: list[AssetRecord], groups: list[Group] | None = None) -> str:
    if groups is None:
        data: list | dict = [row.model_dump() for row in build_rows(records)]
    else:
        data = {
            group.key: {
                "summary": group_summary(group),
                "videos": [row.model_dump() for row in build_rows(group.records)],
            }
            for group in groups
        }
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


# --- Library statistics ---


def _or_na(value: int | float | None) -> str:
    return "N/A" if value is None else str(value)


def render_stats(stats: LibraryStats) -> str:
    lines = [
        "",
        "DATABASE STATISTICS:",
        "=" * 50,
        f"Total photos: {_or_na(stats.total_photos)}",
        f"Total videos: {_or_na(stats.total_videos)}",
        f"Videos with duration data: {_or_na(stats.videos_with_duration)}",
        f"Favorite videos: {_or_na(stats.favorite_videos)}",
        f"Hidden videos: {_or_na(stats.hidden_videos)}",
        f"Trashed videos: {_or_na(stats.trashed_videos)}",
        f"Total video duration: {format_duration(stats.total_duration_sec)}",
    ]
    return "\n".join(lines) + "\n"
