"""Plain-text hints for finding catalog videos inside the Photos app.

The catalog only knows internal names like ``E7CAFE34-....mov``, which the
Photos search box cannot find. These helpers describe a video by the
attributes Photos does show: date, duration, dimensions and flags.
"""

from __future__ import annotations

from datetime import datetime

from pva.core.dates import to_calendar
from pva.core.exceptions import InvalidDateError
from pva.db.models import AssetRecord
from pva.report.formatters import format_dimensions, format_duration


def _created(record: AssetRecord) -> datetime | None:
    try:
        return to_calendar(record.date_created_raw)
    except InvalidDateError:
        return None


def flag_labels(record: AssetRecord) -> list[str]:
    labels = []
    if record.favorite:
        labels.append("Favorite")
    if record.hidden:
        labels.append("Hidden (check Hidden album)")
    if record.trashed:
        labels.append("In Trash (check Recently Deleted)")
    return labels


def render_locate(record: AssetRecord) -> str:
    """Step-by-step instructions for one video."""
    created = _created(record)
    dimensions = format_dimensions(record.width, record.height)

    lines = [
        "",
        "=" * 80,
        "HOW TO FIND THIS VIDEO IN PHOTOS APP",
        "=" * 80,
        f"Filename: {record.filename or 'N/A'}",
        f"Asset ID: {record.asset_id}",
        "",
    ]
    step = 1
    if created:
        lines += [
            f"STEP {step}: Filter by Date",
            "   - Open Photos app",
            "   - Go to Library -> All Photos",
            f"   - Look for videos on: {created.strftime('%A, %B %d, %Y')}",
            f"   - Approximate time (UTC): {created.strftime('%I:%M %p')}",
            "",
        ]
        step += 1

    lines += [
        f"STEP {step}: Look for Duration",
        f"   - Find videos with duration: {format_duration(record.duration_sec)}",
        "   - Video length shows in bottom-left corner when selected",
        "",
    ]
    step += 1

    if dimensions != "N/A":
        lines += [
            f"STEP {step}: Check Video Resolution",
            "   - Right-click video -> Get Info",
            f"   - Look for dimensions: {dimensions}",
            "",
        ]
        step += 1

    flags = flag_labels(record)
    if flags:
        lines.append(f"STEP {step}: Special Properties")
        lines += [f"   - {flag}" for flag in flags]
        lines.append("")

    lines += [
        "ALTERNATIVE METHODS:",
        "   - Smart Albums -> Videos -> Filter by duration",
        "   - Search by approximate date in search bar",
        "   - Sort Videos album by duration (longest first)",
    ]
    return "\n".join(lines) + "\n"


def render_guide(records: list[AssetRecord], db_path: str, generated_at: datetime) -> str:
    """Search guide covering many videos, one entry each."""
    lines = [
        "PHOTOS APP VIDEO SEARCH GUIDE",
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Database: {db_path}",
        "=" * 80,
        "",
    ]
    for i, record in enumerate(records, 1):
        created = _created(record)
        duration = format_duration(record.duration_sec)
        dimensions = format_dimensions(record.width, record.height)
        flags = [f for f, on in (
            ("Favorite", record.favorite), ("Hidden", record.hidden), ("Trashed", record.trashed)
        ) if on]

        lines += [
            f"VIDEO #{i}",
            f"Internal ID: {record.asset_id}",
            f"Filename: {record.filename or 'N/A'}",
            f"Duration: {duration}",
            "Date Created: "
            + (created.strftime("%A, %B %d, %Y at %I:%M %p") if created else "N/A"),
            f"Dimensions: {dimensions}",
            f"Flags: {', '.join(flags) if flags else 'None'}",
            "Search Tips:",
        ]
        if created:
            lines.append(f"  - Filter Photos by date: {created.strftime('%Y-%m-%d')}")
        lines += [
            f"  - Look for video duration: {duration}",
            f"  - Check dimensions in Get Info: {dimensions}",
            "",
            "-" * 40,
            "",
        ]

    lines += [
        "",
        "GENERAL SEARCH TIPS FOR PHOTOS APP:",
        "1. Use View -> Show in All Photos for chronological view",
        "2. Create Smart Album: Videos with custom duration filters",
        "3. Right-click any video -> Get Info for detailed metadata",
        "4. Use Albums -> Videos -> sort by duration",
        "5. Search by approximate date in the search bar",
    ]
    return "\n".join(lines) + "\n"
