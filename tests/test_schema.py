"""Tests for the catalog schema overview."""

from __future__ import annotations

from pathlib import Path

import pytest

from pva.db.repository import Repository
from pva.report.schema import (
    guess_column_purpose,
    render_media_counts,
    render_samples,
    render_structure,
    video_columns,
)


@pytest.mark.parametrize(
    "name, purpose",
    [
        ("ZDURATION", "Video duration in seconds"),
        ("ZWIDTH", "Video/image width in pixels"),
        ("ZORIGINALFILENAME", "Original filename"),
        ("ZDATECREATED", "Creation date"),
        ("ZKIND", "Media type (0=photo, 1=video)"),
        ("ZKINDSUBTYPE", "Media type (0=photo, 1=video)"),
        ("ZVIDEOCPDURATIONVALUE", "Video duration in seconds"),
        ("ZMODIFICATIONDATE", "Related to media properties"),
    ],
)
def test_guess_column_purpose(name: str, purpose: str) -> None:
    assert guess_column_purpose(name) == purpose


def test_table_info_and_video_columns(catalog: Path) -> None:
    with Repository(catalog) as repo:
        columns = repo.table_info("ZASSET")
    assert columns[0] == {"name": "Z_PK", "type": "INTEGER", "notnull": 0, "dflt_value": None}
    names = [c["name"] for c in video_columns(columns)]
    assert names == ["ZKIND", "ZDURATION", "ZFILENAME", "ZDATECREATED", "ZWIDTH", "ZHEIGHT"]


def test_structure_lines() -> None:
    lines = render_structure("ZASSET", [
        {"name": "ZKIND", "type": "INTEGER", "notnull": 1, "dflt_value": "0"},
        {"name": "ZNOTE", "type": "", "notnull": 0, "dflt_value": None},
    ])
    assert lines[-4].split() == ["ZKIND", "INTEGER", "YES", "0"]
    assert lines[-3].split() == ["ZNOTE", "NO", "NULL"]
    assert lines[-1] == "Total columns: 2"


def test_media_counts_labels_unknown_kinds() -> None:
    lines = render_media_counts("ZASSET", ("ZKIND", [(0, 4), (1, 2), (3, 1)]))
    assert lines[-4:] == ["Using column: ZKIND", "  Photos: 4", "  Videos: 2", "  Unknown (3): 1"]


def test_sample_values_are_unique_and_truncated() -> None:
    rows = [
        {"Z_PK": 1, "ZFILENAME": "A" * 30},
        {"Z_PK": 1, "ZFILENAME": "B" * 30},
        {"Z_PK": 2, "ZFILENAME": None},
    ]
    lines = render_samples("ZASSET", rows, 3)
    assert lines[-2].split() == ["Z_PK", "1,", "2"]
    filenames = lines[-1][21:]
    assert filenames == ("A" * 30 + ", " + "B" * 30)[:41] + "..."
