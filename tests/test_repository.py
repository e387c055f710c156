"""Tests for catalog connections, lookups and statistics."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from conftest import FakeAsset, build_catalog
from pva.core.dates import format_date
from pva.core.exceptions import AssetNotFoundError, CatalogConnectionError, QueryError
from pva.core.resolution import ResolutionBucket, classify
from pva.db.models import FilterCriteria
from pva.db.query import Query
from pva.db.repository import Repository
from pva.report.grouping import group_records


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogConnectionError, match="not found"):
        Repository(tmp_path / "nope.sqlite")


def test_not_a_database(tmp_path: Path) -> None:
    bogus = tmp_path / "Photos.sqlite"
    bogus.write_bytes(b"this is not sqlite" * 100)
    with pytest.raises(CatalogConnectionError):
        Repository(bogus)


def test_database_without_asset_table(tmp_path: Path) -> None:
    path = tmp_path / "other.sqlite"
    conn = sqlite3.connect(str(path))
    conn.execute("CREATE TABLE t (x INTEGER)")
    conn.close()
    with pytest.raises(CatalogConnectionError, match="ZASSET"):
        Repository(path)


def test_connection_errors_are_fatal() -> None:
    assert CatalogConnectionError.fatal is True
    assert QueryError.fatal is False


def test_connection_is_read_only(catalog: Path) -> None:
    with Repository(catalog) as repo:
        with pytest.raises(sqlite3.OperationalError):
            repo.conn.execute("DELETE FROM ZASSET")


def test_context_manager_closes(catalog: Path) -> None:
    with Repository(catalog) as repo:
        pass
    with pytest.raises(sqlite3.ProgrammingError):
        repo.conn.execute("SELECT 1")


def test_failed_query_raises_query_error(catalog: Path) -> None:
    with Repository(catalog) as repo:
        with pytest.raises(QueryError) as excinfo:
            repo.execute(Query("SELECT nope FROM ZASSET"))
        assert excinfo.value.sql == "SELECT nope FROM ZASSET"


def test_get_video(catalog: Path) -> None:
    with Repository(catalog) as repo:
        video = repo.get_video(1)
        assert video.filename == "Birthday.MOV"
        assert video.favorite is True
        # zero-length videos can still be looked up
        assert repo.get_video(6).duration_sec == 0


@pytest.mark.parametrize("asset_id", [7, 999])
def test_get_video_rejects_photos_and_unknown_ids(catalog: Path, asset_id: int) -> None:
    with Repository(catalog) as repo:
        with pytest.raises(AssetNotFoundError):
            repo.get_video(asset_id)


def test_records_are_typed(catalog: Path) -> None:
    with Repository(catalog) as repo:
        videos = repo.find_videos(FilterCriteria(limit=0))
    nodims = next(v for v in videos if v.asset_id == 3)
    assert nodims.width is None and nodims.height is None
    assert nodims.date_created_raw is None
    assert nodims.hidden is True and nodims.favorite is False


def test_stats(catalog: Path) -> None:
    with Repository(catalog) as repo:
        stats, problems = repo.get_stats()
    assert problems == []
    assert stats.total_videos == 6
    assert stats.videos_with_duration == 5
    assert stats.total_photos == 2
    assert stats.total_duration_sec == 7221 + 45 + 900 + 400 + 120
    assert stats.favorite_videos == 1
    assert stats.hidden_videos == 1
    assert stats.trashed_videos == 1


def test_stats_skip_failed_aggregates(tmp_path: Path) -> None:
    path = tmp_path / "Photos.sqlite"
    conn = sqlite3.connect(str(path))
    conn.execute("CREATE TABLE ZASSET (Z_PK INTEGER PRIMARY KEY, ZKIND INTEGER, ZDURATION REAL)")
    conn.execute("INSERT INTO ZASSET VALUES (1, 1, 30.0)")
    conn.commit()
    conn.close()

    with Repository(path) as repo:
        stats, problems = repo.get_stats()
    assert stats.total_videos == 1
    assert stats.total_duration_sec == 30.0
    assert stats.favorite_videos is None
    assert stats.hidden_videos is None
    assert stats.trashed_videos is None
    assert len(problems) == 3


def test_stats_on_empty_catalog(tmp_path: Path) -> None:
    path = build_catalog(tmp_path / "empty.sqlite", [])
    with Repository(path) as repo:
        stats, _ = repo.get_stats()
    assert stats.total_videos == 0
    assert stats.total_duration_sec == 0


def test_listing_query_failure_on_incomplete_schema(tmp_path: Path) -> None:
    path = tmp_path / "Photos.sqlite"
    conn = sqlite3.connect(str(path))
    conn.execute("CREATE TABLE ZASSET (Z_PK INTEGER PRIMARY KEY, ZKIND INTEGER, ZDURATION REAL)")
    conn.close()
    with Repository(path) as repo:
        with pytest.raises(QueryError):
            repo.find_videos(FilterCriteria())


def test_original_filename_falls_back_to_internal(tmp_path: Path) -> None:
    path = build_catalog(tmp_path / "Photos.sqlite", [
        FakeAsset(1, filename="A.MOV", original_filename="Holiday.mov"),
        FakeAsset(2, filename="B.MOV"),
    ])
    with Repository(path) as repo:
        names = {v.asset_id: v.filename for v in repo.find_videos(FilterCriteria())}
    assert names == {1: "Holiday.mov", 2: "B.MOV"}


def _corrupt(path: Path, sql: str) -> None:
    conn = sqlite3.connect(str(path))
    conn.execute(sql)
    conn.commit()
    conn.close()


def test_non_numeric_date_renders_invalid_and_groups_unknown(tmp_path: Path) -> None:
    path = build_catalog(tmp_path / "Photos.sqlite", [
        FakeAsset(1, filename="Bad.MOV"),
        FakeAsset(2, filename="Good.MOV", date_created=599702400.0),
    ])
    _corrupt(path, "UPDATE ZASSET SET ZDATECREATED = 'garbage' WHERE Z_PK = 1")

    with Repository(path) as repo:
        videos = repo.find_videos(FilterCriteria(limit=0))

    bad = next(v for v in videos if v.asset_id == 1)
    assert format_date(bad.date_created_raw) == "Invalid date"
    groups = group_records(videos, "day")
    assert [g.key for g in groups] == ["2020-01-03", "Unknown"]
    assert [r.asset_id for r in groups[-1].records] == [1]


def test_non_numeric_dimensions_and_duration_are_tolerated(tmp_path: Path) -> None:
    path = build_catalog(tmp_path / "Photos.sqlite", [FakeAsset(1), FakeAsset(2)])
    _corrupt(path, "UPDATE ZASSET SET ZWIDTH = 'wide', ZHEIGHT = '' WHERE Z_PK = 1")
    _corrupt(path, "UPDATE ZASSET SET ZDURATION = 'long' WHERE Z_PK = 2")

    with Repository(path) as repo:
        first = repo.get_video(1)
        second = repo.get_video(2)

    assert first.width is None and first.height is None
    assert classify(first.width, first.height) is ResolutionBucket.UNKNOWN
    assert second.duration_sec == 0.0


def test_unconvertible_row_raises_query_error(catalog: Path) -> None:
    sql = (
        "SELECT 'abc' AS asset_id, 1.0 AS duration, NULL AS filename, NULL AS date_created, "
        "NULL AS width, NULL AS height, 0 AS favorite, 0 AS hidden, 0 AS trashed"
    )
    with Repository(catalog) as repo:
        with pytest.raises(QueryError) as excinfo:
            repo.fetch(Query(sql))
    assert excinfo.value.sql == sql
