"""Synthetic Photos catalogs for tests."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass
class FakeAsset:
    pk: int
    duration: float | None = 10.0
    filename: str | None = "IMG_0001.MOV"
    date_created: float | None = None
    width: int | None = 1920
    height: int | None = 1080
    kind: int = 1
    favorite: int = 0
    hidden: int = 0
    trashed: int = 0
    original_filename: str | None = None


ASSET_SCHEMA = """
CREATE TABLE ZASSET (
    Z_PK INTEGER PRIMARY KEY,
    ZKIND INTEGER,
    ZDURATION REAL,
    ZFILENAME TEXT,
    ZDATECREATED REAL,
    ZWIDTH INTEGER,
    ZHEIGHT INTEGER,
    ZFAVORITE INTEGER,
    ZHIDDEN INTEGER,
    ZTRASHEDSTATE INTEGER,
    ZMASTER INTEGER
);
"""

MASTER_SCHEMA = """
CREATE TABLE ZCLOUDMASTER (
    Z_PK INTEGER PRIMARY KEY,
    ZORIGINALFILENAME TEXT
);
"""


def build_catalog(path: Path, assets: list[FakeAsset], with_master: bool = True) -> Path:
    conn = sqlite3.connect(str(path))
    conn.executescript(ASSET_SCHEMA + (MASTER_SCHEMA if with_master else ""))
    for a in assets:
        master = None
        if with_master and a.original_filename is not None:
            conn.execute(
                "INSERT INTO ZCLOUDMASTER (Z_PK, ZORIGINALFILENAME) VALUES (?, ?)",
                (a.pk, a.original_filename),
            )
            master = a.pk
        conn.execute(
            """INSERT INTO ZASSET (Z_PK, ZKIND, ZDURATION, ZFILENAME, ZDATECREATED,
               ZWIDTH, ZHEIGHT, ZFAVORITE, ZHIDDEN, ZTRASHEDSTATE, ZMASTER)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                a.pk, a.kind, a.duration, a.filename, a.date_created,
                a.width, a.height, a.favorite, a.hidden, a.trashed, master,
            ),
        )
    conn.commit()
    conn.close()
    return path


# 2020-01-03 00:00:00 UTC
JAN_3_2020 = 599702400.0
DAY = 86400.0


@pytest.fixture()
def sample_assets() -> list[FakeAsset]:
    return [
        FakeAsset(1, duration=7221, filename="long.mov", date_created=JAN_3_2020,
                  width=1920, height=1080, favorite=1, original_filename="Birthday.MOV"),
        FakeAsset(2, duration=45, filename="short.mov", date_created=JAN_3_2020 + 40 * DAY,
                  width=640, height=480),
        FakeAsset(3, duration=900, filename="nodims.mov", date_created=None,
                  width=None, height=None, hidden=1),
        FakeAsset(4, duration=400, filename="uhd_clip.mov", date_created=JAN_3_2020 + 400 * DAY,
                  width=3840, height=2160, trashed=1),
        FakeAsset(5, duration=120, filename="uhd_short.mov", date_created=JAN_3_2020 + 2 * DAY,
                  width=3840, height=2160),
        FakeAsset(6, duration=0, filename="broken.mov", date_created=JAN_3_2020),
        FakeAsset(7, duration=None, filename="IMG_0007.JPG", kind=0),
        FakeAsset(8, duration=None, filename="IMG_0008.HEIC", kind=0),
    ]


@pytest.fixture()
def catalog(tmp_path: Path, sample_assets: list[FakeAsset]) -> Path:
    return build_catalog(tmp_path / "Photos.sqlite", sample_assets)
