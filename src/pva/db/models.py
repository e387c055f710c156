"""Pydantic models for catalog rows, filter criteria and statistics."""

from __future__ import annotations

import sqlite3
from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from pva.core.constants import DEFAULT_LIMIT, DEFAULT_SORT_BY
from pva.core.exceptions import InvalidCriteriaError
from pva.core.resolution import ResolutionBucket


def _number_or(fallback):
    """Coerce catalog values to numbers, replacing unparseable ones with ``fallback``."""

    def coerce(value):
        if value is None or isinstance(value, (int, float)):
            return value
        try:
            return float(value)
        except (TypeError, ValueError):
            return fallback

    return coerce


# NaN makes the date codec raise InvalidDateError, so the row renders "Invalid date"
CatalogTimestamp = Annotated[float | None, BeforeValidator(_number_or(float("nan")))]
CatalogSeconds = Annotated[float, BeforeValidator(_number_or(0.0))]
CatalogPixels = Annotated[int | None, BeforeValidator(_number_or(None))]


class AssetRecord(BaseModel):
    """One video row from ZASSET, read once and never written back."""

    model_config = ConfigDict(frozen=True)

    asset_id: int
    duration_sec: CatalogSeconds
    filename: str | None = None
    date_created_raw: CatalogTimestamp = None
    width: CatalogPixels = None
    height: CatalogPixels = None
    favorite: bool = False
    hidden: bool = False
    trashed: bool = False

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> AssetRecord:
        return cls(
            asset_id=row["asset_id"],
            duration_sec=row["duration"] or 0.0,
            filename=row["filename"],
            date_created_raw=row["date_created"],
            width=row["width"],
            height=row["height"],
            favorite=row["favorite"] == 1,
            hidden=row["hidden"] == 1,
            trashed=row["trashed"] == 1,
        )


class FilterCriteria(BaseModel):
    """Report filters, sort order and grouping for one invocation."""

    model_config = ConfigDict(frozen=True)

    min_duration: float | None = Field(default=None, ge=0)
    max_duration: float | None = Field(default=None, ge=0)
    date_from: datetime | date | None = None
    date_to: datetime | date | None = None
    resolution: ResolutionBucket | None = None
    search_term: str | None = None
    sort_by: str = DEFAULT_SORT_BY
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)
    group_by: Literal["day", "month", "year"] | None = None

    @model_validator(mode="after")
    def _check_ranges(self) -> FilterCriteria:
        if (
            self.min_duration is not None
            and self.max_duration is not None
            and self.min_duration > self.max_duration
        ):
            raise ValueError("min_duration is greater than max_duration")
        if self.resolution is ResolutionBucket.UNKNOWN:
            raise ValueError("cannot filter on the Unknown resolution bucket")
        return self

    @classmethod
    def parse(cls, **values) -> FilterCriteria:
        """Build criteria from external input, raising InvalidCriteriaError."""
        try:
            return cls(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'criteria'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidCriteriaError(f"Invalid filter criteria: {problems}") from e


class LibraryStats(BaseModel):
    """Library-wide aggregates. A field is None when its query failed."""

    total_videos: int | None = None
    videos_with_duration: int | None = None
    total_photos: int | None = None
    total_duration_sec: float | None = None
    favorite_videos: int | None = None
    hidden_videos: int | None = None
    trashed_videos: int | None = None
