"""Partition an ordered result set into date buckets."""

from __future__ import annotations

from dataclasses import dataclass, field

from pva.core.constants import GROUP_KEY_FORMATS, UNKNOWN_GROUP
from pva.core.dates import to_calendar
from pva.core.exceptions import InvalidCriteriaError, InvalidDateError
from pva.core.resolution import estimate_size_mb
from pva.db.models import AssetRecord


@dataclass
class Group:
    key: str
    records: list[AssetRecord] = field(default_factory=list)

    @property
    def subtotal_duration(self) -> float:
        return sum(r.duration_sec for r in self.records)

    @property
    def subtotal_size_mb(self) -> float:
        sizes = (estimate_size_mb(r.duration_sec, r.width, r.height) for r in self.records)
        return round(sum(s for s in sizes if s is not None), 1)


def group_key(record: AssetRecord, granularity: str) -> str:
    """Calendar bucket for a record, or "Unknown" when its date is missing or bad."""
    try:
        moment = to_calendar(record.date_created_raw)
    except InvalidDateError:
        return UNKNOWN_GROUP
    if moment is None:
        return UNKNOWN_GROUP
    return moment.strftime(GROUP_KEY_FORMATS[granularity])


def group_records(records: list[AssetRecord], granularity: str) -> list[Group]:
    """Group records by day, month or year.

    Groups come newest first with "Unknown" always last. Records keep their
    input order inside each group.
    """
    if granularity not in GROUP_KEY_FORMATS:
        raise InvalidCriteriaError(f"Unknown group period: {granularity}")

    groups: dict[str, Group] = {}
    for record in records:
        key = group_key(record, granularity)
        groups.setdefault(key, Group(key)).records.append(record)

    dated = sorted((k for k in groups if k != UNKNOWN_GROUP), reverse=True)
    ordered = [groups[k] for k in dated]
    if UNKNOWN_GROUP in groups:
        ordered.append(groups[UNKNOWN_GROUP])
    return ordered
