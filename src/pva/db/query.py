"""Compose filter criteria into a parameter-bound catalog query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pva.core.constants import ASSET_TABLE, KIND_VIDEO, MASTER_TABLE
from pva.core.dates import to_raw_offset
from pva.core.exceptions import InvalidCriteriaError
from pva.db.models import FilterCriteria

PIXELS = "(a.ZWIDTH * a.ZHEIGHT)"


@dataclass(frozen=True)
class Query:
    sql: str
    params: tuple[Any, ...] = field(default_factory=tuple)


class QueryBuilder:
    """Build the video listing query for a catalog.

    ``has_original_filenames`` says whether the catalog carries the
    ZCLOUDMASTER table; when it does, the pre-import filename is preferred
    over the internal one for display, search and sorting.
    """

    def __init__(self, has_original_filenames: bool = True):
        self.has_original_filenames = has_original_filenames

    @property
    def filename_expr(self) -> str:
        if self.has_original_filenames:
            return "COALESCE(c.ZORIGINALFILENAME, a.ZFILENAME)"
        return "a.ZFILENAME"

    def select_clause(self) -> str:
        sql = f"""SELECT a.Z_PK AS asset_id,
                      a.ZDURATION AS duration,
                      {self.filename_expr} AS filename,
                      a.ZDATECREATED AS date_created,
                      a.ZWIDTH AS width,
                      a.ZHEIGHT AS height,
                      a.ZFAVORITE AS favorite,
                      a.ZHIDDEN AS hidden,
                      a.ZTRASHEDSTATE AS trashed
               FROM {ASSET_TABLE} a"""
        if self.has_original_filenames:
            sql += f"\n               LEFT JOIN {MASTER_TABLE} c ON a.ZMASTER = c.Z_PK"
        return sql

    def where_clause(self, criteria: FilterCriteria) -> tuple[list[str], list[Any]]:
        """Return the ANDed predicates and their bound parameters."""
        clauses = ["a.ZKIND = ?"]
        params: list[Any] = [KIND_VIDEO]

        # Duration: zero is the floor when the caller asks for 0 explicitly
        if criteria.min_duration is None:
            clauses.append("a.ZDURATION > 0")
        else:
            clauses.append("a.ZDURATION >= ?")
            params.append(criteria.min_duration)
        if criteria.max_duration is not None:
            clauses.append("a.ZDURATION <= ?")
            params.append(criteria.max_duration)

        date_from = to_raw_offset(criteria.date_from) if criteria.date_from else None
        date_to = to_raw_offset(criteria.date_to) if criteria.date_to else None
        if date_from is not None and date_to is not None and date_from > date_to:
            raise InvalidCriteriaError("date_from is later than date_to")
        if date_from is not None:
            clauses.append("a.ZDATECREATED >= ?")
            params.append(date_from)
        if date_to is not None:
            clauses.append("a.ZDATECREATED <= ?")
            params.append(date_to)

        if criteria.resolution is not None:
            low, high = criteria.resolution.pixel_range
            clauses.append("a.ZWIDTH > 0 AND a.ZHEIGHT > 0")
            clauses.append(f"{PIXELS} >= ?")
            params.append(low)
            if high is not None:
                clauses.append(f"{PIXELS} <= ?")
                params.append(high)

        # instr() is a case-sensitive literal match, so % and _ in the term
        # carry no wildcard meaning
        if criteria.search_term:
            clauses.append(f"instr({self.filename_expr}, ?) > 0")
            params.append(criteria.search_term)

        return clauses, params

    def order_clause(self, sort_by: str | None) -> str:
        key = (sort_by or "").strip().lower()
        if key == "date":
            order = "a.ZDATECREATED DESC"
        elif key == "size":
            order = f"{PIXELS} DESC"
        elif key == "filename":
            order = f"{self.filename_expr} ASC"
        else:
            order = "a.ZDURATION DESC"
        return f"ORDER BY {order}, a.Z_PK ASC"

    def build(self, criteria: FilterCriteria) -> Query:
        clauses, params = self.where_clause(criteria)
        sql = "\n".join([
            self.select_clause(),
            "WHERE " + "\n  AND ".join(clauses),
            self.order_clause(criteria.sort_by),
        ])
        if criteria.limit > 0:
            sql += "\nLIMIT ?"
            params.append(criteria.limit)
        return Query(sql=sql, params=tuple(params))

    def by_id(self, asset_id: int) -> Query:
        """Single video lookup by primary key, ignoring duration filters."""
        sql = "\n".join([
            self.select_clause(),
            "WHERE a.Z_PK = ? AND a.ZKIND = ?",
        ])
        return Query(sql=sql, params=(asset_id, KIND_VIDEO))
