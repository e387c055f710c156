"""Exception hierarchy for pva.

Each error kind states whether it ends the run (``fatal``) or is recovered
where it is raised and rendered as a placeholder.
"""


class PVAError(Exception):
    """Base exception for all pva errors."""

    fatal = True


class CatalogConnectionError(PVAError):
    """Photos library catalog missing, unreadable, or not a valid catalog."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class QueryError(PVAError):
    """A query against the catalog failed."""

    fatal = False

    def __init__(self, message: str, sql: str | None = None):
        self.sql = sql
        super().__init__(message)


class InvalidDateError(PVAError):
    """A raw catalog timestamp could not be converted to a calendar date."""

    fatal = False

    def __init__(self, message: str, raw_offset: float | None = None):
        self.raw_offset = raw_offset
        super().__init__(message)


class InvalidCriteriaError(PVAError):
    """Filter criteria cannot be turned into a query."""


class OutputWriteError(PVAError):
    """Report destination could not be written."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class AssetNotFoundError(PVAError):
    """Asset ID not found in the catalog, or not a video."""
