"""Catalog layout, defaults and fixed lookup tables."""

from datetime import datetime, timezone
from pathlib import Path

# Apple Core Data stores timestamps as seconds since this instant
REFERENCE_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc)

# Paths
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "pva"
CONFIG_FILE_PATH = DEFAULT_CONFIG_DIR / "config.json"

# Report defaults
DEFAULT_LIMIT = 100
DEFAULT_FORMAT = "table"
DEFAULT_SORT_BY = "duration"
DEFAULT_GUIDE_LIMIT = 100

OUTPUT_FORMATS = ("table", "csv", "json")
SORT_FIELDS = ("duration", "date", "size", "filename")
GROUP_PERIODS = ("day", "month", "year")

# Catalog tables (ZKIND: 0 = photo, 1 = video)
ASSET_TABLE = "ZASSET"
MASTER_TABLE = "ZCLOUDMASTER"
KIND_PHOTO = 0
KIND_VIDEO = 1

# Pixel-count buckets, inclusive on both ends. None = unbounded.
RESOLUTION_BOUNDS: dict[str, tuple[int, int | None]] = {
    "SD": (1, 500_000),
    "HD": (500_001, 1_500_000),
    "Full HD": (1_500_001, 3_000_000),
    "4K": (3_000_001, 9_000_000),
    "8K+": (9_000_001, None),
}

# Estimated encoding bitrate per bucket, megabits per second
BITRATE_MBPS: dict[str, int] = {
    "SD": 2,
    "HD": 5,
    "Full HD": 8,
    "4K": 25,
    "8K+": 50,
}

# Command-line resolution names -> bucket label
RESOLUTION_ALIASES: dict[str, str] = {
    "sd": "SD",
    "hd": "HD",
    "fullhd": "Full HD",
    "fhd": "Full HD",
    "4k": "4K",
    "8k": "8K+",
}

# Duration bands used by the table summary, in seconds
SHORT_MAX_SEC = 60
LONG_MIN_SEC = 600

# Date renderings
DATE_FORMAT_FULL = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT_SHORT = "%Y-%m-%d"
GROUP_KEY_FORMATS = {
    "day": "%Y-%m-%d",
    "month": "%Y-%m",
    "year": "%Y",
}
UNKNOWN_GROUP = "Unknown"

# Schema report: candidate media-type columns, in lookup order
MEDIA_TYPE_COLUMNS = ("ZKIND", "ZMEDIATYPE", "KIND", "MEDIATYPE")
VIDEO_COLUMN_KEYWORDS = (
    "DURATION", "WIDTH", "HEIGHT", "FILENAME", "DATE", "KIND", "TYPE", "MEDIA", "VIDEO",
)
SCHEMA_SAMPLE_ROWS = 5
SCHEMA_SAMPLE_COLUMNS = 10
