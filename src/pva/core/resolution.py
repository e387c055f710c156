"""Resolution buckets and file-size estimation."""

from __future__ import annotations

from enum import Enum

from pva.core.constants import BITRATE_MBPS, RESOLUTION_ALIASES, RESOLUTION_BOUNDS
from pva.core.exceptions import InvalidCriteriaError


class ResolutionBucket(str, Enum):
    SD = "SD"
    HD = "HD"
    FULL_HD = "Full HD"
    UHD_4K = "4K"
    UHD_8K = "8K+"
    UNKNOWN = "Unknown"

    @property
    def pixel_range(self) -> tuple[int, int | None]:
        """Inclusive (low, high) pixel-count bounds; high is None when open."""
        if self is ResolutionBucket.UNKNOWN:
            raise ValueError("Unknown bucket has no pixel range")
        return RESOLUTION_BOUNDS[self.value]

    @property
    def bitrate_mbps(self) -> int | None:
        return BITRATE_MBPS.get(self.value)

    @classmethod
    def from_name(cls, name: str) -> ResolutionBucket:
        """Parse a command-line resolution name (sd, hd, fullhd, fhd, 4k, 8k)."""
        label = RESOLUTION_ALIASES.get(name.strip().lower())
        if label is None:
            choices = ", ".join(RESOLUTION_ALIASES)
            raise InvalidCriteriaError(f"Unknown resolution: {name}. Use one of: {choices}")
        return cls(label)


def classify(width: int | None, height: int | None) -> ResolutionBucket:
    """Bucket a frame size by pixel count."""
    if not width or not height or width <= 0 or height <= 0:
        return ResolutionBucket.UNKNOWN

    pixels = width * height
    for bucket in ResolutionBucket:
        if bucket is ResolutionBucket.UNKNOWN:
            continue
        low, high = bucket.pixel_range
        if pixels >= low and (high is None or pixels <= high):
            return bucket
    return ResolutionBucket.UNKNOWN


def estimate_size_mb(
    duration_sec: float | None, width: int | None, height: int | None
) -> float | None:
    """Rough file size in MB from duration and an assumed bitrate.

    This is an estimate only; the catalog does not record real file sizes.
    """
    if duration_sec is None or width is None or height is None or duration_sec <= 0:
        return None
    bitrate = classify(width, height).bitrate_mbps
    if bitrate is None:
        return None
    return round(duration_sec * bitrate / 8, 1)
