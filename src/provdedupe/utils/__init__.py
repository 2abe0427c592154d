"""Common utility functions for provdedupe.

Hashing and timestamp helpers shared by the pipeline and the audit trail.
"""

from provdedupe.utils.hashing import (
    calculate_bytes_sha256,
    calculate_file_sha256,
    format_sha256,
    short_sha1,
)
from provdedupe.utils.timestamps import get_iso_timestamp, get_utc_timestamp

__all__ = [
    "calculate_bytes_sha256",
    "calculate_file_sha256",
    "format_sha256",
    "get_iso_timestamp",
    "get_utc_timestamp",
    "short_sha1",
]
