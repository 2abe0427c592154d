"""Timestamp utilities for provdedupe."""

from datetime import UTC, datetime

__all__ = ["get_iso_timestamp", "get_utc_timestamp"]


def get_iso_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with microseconds.

    Used for audit events where ordering within a run matters.
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def get_utc_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with millisecond precision.

    Returns
    -------
    str
        Timestamp such as "2026-10-19T12:34:56.789Z", as stamped into the
        build report.
    """
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
