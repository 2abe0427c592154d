"""Deterministic ordering and derived indices over canonical records."""

from collections.abc import Iterable

from provdedupe.models import STATE_UNKNOWN_KEY, CanonicalRecord

__all__ = ["sort_key", "sort_records", "build_state_index", "build_id_index"]


def sort_key(record: CanonicalRecord) -> tuple[str, str, str]:
    """Ordering key: state, then city, then provider name (plain string order)."""
    return (record.state or "", record.city or "", record.provider_name or "")


def sort_records(records: Iterable[CanonicalRecord]) -> list[CanonicalRecord]:
    """Return records sorted by ``sort_key``; empty values sort first.

    The sort is stable, so records equal on all three keys keep their
    first-seen order.
    """
    return sorted(records, key=sort_key)


def build_state_index(records: Iterable[CanonicalRecord]) -> dict[str, list[str]]:
    """Map state code to record ids, in record order.

    Records without a state are filed under ``"NA"``.
    """
    index: dict[str, list[str]] = {}
    for record in records:
        index.setdefault(record.state or STATE_UNKNOWN_KEY, []).append(record.id)
    return index


def build_id_index(records: Iterable[CanonicalRecord]) -> dict[str, CanonicalRecord]:
    """Map record id to record, in record order."""
    return {record.id: record for record in records}
