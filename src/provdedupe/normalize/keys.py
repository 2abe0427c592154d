"""Deduplication key for candidate records."""

from provdedupe.models import CandidateRecord

# ASCII unit separator; never present in spreadsheet text.
KEY_DELIMITER = "\x1f"

DEDUP_KEY_FIELDS: tuple[str, ...] = ("website", "phone", "address", "city", "state", "zip")


def build_dedup_key(record: CandidateRecord) -> str:
    """Build the composite grouping key of a canonicalized record.

    The key is the lower-cased website, phone, address, city, state and zip,
    joined by ``KEY_DELIMITER``. It is only used for grouping and is never
    written out.
    """
    return KEY_DELIMITER.join(getattr(record, name).lower() for name in DEDUP_KEY_FIELDS)
