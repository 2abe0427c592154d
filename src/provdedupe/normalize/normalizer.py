"""Record-level canonicalization for candidate records.

``canonicalize`` applies, in order: state normalization, cost category
normalization, website back-fill from the source URL, and state back-fill
from the address. The record is modified in place.
"""

from provdedupe.models import CandidateRecord
from provdedupe.normalize._helpers import APPROVED_STATUS
from provdedupe.normalize.fields import (
    extract_state_from_address,
    normalize_cost_type,
    normalize_state,
)

__all__ = ["canonicalize", "is_approved"]


def is_approved(record: CandidateRecord) -> bool:
    """True when the record's status is "approved", ignoring case."""
    return record.status.strip().lower() == APPROVED_STATUS


def canonicalize(record: CandidateRecord) -> CandidateRecord:
    """Canonicalize a candidate record in place.

    Parameters
    ----------
    record : CandidateRecord
        Trimmed, approved candidate.

    Returns
    -------
    CandidateRecord
        The same object, for chaining.

    Notes
    -----
    Idempotent: a second call leaves the record unchanged.
    """
    record.state = normalize_state(record.state)
    record.cost_type = normalize_cost_type(record.cost_type)

    if not record.website and record.source_url:
        record.website = record.source_url

    if not record.state:
        record.state = extract_state_from_address(record.address)

    return record
