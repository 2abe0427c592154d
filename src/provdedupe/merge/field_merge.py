"""Field-level merge rule for candidate records."""

from provdedupe.models import REQUIRED_COLUMNS, CandidateRecord


def merge_fields(base: CandidateRecord, incoming: CandidateRecord) -> list[str]:
    """Fill the empty fields of ``base`` from ``incoming``, in place.

    The first non-empty value seen for a field wins; fields are independent,
    so the result is the union of the non-empty fields of both records.
    Where both are non-empty, ``base`` is kept.

    Parameters
    ----------
    base : CandidateRecord
        Record being built up; modified in place.
    incoming : CandidateRecord
        Later record with the same dedup key.

    Returns
    -------
    list[str]
        Names of the fields that were filled, in column order.
    """
    filled: list[str] = []
    for column in REQUIRED_COLUMNS:
        if not getattr(base, column) and getattr(incoming, column):
            setattr(base, column, getattr(incoming, column))
            filled.append(column)
    return filled
