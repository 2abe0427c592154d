"""Single-field canonicalization rules.

Each function is pure and idempotent: feeding its output back in returns the
same value.
"""

from provdedupe.normalize._helpers import (
    COST_CATEGORY_SET,
    COST_FALLBACK,
    COST_SYNONYMS,
    STATE_ZIP_RE,
)

__all__ = ["normalize_state", "normalize_cost_type", "extract_state_from_address"]


def normalize_state(value: str | None) -> str:
    """Upper-case a state value and cut it to two characters.

    Longer values are truncated rather than rejected ("Texas" becomes "TE");
    that is a known lossy fallback. Shorter values are kept as they are, so
    a single letter stays a one-character state and the address fallback
    does not replace it.

    Parameters
    ----------
    value : str | None
        Raw state cell.

    Returns
    -------
    str
        At most two upper-case characters.
    """
    return (value or "").strip().upper()[:2]


def normalize_cost_type(value: str | None) -> str:
    """Map free-text cost descriptions onto the fixed cost categories.

    Matching is case-insensitive; the returned label always uses canonical
    casing. Empty or unrecognized text maps to "Unknown".

    Examples
    --------
    >>> normalize_cost_type("low-cost")
    'Low cost'
    >>> normalize_cost_type("FEES")
    'Paid'
    >>> normalize_cost_type("sliding scale")
    'Unknown'
    """
    raw = (value or "").strip()
    if not raw:
        return COST_FALLBACK

    mapped = COST_SYNONYMS.get(raw.lower())
    if mapped is not None:
        return mapped
    if raw in COST_CATEGORY_SET:
        return raw
    return COST_FALLBACK


def extract_state_from_address(address: str | None) -> str:
    """Pull a two-letter state code out of a free-text address.

    Only the ``XX 12345`` shape is recognized; returns "" when absent.
    """
    if not address:
        return ""
    match = STATE_ZIP_RE.search(address)
    return match.group(1) if match else ""
