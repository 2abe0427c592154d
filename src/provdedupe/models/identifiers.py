"""Content-derived provider identifiers.

An identifier depends only on the field values of a merged record, never on
row position, so re-running over unchanged input reproduces every id.
"""

import re

from provdedupe.models.records import CandidateRecord
from provdedupe.utils import short_sha1

HASH_LENGTH = 12
FIELD_DELIMITER = "|"

# Fields hashed into the identifier, in order.
HASH_FIELDS: tuple[str, ...] = (
    "provider_name",
    "city",
    "state",
    "website",
    "phone",
    "address",
    "zip",
)

# Stands in for an empty provider name in the slug.
NAME_PLACEHOLDER = "provider"

_URL_PREFIX_RE = re.compile(r"https?://(www\.)?")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_PROVIDER_ID_RE = re.compile(rf"(?:[a-z0-9]+(?:-[a-z0-9]+)*-)?[0-9a-f]{{{HASH_LENGTH}}}")


def slugify(text: str) -> str:
    """Lower-case ``text`` and collapse it to hyphen-separated alphanumerics.

    Any ``http(s)://`` or ``http(s)://www.`` prefix is removed first, so a URL
    pasted into a name field does not leak its scheme into the slug.

    Examples
    --------
    >>> slugify("Riverside Y-Austin-TX")
    'riverside-y-austin-tx'
    >>> slugify("https://www.swim.example")
    'swim-example'
    """
    lowered = (text or "").lower().strip()
    lowered = _URL_PREFIX_RE.sub("", lowered)
    lowered = _NON_ALNUM_RE.sub("-", lowered)
    return lowered.strip("-")


def content_hash(record: CandidateRecord) -> str:
    """Truncated SHA-1 over the identity fields joined by ``|``."""
    basis = FIELD_DELIMITER.join(getattr(record, name) for name in HASH_FIELDS)
    return short_sha1(basis, HASH_LENGTH)


def compute_provider_id(record: CandidateRecord) -> str:
    """Compute the stable identifier of a merged record.

    Parameters
    ----------
    record : CandidateRecord
        Canonicalized, merged record.

    Returns
    -------
    str
        ``<slug>-<hash>``, where the slug is built from provider name (or
        "provider" when empty), city and state; the bare hash when the slug
        is empty.
    """
    slug = slugify(f"{record.provider_name or NAME_PLACEHOLDER}-{record.city}-{record.state}")
    digest = content_hash(record)
    return f"{slug}-{digest}" if slug else digest


def validate_provider_id(record_id: str) -> bool:
    """Check that an identifier ends with a 12-char lowercase hex hash."""
    return bool(_PROVIDER_ID_RE.fullmatch(record_id))
