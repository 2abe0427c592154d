"""Provider record data models for provdedupe.

Two record shapes flow through the pipeline:

- ``CandidateRecord`` is the mutable, per-row projection of the input table
  onto the required columns. It is canonicalized in place and then merged.
- ``CanonicalRecord`` is the immutable output unit, one per dedup group.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any

REQUIRED_COLUMNS: tuple[str, ...] = (
    "provider_name",
    "program_name",
    "provider_type",
    "cost_type",
    "ages",
    "address",
    "city",
    "state",
    "zip",
    "phone",
    "email",
    "website",
    "source_url",
    "notes",
    "status",
)

# Output order of a canonical record, after the identifier.
OUTPUT_FIELDS: tuple[str, ...] = tuple(c for c in REQUIRED_COLUMNS if c != "status")

COST_CATEGORIES: tuple[str, ...] = (
    "Free",
    "Low cost",
    "Scholarship",
    "Paid",
    "Mixed",
    "Unknown",
)

STATE_UNKNOWN_KEY = "NA"


@dataclass
class CandidateRecord:
    """One approved-or-not provider sighting projected from an input row.

    Every required column is a trimmed string, empty when the input had no
    value. ``source_row`` is the 1-based line of the row in the body of the
    table and is not part of the record's content.
    """

    provider_name: str = ""
    program_name: str = ""
    provider_type: str = ""
    cost_type: str = ""
    ages: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    source_url: str = ""
    notes: str = ""
    status: str = ""
    source_row: int = 0

    @classmethod
    def from_mapping(cls, values: dict[str, str], source_row: int = 0) -> "CandidateRecord":
        """Build a candidate from a column-name mapping, ignoring extra keys."""
        return cls(
            **{column: str(values.get(column, "") or "") for column in REQUIRED_COLUMNS},
            source_row=source_row,
        )

    def to_dict(self) -> dict[str, str]:
        """Convert required columns to a dictionary (``source_row`` excluded)."""
        return {column: getattr(self, column) for column in REQUIRED_COLUMNS}


@dataclass(frozen=True)
class CanonicalRecord:
    """Deduplicated provider record as emitted in the output artifacts.

    Attributes
    ----------
    id : str
        Content-derived identifier (``<slug>-<hash>`` or ``<hash>``).
    cost_type : str
        Always one of ``COST_CATEGORIES``.
    state : str
        Normalized state, at most two characters; empty when unknown.

    The remaining attributes mirror the input columns of the same name.
    """

    id: str
    provider_name: str
    program_name: str
    provider_type: str
    cost_type: str
    ages: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    email: str
    website: str
    source_url: str
    notes: str

    @classmethod
    def from_candidate(cls, record_id: str, candidate: CandidateRecord) -> "CanonicalRecord":
        """Project a merged candidate onto the output fields."""
        return cls(id=record_id, **{name: getattr(candidate, name) for name in OUTPUT_FIELDS})

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, keys in output order."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CanonicalRecord":
        """Create a record from a dictionary, defaulting missing fields to ""."""
        return cls(**{f.name: str(data.get(f.name, "") or "") for f in fields(cls)})
