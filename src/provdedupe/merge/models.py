"""Data models for dedup-key grouping."""

from dataclasses import dataclass, field
from typing import Any

from provdedupe.models import CandidateRecord


@dataclass
class MergeGroup:
    """Candidates sharing one dedup key, folded into a single base record.

    Attributes
    ----------
    key : str
        Dedup key shared by all members.
    base : CandidateRecord
        Copy of the first member, filled in from later members.
    member_rows : list[int]
        Source row numbers of all members, in arrival order.
    field_sources : dict[str, int]
        For each field filled by a later member, the row that supplied it.
    """

    key: str
    base: CandidateRecord
    member_rows: list[int] = field(default_factory=list)
    field_sources: dict[str, int] = field(default_factory=dict)

    @property
    def size(self) -> int:
        """Number of candidates folded into this group."""
        return len(self.member_rows)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for audit payloads."""
        return {
            "member_rows": list(self.member_rows),
            "field_sources": dict(self.field_sources),
        }


@dataclass
class MergeResult:
    """Outcome of grouping candidates by dedup key.

    Attributes
    ----------
    groups : list[MergeGroup]
        Groups in first-seen order of their key.
    merged_duplicates : int
        Candidates folded into an earlier group (group size minus one, summed).
    """

    groups: list[MergeGroup] = field(default_factory=list)
    merged_duplicates: int = 0

    @property
    def max_group_size(self) -> int:
        """Largest number of candidates merged into one record."""
        return max((g.size for g in self.groups), default=0)
