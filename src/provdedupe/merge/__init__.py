"""Dedup-key grouping and field-level merging of candidate records."""

from provdedupe.merge.field_merge import merge_fields
from provdedupe.merge.models import MergeGroup, MergeResult
from provdedupe.merge.processor import MergeCallback, merge_candidates

__all__ = [
    "MergeCallback",
    "MergeGroup",
    "MergeResult",
    "merge_candidates",
    "merge_fields",
]
