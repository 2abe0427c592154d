"""Ordering, indices, schema checks and atomic writing of output artifacts."""

from provdedupe.output.indexes import (
    build_id_index,
    build_state_index,
    sort_key,
    sort_records,
)
from provdedupe.output.schema import check_consistency, validate_artifact
from provdedupe.output.writer import WrittenArtifact, dumps_json, write_artifacts, write_json

__all__ = [
    "WrittenArtifact",
    "build_id_index",
    "build_state_index",
    "check_consistency",
    "dumps_json",
    "sort_key",
    "sort_records",
    "validate_artifact",
    "write_artifacts",
    "write_json",
]
