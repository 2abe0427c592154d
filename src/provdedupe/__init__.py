"""Normalization and deduplication of crowd-sourced provider listings.

This package provides:
- Data models (provdedupe.models) — record shapes, vocabulary, identifiers
- Parsing (provdedupe.parse) — delimited table scanning and row projection
- Normalization (provdedupe.normalize) — field canonicalization and dedup keys
- Merge (provdedupe.merge) — dedup-key grouping with field-level merge
- Output (provdedupe.output) — ordering, indices, schemas, atomic writing
- Engine (provdedupe.engine) — pipeline orchestration
- Audit (provdedupe.audit) — event log and run manifest
- CLI (provdedupe.cli) — command-line interface
- Public API (provdedupe.api) — high-level convenience functions
"""

__version__ = "0.3.0"
__license__ = "MIT"

from provdedupe.api import (
    build_from_text,
    normalize_file,
    parse_file,
    validate_output_dir,
    write_json,
)
from provdedupe.exceptions import (
    ArtifactValidationError,
    InputNotFoundError,
    MissingColumnsError,
    PipelineError,
)
from provdedupe.models import CandidateRecord, CanonicalRecord

__all__ = [
    "__version__",
    "__license__",
    "ArtifactValidationError",
    "CandidateRecord",
    "CanonicalRecord",
    "InputNotFoundError",
    "MissingColumnsError",
    "PipelineError",
    "build_from_text",
    "normalize_file",
    "parse_file",
    "validate_output_dir",
    "write_json",
]
