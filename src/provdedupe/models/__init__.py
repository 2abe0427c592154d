"""Shared data types for provdedupe.

Record shapes, the fixed column vocabulary, the build report and the
content-derived identifier helpers.
"""

from provdedupe.models.identifiers import (
    HASH_FIELDS,
    HASH_LENGTH,
    compute_provider_id,
    content_hash,
    slugify,
    validate_provider_id,
)
from provdedupe.models.records import (
    COST_CATEGORIES,
    OUTPUT_FIELDS,
    REQUIRED_COLUMNS,
    STATE_UNKNOWN_KEY,
    CandidateRecord,
    CanonicalRecord,
)
from provdedupe.models.report import BuildReport

__all__ = [
    # Vocabulary
    "REQUIRED_COLUMNS",
    "OUTPUT_FIELDS",
    "COST_CATEGORIES",
    "STATE_UNKNOWN_KEY",
    # Records
    "CandidateRecord",
    "CanonicalRecord",
    "BuildReport",
    # Identifiers
    "HASH_FIELDS",
    "HASH_LENGTH",
    "compute_provider_id",
    "content_hash",
    "slugify",
    "validate_provider_id",
]
