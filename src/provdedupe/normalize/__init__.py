"""Field canonicalization and dedup keys for candidate records."""

from provdedupe.normalize.fields import (
    extract_state_from_address,
    normalize_cost_type,
    normalize_state,
)
from provdedupe.normalize.keys import DEDUP_KEY_FIELDS, KEY_DELIMITER, build_dedup_key
from provdedupe.normalize.normalizer import canonicalize, is_approved

__all__ = [
    "DEDUP_KEY_FIELDS",
    "KEY_DELIMITER",
    "build_dedup_key",
    "canonicalize",
    "extract_state_from_address",
    "is_approved",
    "normalize_cost_type",
    "normalize_state",
]
