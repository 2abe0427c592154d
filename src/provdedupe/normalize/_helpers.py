"""Vocabularies and compiled patterns for field canonicalization."""

import re

from provdedupe.models import COST_CATEGORIES

# Two capital letters followed by whitespace and a five-digit postal code,
# e.g. "... Austin, TX 78701". Matched against the untouched address text.
STATE_ZIP_RE = re.compile(r"\b([A-Z]{2})\s+[0-9]{5}")

APPROVED_STATUS = "approved"

# Lower-cased spellings accepted for each cost category.
COST_SYNONYMS: dict[str, str] = {
    "free": "Free",
    "low cost": "Low cost",
    "low-cost": "Low cost",
    "lowcost": "Low cost",
    "scholarship": "Scholarship",
    "scholarships": "Scholarship",
    "paid": "Paid",
    "fee": "Paid",
    "fees": "Paid",
    "mixed": "Mixed",
}

COST_CATEGORY_SET = frozenset(COST_CATEGORIES)
COST_FALLBACK = "Unknown"
