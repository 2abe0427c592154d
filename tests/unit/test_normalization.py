"""Tests for field and record canonicalization."""

from collections.abc import Callable

import pytest

from provdedupe.models import COST_CATEGORIES, CandidateRecord
from provdedupe.normalize import (
    KEY_DELIMITER,
    build_dedup_key,
    canonicalize,
    extract_state_from_address,
    is_approved,
    normalize_cost_type,
    normalize_state,
)

# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("tx", "TX"),
        (" TX ", "TX"),
        ("Texas", "TE"),
        ("California", "CA"),
        ("", ""),
        (None, ""),
        ("   ", ""),
        ("t", "T"),
        ("T\nX", "T\n"),
    ],
)
def test_normalize_state(raw: str | None, expected: str) -> None:
    """States are upper-cased and cut to two characters."""
    assert normalize_state(raw) == expected


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["tx", "Texas", "n", "", "ny "])
def test_normalize_state_idempotent(raw: str) -> None:
    once = normalize_state(raw)
    assert normalize_state(once) == once


# ---------------------------------------------------------------------------
# Cost type
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("free", "Free"),
        ("FREE", "Free"),
        ("low-cost", "Low cost"),
        ("Low Cost", "Low cost"),
        ("lowcost", "Low cost"),
        ("scholarships", "Scholarship"),
        ("Fees", "Paid"),
        ("fee", "Paid"),
        ("mixed", "Mixed"),
        ("", "Unknown"),
        (None, "Unknown"),
        ("sliding scale", "Unknown"),
        ("unknown", "Unknown"),
    ],
)
def test_normalize_cost_type(raw: str | None, expected: str) -> None:
    assert normalize_cost_type(raw) == expected


@pytest.mark.unit
@pytest.mark.parametrize("category", COST_CATEGORIES)
def test_cost_categories_are_fixed_points(category: str) -> None:
    """Canonical labels map to themselves."""
    assert normalize_cost_type(category) == category


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["low-cost", "whatever", "", "Paid", "SCHOLARSHIP"])
def test_cost_type_always_in_vocabulary(raw: str) -> None:
    assert normalize_cost_type(raw) in COST_CATEGORIES


# ---------------------------------------------------------------------------
# Address fallback
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("123 Main St, Austin, TX 78701", "TX"),
        ("55 Lake St\nSuite 2, Dallas, TX  75201", "TX"),
        ("1 Ocean Ave, Alameda, CA 94501-1234", "CA"),
        ("123 Main St, Austin, tx 78701", ""),
        ("PO Box 9", ""),
        ("TX78701", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_extract_state_from_address(address: str | None, expected: str) -> None:
    """Only an upper-case two-letter code followed by whitespace and five digits matches."""
    assert extract_state_from_address(address) == expected


# ---------------------------------------------------------------------------
# Record canonicalization
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_canonicalize_applies_all_rules(make_candidate: Callable[..., CandidateRecord]) -> None:
    record = make_candidate(
        state="",
        cost_type="low-cost",
        website="",
        source_url="https://maps.example/1",
        address="123 Main St, Austin, TX 78701",
    )

    result = canonicalize(record)

    assert result is record
    assert record.state == "TX"
    assert record.cost_type == "Low cost"
    assert record.website == "https://maps.example/1"


@pytest.mark.unit
def test_canonicalize_keeps_existing_website(
    make_candidate: Callable[..., CandidateRecord],
) -> None:
    record = make_candidate(website="https://pool.example", source_url="https://maps.example/1")

    canonicalize(record)

    assert record.website == "https://pool.example"


@pytest.mark.unit
def test_canonicalize_prefers_state_column_over_address(
    make_candidate: Callable[..., CandidateRecord],
) -> None:
    record = make_candidate(state="ok", address="1 Main St, Tulsa, TX 74103")

    canonicalize(record)

    assert record.state == "OK"


@pytest.mark.unit
def test_canonicalize_single_letter_state_skips_address(
    make_candidate: Callable[..., CandidateRecord],
) -> None:
    """A one-letter state is kept; the address is only used for an empty state."""
    record = make_candidate(state="t", address="1 Main St, Austin, TX 78701")

    canonicalize(record)

    assert record.state == "T"


@pytest.mark.unit
def test_canonicalize_is_idempotent(make_candidate: Callable[..., CandidateRecord]) -> None:
    record = make_candidate(
        state="california",
        cost_type="FEES",
        source_url="https://maps.example/9",
        address="9 Elm, Reno, NV 89501",
    )
    canonicalize(record)
    snapshot = record.to_dict()

    canonicalize(record)

    assert record.to_dict() == snapshot


# ---------------------------------------------------------------------------
# Approval filter
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("Approved", True),
        ("approved", True),
        ("APPROVED", True),
        (" approved ", True),
        ("Pending", False),
        ("Rejected", False),
        ("not approved", False),
        ("", False),
    ],
)
def test_is_approved(
    make_candidate: Callable[..., CandidateRecord], status: str, expected: bool
) -> None:
    assert is_approved(make_candidate(status=status)) is expected


# ---------------------------------------------------------------------------
# Dedup key
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_dedup_key_case_insensitive(make_candidate: Callable[..., CandidateRecord]) -> None:
    a = make_candidate(website="HTTPS://Pool.example", city="Austin", state="TX")
    b = make_candidate(website="https://pool.example", city="AUSTIN", state="TX")

    assert build_dedup_key(a) == build_dedup_key(b)


@pytest.mark.unit
def test_dedup_key_ignores_non_key_fields(make_candidate: Callable[..., CandidateRecord]) -> None:
    a = make_candidate(provider_name="Pool A", notes="x", website="w", phone="1")
    b = make_candidate(provider_name="Pool B", notes="y", website="w", phone="1")

    assert build_dedup_key(a) == build_dedup_key(b)


@pytest.mark.unit
def test_dedup_key_distinguishes_fields(make_candidate: Callable[..., CandidateRecord]) -> None:
    """Values cannot bleed across field boundaries."""
    a = make_candidate(website="ab", phone="c")
    b = make_candidate(website="a", phone="bc")

    assert build_dedup_key(a) != build_dedup_key(b)
    assert build_dedup_key(a).count(KEY_DELIMITER) == 5
