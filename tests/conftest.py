"""Pytest configuration and fixtures for test suite."""

import csv
import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from provdedupe.models import REQUIRED_COLUMNS, CandidateRecord  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_csv() -> Path:
    """Path to the sample provider export."""
    return FIXTURES_DIR / "providers_sample.csv"


@pytest.fixture
def make_candidate() -> Callable[..., CandidateRecord]:
    """Factory for candidate records; unspecified columns are empty."""

    def _factory(source_row: int = 1, **values: str) -> CandidateRecord:
        unknown = set(values) - set(REQUIRED_COLUMNS)
        if unknown:
            raise TypeError(f"Unknown columns: {sorted(unknown)}")
        return CandidateRecord.from_mapping(values, source_row=source_row)

    return _factory


def encode_rows(rows: list[list[str]]) -> str:
    """Encode rows with standard minimal quoting and LF line endings."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


@pytest.fixture
def make_table_text() -> Callable[..., str]:
    """Build table text with the required header from per-row column dicts."""

    def _factory(*rows: dict[str, str], header: list[str] | None = None) -> str:
        columns = list(header) if header is not None else list(REQUIRED_COLUMNS)
        body = [[row.get(column, "") for column in columns] for row in rows]
        return encode_rows([columns, *body])

    return _factory
