"""Tests for input reading, header validation and row projection."""

from collections.abc import Callable
from pathlib import Path

import pytest

from provdedupe.exceptions import InputNotFoundError, MissingColumnsError
from provdedupe.models import REQUIRED_COLUMNS
from provdedupe.parse import project_row, read_source, table_from_text, validate_header
from provdedupe.parse.ingestion import decode_source, detect_encoding, is_blank_row

# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\xef\xbb\xbfprovider_name", "utf-8-sig"),
        ("Café".encode(), "utf-8"),
        ("Café".encode("latin-1"), "latin-1"),
        (b"", "utf-8"),
    ],
)
def test_detect_encoding(data: bytes, expected: str) -> None:
    assert detect_encoding(data) == expected


@pytest.mark.unit
def test_decode_source_strips_bom() -> None:
    text, encoding = decode_source(b"\xef\xbb\xbfa,b\n")

    assert text == "a,b\n"
    assert encoding == "utf-8-sig"


# ---------------------------------------------------------------------------
# Table splitting
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_table_from_text_trims_header_and_drops_blank_rows() -> None:
    text = " provider_name , city\nPool,Austin\n , \n\nSpa,Dallas\n"

    table = table_from_text(text)

    assert table.header == ["provider_name", "city"]
    assert table.rows == [(1, ["Pool", "Austin"]), (4, ["Spa", "Dallas"])]
    assert table.blank_rows == 3
    assert table.source_name == "<text>"


@pytest.mark.unit
def test_column_index_last_duplicate_wins() -> None:
    table = table_from_text("city,state,city\n")

    assert table.column_index == {"city": 2, "state": 1}


@pytest.mark.unit
def test_is_blank_row() -> None:
    assert is_blank_row([""])
    assert is_blank_row([" ", "\t", ""])
    assert not is_blank_row(["", "x"])


# ---------------------------------------------------------------------------
# read_source
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_read_source_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.csv"

    with pytest.raises(InputNotFoundError) as exc_info:
        read_source(missing)

    assert exc_info.value.path == str(missing)
    assert "Missing input file" in str(exc_info.value)


@pytest.mark.unit
def test_read_source_directory(tmp_path: Path) -> None:
    with pytest.raises(InputNotFoundError):
        read_source(tmp_path)


@pytest.mark.unit
def test_read_source_records_provenance(tmp_path: Path) -> None:
    path = tmp_path / "in.csv"
    path.write_bytes("provider_name\nCafé Pool\n".encode("latin-1"))

    table = read_source(path)

    assert table.source_name == "in.csv"
    assert table.encoding == "latin-1"
    assert table.size_bytes == path.stat().st_size
    assert table.sha256.startswith("sha256:")
    assert table.rows == [(1, ["Café Pool"])]


@pytest.mark.unit
def test_read_source_sample(sample_csv: Path) -> None:
    table = read_source(sample_csv)

    assert table.header == list(REQUIRED_COLUMNS)
    assert len(table.rows) == 8
    assert table.blank_rows == 2
    # Embedded newline inside a quoted address stays in one field
    aqua = dict(table.rows)[3]
    assert aqua[0] == "Aqua Kids"
    assert aqua[1] == 'Parent & "Tot"'
    assert aqua[5] == "55 Lake St\nSuite 2, Dallas, TX 75201"


# ---------------------------------------------------------------------------
# Header validation
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_header_accepts_extra_and_reordered_columns() -> None:
    header = ["extra", *reversed(REQUIRED_COLUMNS)]

    validate_header(header)


@pytest.mark.unit
def test_validate_header_names_every_missing_column() -> None:
    header = [c for c in REQUIRED_COLUMNS if c not in {"status", "zip"}]

    with pytest.raises(MissingColumnsError) as exc_info:
        validate_header(header)

    assert exc_info.value.missing == ["zip", "status"]
    assert str(exc_info.value) == "Missing columns: zip, status"


@pytest.mark.unit
def test_validate_header_is_case_sensitive() -> None:
    header = [c.upper() if c == "city" else c for c in REQUIRED_COLUMNS]

    with pytest.raises(MissingColumnsError, match="city"):
        validate_header(header)


# ---------------------------------------------------------------------------
# Row projection
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_project_row_by_name_and_trimmed() -> None:
    column_index = {"city": 0, "provider_name": 1, "status": 2}

    record = project_row(["  Austin ", " Pool", "Approved  "], column_index, source_row=7)

    assert record.provider_name == "Pool"
    assert record.city == "Austin"
    assert record.status == "Approved"
    assert record.email == ""
    assert record.source_row == 7


@pytest.mark.unit
def test_project_row_short_row_defaults_to_empty() -> None:
    column_index = {name: i for i, name in enumerate(REQUIRED_COLUMNS)}

    record = project_row(["Pool", "Lessons"], column_index)

    assert record.provider_name == "Pool"
    assert record.program_name == "Lessons"
    assert record.status == ""


@pytest.mark.unit
def test_project_row_ignores_extra_cells(make_table_text: Callable[..., str]) -> None:
    text = make_table_text({"provider_name": "Pool"}, header=["provider_name", "extra"])
    table = table_from_text(text + "Spa,x,overflow\n")

    records = [project_row(row, table.column_index, n) for n, row in table.rows]

    assert [r.provider_name for r in records] == ["Pool", "Spa"]
