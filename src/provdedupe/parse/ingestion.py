"""Input table ingestion: decode, scan, validate header, project rows."""

from dataclasses import dataclass, field
from pathlib import Path

from provdedupe.exceptions import InputNotFoundError, MissingColumnsError
from provdedupe.models import REQUIRED_COLUMNS, CandidateRecord
from provdedupe.parse.tabular import parse_delimited
from provdedupe.utils import calculate_bytes_sha256

__all__ = [
    "SourceTable",
    "detect_encoding",
    "decode_source",
    "read_source",
    "table_from_text",
    "validate_header",
    "is_blank_row",
    "project_row",
]


@dataclass(frozen=True)
class SourceTable:
    """Parsed input table with its header split off.

    Attributes
    ----------
    header : list[str]
        Trimmed column names from the first row.
    rows : list[tuple[int, list[str]]]
        Non-blank body rows as ``(row_number, fields)``; row numbers are
        1-based positions in the body, counting blank rows too.
    blank_rows : int
        Body rows discarded because every field was empty after trimming.
    source_name : str
        Input file name, or "<text>" for in-memory input.
    encoding : str
        Encoding used to decode the input bytes.
    sha256 : str
        Digest of the input bytes ("" for in-memory input).
    size_bytes : int
        Input size in bytes.
    """

    header: list[str]
    rows: list[tuple[int, list[str]]] = field(default_factory=list)
    blank_rows: int = 0
    source_name: str = "<text>"
    encoding: str = "utf-8"
    sha256: str = ""
    size_bytes: int = 0

    @property
    def column_index(self) -> dict[str, int]:
        """Map column name to position (last occurrence wins on duplicates)."""
        return {name: i for i, name in enumerate(self.header)}


def detect_encoding(file_bytes: bytes) -> str:
    """Pick a decoding for the input bytes deterministically.

    UTF-8 with BOM first, then plain UTF-8, then Latin-1 (which never fails).
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def decode_source(file_bytes: bytes) -> tuple[str, str]:
    """Decode input bytes, returning ``(text, encoding_used)``."""
    encoding = detect_encoding(file_bytes)
    return file_bytes.decode(encoding), encoding


def is_blank_row(row: list[str]) -> bool:
    """True when every field of ``row`` is empty after trimming."""
    return all(not cell.strip() for cell in row)


def table_from_text(
    text: str,
    *,
    source_name: str = "<text>",
    encoding: str = "utf-8",
    sha256: str = "",
    size_bytes: int = 0,
) -> SourceTable:
    """Scan ``text`` and split it into header and non-blank body rows.

    Parameters
    ----------
    text : str
        Complete table text.
    source_name, encoding, sha256, size_bytes
        Provenance copied onto the returned ``SourceTable``.

    Returns
    -------
    SourceTable
        Table with header and non-blank rows. The header is not validated.
    """
    parsed = parse_delimited(text)
    header = [cell.strip() for cell in parsed[0]] if parsed else []

    rows: list[tuple[int, list[str]]] = []
    blank_rows = 0
    for row_number, row in enumerate(parsed[1:], start=1):
        if is_blank_row(row):
            blank_rows += 1
            continue
        rows.append((row_number, row))

    return SourceTable(
        header=header,
        rows=rows,
        blank_rows=blank_rows,
        source_name=source_name,
        encoding=encoding,
        sha256=sha256,
        size_bytes=size_bytes,
    )


def read_source(path: Path | str) -> SourceTable:
    """Read and scan the input table at ``path``.

    Parameters
    ----------
    path : Path | str
        Location of the staged delimited text.

    Returns
    -------
    SourceTable
        Parsed table with provenance.

    Raises
    ------
    InputNotFoundError
        If the file does not exist or cannot be read.
    """
    input_path = Path(path)
    if not input_path.is_file():
        raise InputNotFoundError(f"Missing input file at {input_path}", path=str(input_path))

    try:
        file_bytes = input_path.read_bytes()
    except OSError as e:
        raise InputNotFoundError(
            f"Cannot read input file at {input_path}: {e}", path=str(input_path)
        ) from e

    text, encoding = decode_source(file_bytes)
    return table_from_text(
        text,
        source_name=input_path.name,
        encoding=encoding,
        sha256=calculate_bytes_sha256(file_bytes),
        size_bytes=len(file_bytes),
    )


def validate_header(header: list[str]) -> None:
    """Ensure every required column is present.

    Raises
    ------
    MissingColumnsError
        Naming each absent column, in required-column order.
    """
    present = set(header)
    missing = [column for column in REQUIRED_COLUMNS if column not in present]
    if missing:
        raise MissingColumnsError(missing)


def project_row(
    row: list[str],
    column_index: dict[str, int],
    source_row: int = 0,
) -> CandidateRecord:
    """Project a raw row onto the required columns by name.

    Short rows default the missing cells to ""; every value is trimmed.
    """
    values: dict[str, str] = {}
    for column in REQUIRED_COLUMNS:
        position = column_index.get(column)
        cell = row[position] if position is not None and position < len(row) else ""
        values[column] = cell.strip()
    return CandidateRecord.from_mapping(values, source_row=source_row)
