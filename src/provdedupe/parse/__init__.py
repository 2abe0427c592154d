"""Delimited table parsing and row projection.

Main entry points:
- parse_delimited: scan raw text into rows of fields
- read_source: read a staged file into a SourceTable
- validate_header / project_row: header checks and CandidateRecord projection
"""

from provdedupe.parse.ingestion import (
    SourceTable,
    project_row,
    read_source,
    table_from_text,
    validate_header,
)
from provdedupe.parse.tabular import parse_delimited

__all__ = [
    "SourceTable",
    "parse_delimited",
    "project_row",
    "read_source",
    "table_from_text",
    "validate_header",
]
