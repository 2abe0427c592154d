"""Build report for a single pipeline run."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BuildReport:
    """Counters characterizing one pipeline run.

    Attributes
    ----------
    input_rows : int
        Non-blank body rows read from the input table.
    kept_rows : int
        Rows whose status was "approved".
    output_rows : int
        Canonical records emitted after merging.
    dropped_not_approved : int
        Rows excluded by the approval filter.
    merged_duplicates : int
        Rows folded into an earlier row with the same dedup key.
    missing_website : int
        Emitted records with an empty website.
    missing_state : int
        Emitted records with an empty state.
    generated_at_utc : str
        ISO8601 UTC timestamp of the run.
    """

    input_rows: int = 0
    kept_rows: int = 0
    output_rows: int = 0
    dropped_not_approved: int = 0
    merged_duplicates: int = 0
    missing_website: int = 0
    missing_state: int = 0
    generated_at_utc: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    def summary_lines(self) -> list[str]:
        """Console summary lines, one counter per line."""
        return [
            f"Input rows={self.input_rows}",
            f"Kept rows={self.kept_rows}",
            f"Output rows={self.output_rows}",
            f"Dropped not approved={self.dropped_not_approved}",
            f"Merged duplicates={self.merged_duplicates}",
        ]
