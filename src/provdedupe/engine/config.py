"""Pipeline configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from provdedupe.models import BuildReport

DEFAULT_INPUT_PATH = Path("data_raw") / "swim_lessons.csv"
DEFAULT_OUTPUT_DIR = Path("data")


@dataclass
class PipelineConfig:
    """Configuration for one pipeline run.

    Attributes
    ----------
    output_dir : Path
        Directory receiving the four artifacts.
    records_filename : str
        Sorted canonical record list.
    state_index_filename : str
        State code to record ids.
    id_index_filename : str
        Record id to record.
    report_filename : str
        Build report.
    validate_output : bool
        Validate artifacts against the bundled JSON Schemas before writing.
    """

    output_dir: Path = DEFAULT_OUTPUT_DIR
    records_filename: str = "swim_lessons.json"
    state_index_filename: str = "index_by_state.json"
    id_index_filename: str = "providers_by_id.json"
    report_filename: str = "build_report.json"
    validate_output: bool = True

    def __post_init__(self) -> None:
        """Coerce paths and validate file names."""
        self.output_dir = Path(self.output_dir)

        names = list(self.artifact_filenames().values())
        for name in names:
            if not name or Path(name).name != name:
                raise ValueError(
                    f"Artifact file names must be plain, non-empty names, got {name!r}"
                )
        if len(set(names)) != len(names):
            raise ValueError(f"Artifact file names must be distinct, got {names}")

    def artifact_filenames(self) -> dict[str, str]:
        """Map artifact kind to file name, in emission order."""
        return {
            "records": self.records_filename,
            "state_index": self.state_index_filename,
            "id_index": self.id_index_filename,
            "report": self.report_filename,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["output_dir"] = str(self.output_dir)
        return data


@dataclass
class PipelineResult:
    """Results from pipeline execution.

    Attributes
    ----------
    success : bool
        Whether the run completed and all artifacts were written.
    report : BuildReport | None
        Build report; None when the run failed before it was computed.
    output_files : dict[str, str]
        Artifact kind to written path. Empty on failure.
    error_message : str | None
        "<ExceptionClass>: <message>" when the run failed.
    """

    success: bool
    report: BuildReport | None = None
    output_files: dict[str, str] = field(default_factory=dict)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
