"""Public API for provdedupe.

High-level helpers for scripts and notebooks:
- Parsing a staged table without running the pipeline
- Building the dataset from text or a file
- Re-validating artifacts already on disk
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from provdedupe.exceptions import ArtifactValidationError, PipelineError
from provdedupe.output import check_consistency, validate_artifact, write_json
from provdedupe.parse import SourceTable, read_source, table_from_text

if TYPE_CHECKING:
    from provdedupe.engine import Dataset, PipelineConfig, PipelineResult

__all__ = [
    "parse_file",
    "build_from_text",
    "normalize_file",
    "load_artifacts",
    "validate_output_dir",
    "write_json",
]


def parse_file(path: str | Path) -> SourceTable:
    """Parse a staged table into header and non-blank rows.

    The header is not validated.

    Raises
    ------
    InputNotFoundError
        If the file does not exist or cannot be read.

    Examples
    --------
        >>> from provdedupe import parse_file
        >>> table = parse_file("data_raw/swim_lessons.csv")
        >>> table.header[:2]
        ['provider_name', 'program_name']
    """
    return read_source(path)


def build_from_text(text: str, *, generated_at: str | None = None) -> Dataset:
    """Run the in-memory transformation over table text.

    Raises
    ------
    MissingColumnsError
        If the header lacks a required column.
    """
    from provdedupe.engine import build_dataset

    return build_dataset(table_from_text(text), generated_at=generated_at)


def normalize_file(
    input_path: str | Path,
    output_dir: str | Path | None = None,
    *,
    config: PipelineConfig | None = None,
) -> PipelineResult:
    """Run the full pipeline over a staged file.

    Parameters
    ----------
    input_path : str | Path
        Staged delimited text.
    output_dir : str | Path | None, optional
        Overrides ``config.output_dir`` when given.
    config : PipelineConfig | None, optional
        Pipeline configuration. If None, uses defaults.

    Returns
    -------
    PipelineResult
        Check ``success`` before reading ``report``.
    """
    from provdedupe.engine import PipelineConfig, run_pipeline

    if config is None:
        config = PipelineConfig()
    if output_dir is not None:
        config = replace(config, output_dir=Path(output_dir))

    return run_pipeline(input_path, config=config)


def load_artifacts(
    output_dir: str | Path,
    config: PipelineConfig | None = None,
) -> dict[str, Any]:
    """Load the four artifacts of a previous run, keyed by artifact kind.

    Raises
    ------
    PipelineError
        If an artifact file is missing or is not valid JSON.
    """
    from provdedupe.engine import PipelineConfig

    if config is None:
        config = PipelineConfig()

    base = Path(output_dir)
    loaded: dict[str, Any] = {}
    for kind, name in config.artifact_filenames().items():
        path = base / name
        try:
            loaded[kind] = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise PipelineError(f"Missing artifact: {path}") from e
        except json.JSONDecodeError as e:
            raise PipelineError(f"Artifact is not valid JSON: {path}: {e}") from e
    return loaded


def validate_output_dir(
    output_dir: str | Path,
    config: PipelineConfig | None = None,
) -> list[str]:
    """Validate artifacts on disk against their schemas and each other.

    Returns
    -------
    list[str]
        Problems found; empty when the directory holds a consistent run.

    Raises
    ------
    PipelineError
        If an artifact cannot be loaded.
    """
    artifacts = load_artifacts(output_dir, config)

    problems: list[str] = []
    for kind, payload in artifacts.items():
        try:
            validate_artifact(kind, payload)
        except ArtifactValidationError as e:
            problems.append(str(e))

    if not problems:
        problems.extend(
            check_consistency(
                artifacts["records"],
                artifacts["state_index"],
                artifacts["id_index"],
                artifacts["report"],
            )
        )
    return problems
