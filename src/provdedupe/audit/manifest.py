"""Manifest writer for run execution metadata."""

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any

from provdedupe.audit.models import (
    ArtifactInfo,
    EnvironmentInfo,
    ErrorInfo,
    InputInfo,
    ManifestData,
    StageInfo,
)
from provdedupe.utils import get_iso_timestamp

__all__ = ["ManifestWriter", "MANIFEST_VERSION"]

MANIFEST_VERSION = "1.0.0"


class ManifestWriter:
    """Builds run.json in memory and writes it atomically on finish.

    Attributes
    ----------
    manifest : ManifestData
        Manifest being built.
    manifest_path : Path
        Destination of run.json.
    """

    def __init__(
        self,
        run_id: str,
        output_dir: Path,
        environment: EnvironmentInfo,
        parameters: dict[str, Any],
    ) -> None:
        self.manifest_path = output_dir / "run.json"
        self.manifest = ManifestData(
            manifest_version=MANIFEST_VERSION,
            run_id=run_id,
            created_at=get_iso_timestamp(),
            status="partial",
            environment=environment,
            parameters=parameters,
        )
        self._stage_index: dict[str, StageInfo] = {}

    def _get_stage(self, stage_name: str) -> StageInfo:
        stage = self._stage_index.get(stage_name)
        if stage is None:
            raise ValueError(f"Stage not found: {stage_name}")
        return stage

    def set_input(self, input_info: InputInfo) -> None:
        self.manifest.input = input_info

    def add_stage(self, stage: StageInfo) -> None:
        self.manifest.stages.append(stage)
        self._stage_index[stage.name] = stage

    def finish_stage(
        self,
        stage_name: str,
        finished_at: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Stamp completion time and counters on a started stage.

        Raises
        ------
        ValueError
            If the stage was never added.
        """
        stage = self._get_stage(stage_name)
        stage.finished_at = finished_at
        stage.duration_seconds = duration_seconds
        if counters:
            stage.counters.update(counters)

    def add_artifact(self, artifact: ArtifactInfo) -> None:
        self.manifest.artifacts.append(artifact)

    def add_error(self, error: ErrorInfo) -> None:
        self.manifest.errors.append(error)

    def finish(self, status: str, duration_seconds: float | None = None) -> None:
        """Set the final status and write run.json."""
        self.manifest.status = status
        self.manifest.finished_at = get_iso_timestamp()
        self.manifest.duration_seconds = duration_seconds
        self._write_manifest_atomic(self.manifest_path)

    def _write_manifest_atomic(self, path: Path) -> None:
        """Write to a temp file, fsync, then rename over ``path``."""
        temp_path = path.with_suffix(".tmp")
        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        temp_path.replace(path)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self.manifest)
