"""Data models for the audit trail and run manifest."""

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "EnvironmentInfo",
    "InputInfo",
    "ArtifactInfo",
    "StageInfo",
    "ErrorInfo",
    "ManifestData",
    "LogEvent",
]


@dataclass
class EnvironmentInfo:
    """Execution environment information.

    Attributes
    ----------
    python_version : str
        Python version (e.g., "3.12.3").
    platform : str
        OS and architecture (e.g., "Linux-6.8.0-x86_64").
    package_version : str
        provdedupe package version.
    dependencies : dict[str, str]
        Key dependency versions.
    """

    python_version: str
    platform: str
    package_version: str
    dependencies: dict[str, str] = field(default_factory=dict)


@dataclass
class InputInfo:
    """The staged input table of a run."""

    name: str
    bytes: int
    sha256: str
    encoding: str
    rows_read: int


@dataclass
class ArtifactInfo:
    """An emitted artifact with its digest."""

    path: str
    sha256: str
    bytes: int
    record_count: int | None = None


@dataclass
class StageInfo:
    """Timing and counters of one pipeline stage."""

    name: str
    started_at: str
    finished_at: str | None = None
    duration_seconds: float | None = None
    counters: dict[str, int] = field(default_factory=dict)


@dataclass
class ErrorInfo:
    """A failure recorded during the run."""

    timestamp: str
    exception_class: str
    message: str
    stage: str | None = None
    traceback: str | None = None


@dataclass
class ManifestData:
    """Complete run manifest as written to run.json."""

    manifest_version: str
    run_id: str
    created_at: str
    status: str
    environment: EnvironmentInfo
    parameters: dict[str, Any]
    input: InputInfo | None = None
    stages: list[StageInfo] = field(default_factory=list)
    artifacts: list[ArtifactInfo] = field(default_factory=list)
    errors: list[ErrorInfo] = field(default_factory=list)
    finished_at: str | None = None
    duration_seconds: float | None = None


@dataclass
class LogEvent:
    """One line of events.jsonl.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp.
    run_id : str
        Run identifier.
    level : str
        "DEBUG", "INFO", "WARN" or "ERROR".
    event : str
        Event type.
    data : dict[str, Any]
        Event payload.
    stage : str | None
        Stage the event belongs to.
    row : int | None
        Body row number when the event concerns one input row.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    stage: str | None = None
    row: int | None = None
