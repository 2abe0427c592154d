"""Run context manager for audit logging and manifest tracking."""

import sys
import traceback
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from provdedupe.audit.helpers import (
    generate_run_id,
    get_dependency_versions,
    get_package_version,
    get_platform_info,
    get_python_version,
)
from provdedupe.audit.logger import AuditLogger
from provdedupe.audit.manifest import ManifestWriter
from provdedupe.audit.models import EnvironmentInfo, ErrorInfo, StageInfo
from provdedupe.utils import get_iso_timestamp

__all__ = ["RunContext"]


class RunContext:
    """Lifecycle of one audited pipeline run.

    Owns the event log (events.jsonl) and the manifest (run.json) in the
    audit directory. Used as a context manager: leaving the block finishes
    the run with status "failed" if an error was recorded or raised, and
    "success" otherwise.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    audit_dir : Path
        Directory holding events.jsonl and run.json.
    audit_logger : AuditLogger
        Structured event logger.
    manifest_writer : ManifestWriter
        Manifest builder and writer.
    status : str
        "success" until an error is recorded.
    """

    def __init__(
        self,
        run_id: str,
        audit_dir: Path,
        audit_logger: AuditLogger,
        manifest_writer: ManifestWriter,
    ) -> None:
        self.run_id = run_id
        self.audit_dir = audit_dir
        self.audit_logger = audit_logger
        self.manifest_writer = manifest_writer
        self.status = "success"
        self.start_time = datetime.now(UTC)
        self._stage_start_times: dict[str, datetime] = {}
        self._finished = False

    @classmethod
    def start(
        cls,
        audit_dir: Path,
        parameters: dict[str, Any],
        command_argv: list[str] | None = None,
    ) -> "RunContext":
        """Create the audit directory, open the event log and log run_started.

        Parameters
        ----------
        audit_dir : Path
            Directory for events.jsonl and run.json.
        parameters : dict[str, Any]
            Run configuration, recorded verbatim.
        command_argv : list[str] | None, optional
            Command line, defaults to ``sys.argv``.
        """
        run_id = generate_run_id()
        audit_dir.mkdir(parents=True, exist_ok=True)

        environment = EnvironmentInfo(
            python_version=get_python_version(),
            platform=get_platform_info(),
            package_version=get_package_version(),
            dependencies=get_dependency_versions(["click", "jsonschema"]),
        )

        audit_logger = AuditLogger(run_id=run_id, log_path=audit_dir / "events.jsonl")
        manifest_writer = ManifestWriter(
            run_id=run_id,
            output_dir=audit_dir,
            environment=environment,
            parameters=parameters,
        )

        audit_logger.run_started(command=list(command_argv or sys.argv), parameters=parameters)

        return cls(
            run_id=run_id,
            audit_dir=audit_dir,
            audit_logger=audit_logger,
            manifest_writer=manifest_writer,
        )

    def start_stage(self, stage_name: str, expected_rows: int | None = None) -> None:
        self._stage_start_times[stage_name] = datetime.now(UTC)
        self.manifest_writer.add_stage(StageInfo(name=stage_name, started_at=get_iso_timestamp()))
        self.audit_logger.stage_started(stage=stage_name, expected_rows=expected_rows)

    def finish_stage(self, stage_name: str, counters: dict[str, int] | None = None) -> None:
        """Finish a started stage, recording its duration and counters.

        Raises
        ------
        ValueError
            If the stage was not started.
        """
        start_time = self._stage_start_times.pop(stage_name, None)
        if start_time is None:
            raise ValueError(f"Stage not started: {stage_name}")

        duration = (datetime.now(UTC) - start_time).total_seconds()
        self.manifest_writer.finish_stage(
            stage_name=stage_name,
            finished_at=get_iso_timestamp(),
            duration_seconds=duration,
            counters=counters,
        )
        self.audit_logger.stage_finished(
            stage=stage_name,
            duration_seconds=duration,
            counters=counters,
        )
        self.audit_logger.set_stage(None)

    def record_error(
        self,
        exception: BaseException,
        stage: str | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Record a failure in both the event log and the manifest."""
        self.status = "failed"
        tb = None
        if include_traceback:
            tb = "".join(
                traceback.format_exception(type(exception), exception, exception.__traceback__)
            )

        error_info = ErrorInfo(
            timestamp=get_iso_timestamp(),
            exception_class=type(exception).__name__,
            message=str(exception),
            stage=stage,
            traceback=tb,
        )
        self.manifest_writer.add_error(error_info)
        self.audit_logger.error(
            exception_class=error_info.exception_class,
            message=error_info.message,
            stage=stage,
            traceback=tb,
        )

    def finish(self, status: str | None = None, records_emitted: int | None = None) -> None:
        """Log run_finished, close the log and write run.json. Idempotent."""
        if self._finished:
            return
        self._finished = True

        final_status = status or self.status
        duration = (datetime.now(UTC) - self.start_time).total_seconds()
        self.audit_logger.run_finished(
            status=final_status,
            duration_seconds=duration,
            records_emitted=records_emitted,
        )
        self.audit_logger.close()
        self.manifest_writer.finish(status=final_status, duration_seconds=duration)

    def __enter__(self) -> "RunContext":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is not None:
            self.record_error(exc_val, include_traceback=True)
        self.finish()
