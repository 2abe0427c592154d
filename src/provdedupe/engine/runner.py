"""End-to-end pipeline runner.

Reads the staged table, builds the dataset in memory, validates it and
writes the four artifacts as a unit. Any failure before the final renames
leaves the output directory exactly as it was.
"""

from pathlib import Path

from provdedupe.audit import RunContext
from provdedupe.audit.models import ArtifactInfo, InputInfo
from provdedupe.engine.builder import Dataset, build_dataset
from provdedupe.engine.config import PipelineConfig, PipelineResult
from provdedupe.exceptions import PipelineError
from provdedupe.models import BuildReport
from provdedupe.output import validate_artifact, write_artifacts
from provdedupe.parse import SourceTable, read_source


def _read(input_path: Path, run: RunContext | None) -> SourceTable:
    if run:
        run.start_stage("read")
    table = read_source(input_path)
    if run:
        run.manifest_writer.set_input(
            InputInfo(
                name=table.source_name,
                bytes=table.size_bytes,
                sha256=table.sha256,
                encoding=table.encoding,
                rows_read=len(table.rows),
            )
        )
        run.finish_stage(
            "read",
            counters={"rows": len(table.rows), "blank_rows": table.blank_rows},
        )
    return table


def _write(
    dataset: Dataset,
    config: PipelineConfig,
    run: RunContext | None,
) -> dict[str, str]:
    """Validate (optionally) and write all artifacts; return kind -> path."""
    if run:
        run.start_stage("write")

    payloads = dataset.payloads()
    if config.validate_output:
        for kind, payload in payloads.items():
            validate_artifact(kind, payload)

    filenames = config.artifact_filenames()
    written = write_artifacts(
        config.output_dir,
        {filenames[kind]: payload for kind, payload in payloads.items()},
    )

    output_files: dict[str, str] = {}
    for kind, name in filenames.items():
        artifact = written[name]
        output_files[kind] = str(artifact.path)
        if run:
            count = len(payloads[kind]) if kind != "report" else None
            run.audit_logger.artifact_written(
                path=str(artifact.path),
                sha256=artifact.sha256,
                bytes_written=artifact.bytes,
                record_count=count,
            )
            run.manifest_writer.add_artifact(
                ArtifactInfo(
                    path=str(artifact.path),
                    sha256=artifact.sha256,
                    bytes=artifact.bytes,
                    record_count=count,
                )
            )

    if run:
        run.finish_stage("write", counters={"artifacts": len(written)})
    return output_files


def run_pipeline(
    input_path: Path | str,
    config: PipelineConfig | None = None,
    run: RunContext | None = None,
) -> PipelineResult:
    """Run the complete normalization pipeline.

    Parameters
    ----------
    input_path : Path | str
        Staged delimited text file.
    config : PipelineConfig | None, optional
        Pipeline configuration. If None, uses defaults.
    run : RunContext | None, optional
        Audit context. If None, no audit trail is written.

    Returns
    -------
    PipelineResult
        ``success=False`` with ``error_message`` set on any fatal condition
        (missing input, missing columns, schema violation, I/O failure); in
        that case no artifact has been written or replaced.

    Examples
    --------
        >>> from provdedupe.engine import PipelineConfig, run_pipeline
        >>> result = run_pipeline("data_raw/swim_lessons.csv", PipelineConfig(output_dir="data"))
        >>> if result.success:
        ...     print(result.report.output_rows)
    """
    input_path = Path(input_path)
    if config is None:
        config = PipelineConfig()

    report: BuildReport | None = None
    try:
        table = _read(input_path, run)
        dataset = build_dataset(table, run=run)
        report = dataset.report
        output_files = _write(dataset, config, run)
    except Exception as e:
        if run:
            run.record_error(
                e,
                stage=run.audit_logger.current_stage,
                include_traceback=not isinstance(e, PipelineError),
            )
        return PipelineResult(
            success=False,
            report=report,
            error_message=f"{type(e).__name__}: {e}",
        )

    return PipelineResult(success=True, report=report, output_files=output_files)
