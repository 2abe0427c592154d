"""Command-line interface for provdedupe.

Provides CLI commands for the normalization pipeline.
"""

import importlib.metadata
import sys
from pathlib import Path

import click

from provdedupe.engine.config import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_DIR

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("provdedupe")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.3.0"


@click.group()
@click.version_option(version=__version__, prog_name="provdedupe")
def cli() -> None:
    """Normalize, deduplicate and index provider listings.

    Use 'provdedupe COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument(
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_INPUT_PATH,
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT_DIR,
    show_default=True,
    help="Directory receiving the JSON artifacts",
)
@click.option(
    "--audit-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write events.jsonl and run.json here",
)
@click.option(
    "--no-validate",
    is_flag=True,
    help="Skip JSON Schema validation of the artifacts",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def build(
    input_path: Path,
    output_dir: Path,
    audit_dir: Path | None,
    no_validate: bool,
    verbose: bool,
) -> None:
    """Build the canonical provider dataset from INPUT_PATH.

    INPUT_PATH is the staged comma-separated export (default:
    data_raw/swim_lessons.csv). Only rows whose status is "approved" are
    kept. Four JSON files are written to OUTPUT_DIR, or none at all if the
    run fails.

    Examples
    --------
        provdedupe build
        provdedupe build exports/providers.csv -o public/data
        provdedupe build --audit-dir logs/run --verbose
    """
    from provdedupe.audit import RunContext
    from provdedupe.engine import PipelineConfig, run_pipeline

    config = PipelineConfig(output_dir=output_dir, validate_output=not no_validate)

    if verbose:
        click.echo("Starting build...", err=True)
        click.echo(f"  Input: {input_path}", err=True)
        click.echo(f"  Output: {output_dir}", err=True)
        if audit_dir:
            click.echo(f"  Audit: {audit_dir}", err=True)

    if audit_dir is not None:
        parameters = {"input_path": str(input_path), **config.to_dict()}
        with RunContext.start(audit_dir=audit_dir, parameters=parameters) as run:
            result = run_pipeline(input_path, config=config, run=run)
            run.finish(records_emitted=result.report.output_rows if result.success else None)
    else:
        result = run_pipeline(input_path, config=config)

    if not result.success or result.report is None:
        click.secho(f"✗ {result.error_message}", fg="red", err=True)
        sys.exit(1)

    for line in result.report.summary_lines():
        click.echo(line)
    if verbose:
        click.echo(f"Missing website={result.report.missing_website}", err=True)
        click.echo(f"Missing state={result.report.missing_state}", err=True)
    for path in result.output_files.values():
        click.echo(f"Wrote {path}")


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the rows as JSON to this file instead of stdout",
)
def parse(input_path: Path, output: Path | None) -> None:
    """Dump the rows of INPUT_PATH as a JSON array of arrays.

    The header row is included first and blank rows are dropped. Useful for
    checking how quoted fields and embedded line breaks were split.

    Examples
    --------
        provdedupe parse data_raw/swim_lessons.csv
        provdedupe parse data_raw/swim_lessons.csv -o rows.json
    """
    from provdedupe.api import parse_file
    from provdedupe.exceptions import PipelineError
    from provdedupe.output import dumps_json, write_json

    try:
        table = parse_file(input_path)
    except PipelineError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    rows = [table.header] + [fields for _, fields in table.rows]
    if output is None:
        click.echo(dumps_json(rows), nl=False)
        return

    write_json(rows, output)
    click.secho(f"✓ Wrote {len(rows)} rows to {output}", fg="green")


@cli.command()
@click.argument(
    "output_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=DEFAULT_OUTPUT_DIR,
)
def validate(output_dir: Path) -> None:
    """Check the artifacts in OUTPUT_DIR against their schemas and each other.

    Examples
    --------
        provdedupe validate data
    """
    from provdedupe.api import validate_output_dir
    from provdedupe.exceptions import PipelineError

    try:
        problems = validate_output_dir(output_dir)
    except PipelineError as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        sys.exit(1)

    if problems:
        for problem in problems:
            click.secho(f"✗ {problem}", fg="red", err=True)
        sys.exit(1)

    click.secho(f"✓ {output_dir} is consistent", fg="green")


if __name__ == "__main__":
    cli()
