"""JSON Schema validation and cross-checks for the output artifacts.

Schemas ship inside the package under ``provdedupe/schemas``.
"""

import json
from functools import cache
from importlib import resources
from typing import Any

import jsonschema

from provdedupe.exceptions import ArtifactValidationError
from provdedupe.models import STATE_UNKNOWN_KEY

__all__ = [
    "ARTIFACT_KINDS",
    "load_schema",
    "artifact_schema",
    "validate_artifact",
    "check_consistency",
]

ARTIFACT_KINDS: tuple[str, ...] = ("records", "state_index", "id_index", "report")


@cache
def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled schema by file name, e.g. "build_report.schema.json"."""
    text = resources.files("provdedupe").joinpath("schemas", name).read_text(encoding="utf-8")
    return json.loads(text)


def artifact_schema(kind: str) -> dict[str, Any]:
    """Return the schema for one artifact kind.

    Parameters
    ----------
    kind : str
        One of ``ARTIFACT_KINDS``.

    Raises
    ------
    ValueError
        If ``kind`` is unknown.
    """
    if kind == "records":
        return {"type": "array", "items": _record_subschema()}
    if kind == "id_index":
        return {"type": "object", "additionalProperties": _record_subschema()}
    if kind == "state_index":
        return load_schema("state_index.schema.json")
    if kind == "report":
        return load_schema("build_report.schema.json")
    raise ValueError(f"Unknown artifact kind: {kind}")


def _record_subschema() -> dict[str, Any]:
    """Record schema without its top-level ``$schema``, for embedding."""
    return {k: v for k, v in load_schema("provider_record.schema.json").items() if k != "$schema"}


def validate_artifact(kind: str, instance: Any) -> None:
    """Validate an artifact payload against its schema.

    Raises
    ------
    ArtifactValidationError
        Wrapping the first ``jsonschema.ValidationError`` found.
    """
    try:
        jsonschema.validate(instance=instance, schema=artifact_schema(kind))
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ArtifactValidationError(
            f"{kind} artifact invalid at {location}: {e.message}", artifact=kind
        ) from e


def check_consistency(
    records: list[dict[str, Any]],
    state_index: dict[str, list[str]],
    id_index: dict[str, dict[str, Any]],
    report: dict[str, Any],
) -> list[str]:
    """Cross-check the four artifacts of one run against each other.

    Returns
    -------
    list[str]
        Human-readable problems; empty when the artifacts agree.
    """
    problems: list[str] = []
    record_ids = [r.get("id", "") for r in records]

    if report.get("output_rows") != len(records):
        problems.append(
            f"report output_rows={report.get('output_rows')} but {len(records)} records"
        )

    unknown_ids = set(record_ids) - set(id_index)
    if unknown_ids:
        problems.append(f"{len(unknown_ids)} record ids missing from id index")

    for state, ids in state_index.items():
        for record_id in ids:
            record = id_index.get(record_id)
            if record is None:
                problems.append(f"state index {state} lists unknown id {record_id}")
            elif (record.get("state") or STATE_UNKNOWN_KEY) != state:
                problems.append(
                    f"id {record_id} filed under {state} but has state {record.get('state')!r}"
                )

    indexed = sum(len(ids) for ids in state_index.values())
    if indexed != len(records):
        problems.append(f"state index lists {indexed} ids but {len(records)} records")

    return problems
