"""In-memory transformation from a parsed table to the output dataset.

Stages, in order:
    header  - validate the required columns
    filter  - project rows, keep approved ones, canonicalize
    merge   - group by dedup key and fold duplicates
    index   - derive ids, sort, build indices and the report

Nothing here touches the filesystem; see ``engine.runner`` for I/O.
"""

from dataclasses import dataclass
from typing import Any

from provdedupe.audit import RunContext
from provdedupe.merge import MergeCallback, MergeGroup, merge_candidates
from provdedupe.models import (
    BuildReport,
    CandidateRecord,
    CanonicalRecord,
    compute_provider_id,
)
from provdedupe.normalize import canonicalize, is_approved
from provdedupe.output import build_id_index, build_state_index, sort_records
from provdedupe.parse import SourceTable, project_row, validate_header
from provdedupe.utils import get_utc_timestamp


@dataclass
class Dataset:
    """The four artifacts of a run, before serialization.

    Attributes
    ----------
    records : list[CanonicalRecord]
        Records sorted by state, city, provider name.
    state_index : dict[str, list[str]]
        State code (or "NA") to record ids.
    id_index : dict[str, CanonicalRecord]
        Record id to record.
    report : BuildReport
        Run counters.
    """

    records: list[CanonicalRecord]
    state_index: dict[str, list[str]]
    id_index: dict[str, CanonicalRecord]
    report: BuildReport

    def payloads(self) -> dict[str, Any]:
        """JSON-ready payload per artifact kind."""
        return {
            "records": [r.to_dict() for r in self.records],
            "state_index": {state: list(ids) for state, ids in self.state_index.items()},
            "id_index": {rid: r.to_dict() for rid, r in self.id_index.items()},
            "report": self.report.to_dict(),
        }


def select_candidates(
    table: SourceTable,
    report: BuildReport,
    run: RunContext | None = None,
) -> list[CandidateRecord]:
    """Project body rows, drop non-approved ones and canonicalize the rest.

    Updates ``input_rows``, ``kept_rows`` and ``dropped_not_approved`` on
    ``report``.
    """
    column_index = table.column_index
    kept: list[CandidateRecord] = []

    for row_number, row in table.rows:
        report.input_rows += 1
        candidate = project_row(row, column_index, source_row=row_number)

        if not is_approved(candidate):
            report.dropped_not_approved += 1
            if run:
                run.audit_logger.row_dropped(
                    row=row_number, reason="not_approved", status=candidate.status
                )
            continue

        kept.append(canonicalize(candidate))

    report.kept_rows = len(kept)
    return kept


def _merge_logger(run: RunContext) -> MergeCallback:
    def _on_merge(group: MergeGroup, candidate: CandidateRecord, filled: list[str]) -> None:
        run.audit_logger.duplicate_merged(
            row=candidate.source_row,
            into_row=group.member_rows[0],
            fields_filled=filled,
        )

    return _on_merge


def build_dataset(
    table: SourceTable,
    *,
    run: RunContext | None = None,
    generated_at: str | None = None,
) -> Dataset:
    """Turn a parsed table into the sorted, indexed canonical dataset.

    Parameters
    ----------
    table : SourceTable
        Parsed input; its header is validated here.
    run : RunContext | None, optional
        Audit context for stage timings and per-row events.
    generated_at : str | None, optional
        Report timestamp; defaults to the current UTC time.

    Returns
    -------
    Dataset
        Records, indices and report.

    Raises
    ------
    MissingColumnsError
        If the header lacks a required column.
    """
    if run:
        run.start_stage("header")
    validate_header(table.header)
    if run:
        run.finish_stage("header", counters={"columns": len(table.header)})

    report = BuildReport(generated_at_utc=generated_at or get_utc_timestamp())

    if run:
        run.start_stage("filter", expected_rows=len(table.rows))
    candidates = select_candidates(table, report, run)
    if run:
        run.finish_stage(
            "filter",
            counters={
                "input_rows": report.input_rows,
                "kept_rows": report.kept_rows,
                "dropped_not_approved": report.dropped_not_approved,
            },
        )

    if run:
        run.start_stage("merge", expected_rows=len(candidates))
    merged = merge_candidates(candidates, on_merge=_merge_logger(run) if run else None)
    report.merged_duplicates = merged.merged_duplicates
    if run:
        run.finish_stage(
            "merge",
            counters={
                "groups": len(merged.groups),
                "merged_duplicates": merged.merged_duplicates,
                "max_group_size": merged.max_group_size,
            },
        )

    if run:
        run.start_stage("index", expected_rows=len(merged.groups))
    records = sort_records(
        CanonicalRecord.from_candidate(compute_provider_id(g.base), g.base) for g in merged.groups
    )
    state_index = build_state_index(records)
    id_index = build_id_index(records)

    report.output_rows = len(records)
    report.missing_website = sum(1 for r in records if not r.website)
    report.missing_state = sum(1 for r in records if not r.state)
    if run:
        run.finish_stage(
            "index",
            counters={
                "output_rows": report.output_rows,
                "states": len(state_index),
                "missing_website": report.missing_website,
                "missing_state": report.missing_state,
            },
        )

    return Dataset(records=records, state_index=state_index, id_index=id_index, report=report)
