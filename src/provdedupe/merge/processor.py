"""Group candidates by dedup key and merge each group into one record."""

from collections.abc import Callable, Iterable
from dataclasses import replace

from provdedupe.merge.field_merge import merge_fields
from provdedupe.merge.models import MergeGroup, MergeResult
from provdedupe.models import CandidateRecord
from provdedupe.normalize import build_dedup_key

MergeCallback = Callable[[MergeGroup, CandidateRecord, list[str]], None]


def merge_candidates(
    candidates: Iterable[CandidateRecord],
    *,
    on_merge: MergeCallback | None = None,
) -> MergeResult:
    """Fold canonicalized candidates into one record per dedup key.

    Groups keep the order in which their key was first seen. The first member
    of a group is copied and becomes its base; every later member is merged
    into that base with ``merge_fields`` and counted as one merged duplicate.

    Parameters
    ----------
    candidates : Iterable[CandidateRecord]
        Approved, canonicalized candidates in input order. Not modified.
    on_merge : MergeCallback | None, optional
        Called after each merge with the group, the merged-in candidate and
        the names of the fields it filled.

    Returns
    -------
    MergeResult
        Groups and the merged-duplicate count.
    """
    result = MergeResult()
    by_key: dict[str, MergeGroup] = {}

    for candidate in candidates:
        key = build_dedup_key(candidate)
        group = by_key.get(key)

        if group is None:
            group = MergeGroup(key=key, base=replace(candidate), member_rows=[candidate.source_row])
            by_key[key] = group
            result.groups.append(group)
            continue

        filled = merge_fields(group.base, candidate)
        for column in filled:
            group.field_sources[column] = candidate.source_row
        group.member_rows.append(candidate.source_row)
        result.merged_duplicates += 1

        if on_merge is not None:
            on_merge(group, candidate, filled)

    return result
