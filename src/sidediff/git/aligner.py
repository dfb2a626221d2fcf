"""Hunk alignment — pair before/after hunk lines into display rows.

Two policies are available:

``collected``
    Count-tolerant. Rows are derived from the lines actually collected,
    so a producer whose header counts disagree with its body still
    renders every line.

``declared``
    Count-bounded. Rows are capped by the counts declared in the hunk
    header; lines past a side's declared count are not shown.

Both number each side from the header's start line and advance a side's
counter only on rows where that side holds a real line.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence

from sidediff.git.models import AlignedRow, HunkHeader, HunkLine, HunkSides, LineKind


class AlignPolicy(str, Enum):
    COLLECTED = "collected"
    DECLARED = "declared"


Aligner = Callable[[HunkHeader, Sequence[HunkLine]], List[AlignedRow]]


def pad_to_match(before: List[Optional[HunkLine]], after: List[Optional[HunkLine]]) -> None:
    """Extend the shorter list with padding so both have equal length."""
    while len(before) < len(after):
        before.append(None)
    while len(after) < len(before):
        after.append(None)


def split_sides(lines: Iterable[HunkLine]) -> HunkSides:
    """Partition hunk lines in arrival order into before/after columns.

    Context lines go to both columns after the shorter one is padded, which
    keeps every context line on a single row.
    """
    before: List[Optional[HunkLine]] = []
    after: List[Optional[HunkLine]] = []
    for line in lines:
        if line.kind is LineKind.DELETED:
            before.append(line)
        elif line.kind is LineKind.INSERTED:
            after.append(line)
        else:
            pad_to_match(before, after)
            before.append(line)
            after.append(line)
    return before, after


def _number_rows(
    header: HunkHeader,
    before: Sequence[Optional[HunkLine]],
    after: Sequence[Optional[HunkLine]],
    row_count: int,
) -> List[AlignedRow]:
    rows: List[AlignedRow] = []
    no_before = header.start_before
    no_after = header.start_after
    for i in range(row_count):
        line_a = before[i] if i < len(before) else None
        line_b = after[i] if i < len(after) else None
        rows.append(
            AlignedRow(
                before=line_a,
                after=line_b,
                before_no=no_before if line_a is not None else None,
                after_no=no_after if line_b is not None else None,
            )
        )
        if line_a is not None:
            no_before += 1
        if line_b is not None:
            no_after += 1
    return rows


def align_hunk(header: HunkHeader, lines: Sequence[HunkLine]) -> List[AlignedRow]:
    """Align a hunk by collection order, tolerating inaccurate header counts."""
    before, after = split_sides(lines)
    return _number_rows(header, before, after, max(len(before), len(after)))


def align_hunk_declared(header: HunkHeader, lines: Sequence[HunkLine]) -> List[AlignedRow]:
    """Align a hunk bounded by the counts declared in its header.

    Context is not padded here: each column is simply its own lines in
    order, cut off at the declared count (a missing count means 1).
    """
    count_before = 1 if header.count_before is None else header.count_before
    count_after = 1 if header.count_after is None else header.count_after

    before = [ln for ln in lines if ln.kind is not LineKind.INSERTED][:count_before]
    after = [ln for ln in lines if ln.kind is not LineKind.DELETED][:count_after]
    return _number_rows(header, before, after, max(count_before, count_after))


_ALIGNERS = {
    AlignPolicy.COLLECTED: align_hunk,
    AlignPolicy.DECLARED: align_hunk_declared,
}


def get_aligner(policy: AlignPolicy | str) -> Aligner:
    """Return the alignment function for *policy*."""
    return _ALIGNERS[AlignPolicy(policy)]
