"""Glue between the diff-log parser and a renderer.

Everything here is a lazy generator chain: a unit is produced only when
the consumer asks for it, and only the currently open region is held in
memory.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

from sidediff.git.aligner import AlignPolicy
from sidediff.git.diff_parser import DiffLogParser
from sidediff.git.models import (
    CommitLine,
    CommitSeparator,
    Event,
    FileHeaderReady,
    HunkReady,
    RawTextLine,
)
from sidediff.output.base import Renderer

UnitT = TypeVar("UnitT")


def render_events(events: Iterable[Event], renderer: Renderer[UnitT]) -> Iterator[UnitT]:
    """Turn parser events into renderer output units, in order."""
    for event in events:
        if isinstance(event, RawTextLine):
            yield renderer.format_raw_line(event.text)
        elif isinstance(event, CommitLine):
            yield renderer.format_commit_line(event.text)
        elif isinstance(event, CommitSeparator):
            yield renderer.horizontal_separator
        elif isinstance(event, FileHeaderReady):
            yield from renderer.format_file_header(event.header.path_before, event.header.path_after)
        elif isinstance(event, HunkReady):
            yield renderer.format_hunk_header(
                event.header.raw_text, event.file.path_before, event.file.path_after
            )
            for row in event.rows:
                yield renderer.format_aligned_line(row.before_no, row.before, row.after_no, row.after)


def side_by_side(
    lines: Iterable[str],
    renderer: Renderer[UnitT],
    policy: AlignPolicy | str = AlignPolicy.COLLECTED,
) -> Iterator[UnitT]:
    """Render raw diff-log *lines* side by side."""
    return render_events(DiffLogParser(policy).parse(lines), renderer)
