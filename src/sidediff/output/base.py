"""Renderer interface consumed by the side-by-side pipeline."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, TypeVar

from sidediff.git.models import HunkLine

UnitT = TypeVar("UnitT")

# Tab stop used when expanding tabs inside diff columns.
TAB_SIZE = 4


class Renderer(Protocol[UnitT]):
    """Formats logical rows into opaque output units (``UnitT``)."""

    horizontal_separator: UnitT

    def format_file_header(self, path_before: str, path_after: str) -> Iterable[UnitT]: ...

    def format_hunk_header(self, raw_text: str, path_before: str, path_after: str) -> UnitT: ...

    def format_aligned_line(
        self,
        no_before: Optional[int],
        before: Optional[HunkLine],
        no_after: Optional[int],
        after: Optional[HunkLine],
    ) -> UnitT: ...

    def format_commit_line(self, text: str) -> UnitT: ...

    def format_raw_line(self, text: str) -> UnitT: ...


def file_title(path_before: str, path_after: str) -> str:
    """Human-readable title for a file header."""
    if not path_before and not path_after:
        return "(unknown file)"
    if not path_before:
        return f"{path_after} (new)"
    if not path_after:
        return f"{path_before} (deleted)"
    if path_before == path_after:
        return path_after
    return f"{path_before} → {path_after}"


def column_width(total_width: int, line_number_width: int, min_line_width: int) -> int:
    """Width of the text part of one side.

    Each side is ``<lineno> <marker> <text>``, so two sides fill
    ``(line_number_width + 3 + text) * 2`` columns.
    """
    return max(total_width // 2 - 3 - line_number_width, min_line_width)
