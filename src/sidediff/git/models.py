"""Data models for diff-log parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class Region(str, Enum):
    """Structural region of the diff-log stream the parser is in."""

    UNKNOWN = "unknown"
    COMMIT = "commit"
    FILE_DIFF = "file_diff"
    HUNK = "hunk"


class LineKind(str, Enum):
    CONTEXT = "context"
    DELETED = "deleted"
    INSERTED = "inserted"


@dataclass(frozen=True, slots=True)
class HunkLine:
    """A single hunk body line, without its leading marker character."""

    kind: LineKind
    text: str

    @property
    def marker(self) -> str:
        if self.kind is LineKind.DELETED:
            return "-"
        if self.kind is LineKind.INSERTED:
            return "+"
        return " "


@dataclass(frozen=True)
class FileHeader:
    """Before/after paths of one file diff. Empty string means unknown."""

    path_before: str = ""
    path_after: str = ""


@dataclass(frozen=True)
class HunkHeader:
    """Numbers parsed from an ``@@ -a,b +c,d @@`` line."""

    start_before: int
    start_after: int
    raw_text: str
    count_before: Optional[int] = None  # declared delta, absent when omitted
    count_after: Optional[int] = None


@dataclass(frozen=True, slots=True)
class AlignedRow:
    """One display row. ``None`` on a side is padding, never an empty line."""

    before: Optional[HunkLine]
    after: Optional[HunkLine]
    before_no: Optional[int] = None
    after_no: Optional[int] = None


# --- Parser events ---


@dataclass(frozen=True)
class FileHeaderReady:
    header: FileHeader


@dataclass(frozen=True)
class HunkReady:
    header: HunkHeader
    file: FileHeader
    rows: Tuple[AlignedRow, ...]


@dataclass(frozen=True)
class RawTextLine:
    """Line seen before any recognised marker, passed through verbatim."""

    text: str


@dataclass(frozen=True)
class CommitLine:
    text: str


@dataclass(frozen=True)
class CommitSeparator:
    """Emitted between a commit whose last region was a hunk and the next commit."""


Event = FileHeaderReady | HunkReady | RawTextLine | CommitLine | CommitSeparator

HunkSides = Tuple[List[Optional[HunkLine]], List[Optional[HunkLine]]]
