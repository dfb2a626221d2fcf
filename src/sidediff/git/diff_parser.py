"""Streaming diff-log parser.

Consumes the output of ``git log -p`` (or ``git diff``) one line at a time
and turns it into structural events: commit lines, file headers, aligned
hunks and passthrough text. Only the currently open region is buffered;
nothing reads ahead.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, List, Optional, Tuple

from sidediff.git.aligner import AlignPolicy, get_aligner
from sidediff.git.models import (
    CommitLine,
    CommitSeparator,
    Event,
    FileHeader,
    FileHeaderReady,
    HunkHeader,
    HunkLine,
    HunkReady,
    LineKind,
    RawTextLine,
    Region,
)
from sidediff.git.sanitize import strip_ansi

logger = logging.getLogger(__name__)

# --- Markers, anchored at line start ---

COMMIT_MARKER = "commit "
FILE_DIFF_MARKER = "diff --git"
HUNK_MARKER = "@@ "
HUNK_MARKER_END = " @@"
OLD_FILE_PREFIX = "--- a/"
NEW_FILE_PREFIX = "+++ b/"
RENAME_FROM_PREFIX = "rename from "
RENAME_TO_PREFIX = "rename to "
BINARY_PREFIX = "Binary files"

_HUNK_RANGE_BEFORE_RE = re.compile(r"^-(\d+)(?:,(\d+))?$")
_HUNK_RANGE_AFTER_RE = re.compile(r"^\+(\d+)(?:,(\d+))?$")

# Spaces in paths are not escaped, so " and " may occur inside a name.
# Anchoring on the fixed text around it lets the regex find the split.
_BINARY_FILES_RE = re.compile(
    r"^Binary files (?:a/(.*)|/dev/null) and (?:b/(.*)|/dev/null) differ$"
)


class DiffParseError(Exception):
    """Raised when the diff log is structurally malformed."""


class HunkHeaderError(DiffParseError):
    """Raised for an ``@@`` line whose ranges cannot be parsed."""


def parse_hunk_header(line: str) -> HunkHeader:
    """Parse an ``@@ -a[,b] +c[,d] @@ ...`` line into a HunkHeader."""
    start = line.find(HUNK_MARKER)
    end = line.find(HUNK_MARKER_END, start + 1) if start >= 0 else -1
    if start < 0 or end <= start:
        raise HunkHeaderError(f"Missing '@@ ... @@' markers in hunk header: {line!r}")

    parts = line[start + len(HUNK_MARKER):end].split(" ")
    if len(parts) < 2:
        raise HunkHeaderError(f"Hunk header needs two ranges: {line!r}")

    ma = _HUNK_RANGE_BEFORE_RE.match(parts[0])
    if not ma:
        raise HunkHeaderError(f"Expected '-<start>[,<count>]', got {parts[0]!r}")
    mb = _HUNK_RANGE_AFTER_RE.match(parts[1])
    if not mb:
        raise HunkHeaderError(f"Expected '+<start>[,<count>]', got {parts[1]!r}")

    return HunkHeader(
        start_before=int(ma.group(1)),
        start_after=int(mb.group(1)),
        raw_text=line,
        count_before=int(ma.group(2)) if ma.group(2) is not None else None,
        count_after=int(mb.group(2)) if mb.group(2) is not None else None,
    )


def parse_binary_files(line: str) -> Optional[Tuple[str, str]]:
    """Return (before, after) paths from a ``Binary files ... differ`` line.

    A ``/dev/null`` side yields ``""``. Returns None if the line does not
    have the expected shape.
    """
    m = _BINARY_FILES_RE.match(line)
    if not m:
        return None
    return m.group(1) or "", m.group(2) or ""


def classify_hunk_line(line: str) -> HunkLine:
    """Build a HunkLine from a hunk body line, dropping its marker."""
    if line.startswith("-"):
        return HunkLine(LineKind.DELETED, line[1:])
    if line.startswith("+"):
        return HunkLine(LineKind.INSERTED, line[1:])
    return HunkLine(LineKind.CONTEXT, line[1:])


class DiffLogParser:
    """Line-at-a-time state machine over a diff log.

    Usage::

        parser = DiffLogParser()
        for raw_line in lines:
            for event in parser.feed(raw_line):
                ...
        for event in parser.flush():
            ...

    or simply ``for event in DiffLogParser().parse(lines)``.
    """

    def __init__(self, policy: AlignPolicy | str = AlignPolicy.COLLECTED) -> None:
        self._align = get_aligner(policy)
        self.region = Region.UNKNOWN
        self.file = FileHeader()
        self.hunk_header: Optional[HunkHeader] = None
        self._hunk_lines: List[HunkLine] = []
        self._file_pending = False
        self._handlers = {
            Region.UNKNOWN: self._on_unknown,
            Region.COMMIT: self._on_commit,
            Region.FILE_DIFF: self._on_file_diff,
            Region.HUNK: self._on_hunk,
        }

    def parse(self, lines: Iterable[str]) -> Iterator[Event]:
        """Lazily yield events for *lines*, flushing at end of stream."""
        for raw_line in lines:
            yield from self.feed(raw_line)
        yield from self.flush()

    def feed(self, raw_line: str) -> List[Event]:
        """Consume one raw (possibly coloured) line and return its events."""
        line = strip_ansi(raw_line)
        events: List[Event] = []

        if line.startswith(COMMIT_MARKER):
            had_hunk = self.region is Region.HUNK
            events.extend(self.flush())
            if had_hunk:
                events.append(CommitSeparator())
            self._enter(Region.COMMIT)
        elif line.startswith(FILE_DIFF_MARKER):
            events.extend(self.flush())
            self.file = FileHeader()
            self._file_pending = True
            self._enter(Region.FILE_DIFF)
        elif line.startswith(HUNK_MARKER):
            events.extend(self.flush())
            self.hunk_header = parse_hunk_header(line)
            self._enter(Region.HUNK)
            return events

        self._handlers[self.region](raw_line, line, events)
        return events

    def flush(self) -> List[Event]:
        """Emit the open file header or hunk, if any."""
        if self.region is Region.FILE_DIFF and self._file_pending:
            self._file_pending = False
            return [FileHeaderReady(self.file)]
        if self.region is Region.HUNK and self.hunk_header is not None:
            header, self.hunk_header = self.hunk_header, None
            rows = self._align(header, self._hunk_lines)
            self._hunk_lines = []
            return [HunkReady(header, self.file, tuple(rows))]
        return []

    def _enter(self, region: Region) -> None:
        if region is not self.region:
            logger.debug("region %s -> %s", self.region.value, region.value)
        self.region = region

    # --- Region handlers ---

    def _on_unknown(self, raw_line: str, line: str, events: List[Event]) -> None:
        events.append(RawTextLine(raw_line))

    def _on_commit(self, raw_line: str, line: str, events: List[Event]) -> None:
        events.append(CommitLine(line))

    def _on_file_diff(self, raw_line: str, line: str, events: List[Event]) -> None:
        if line.startswith(OLD_FILE_PREFIX):
            self.file = FileHeader(line[len(OLD_FILE_PREFIX):], self.file.path_after)
        elif line.startswith(NEW_FILE_PREFIX):
            self.file = FileHeader(self.file.path_before, line[len(NEW_FILE_PREFIX):])
        elif line.startswith(RENAME_FROM_PREFIX):
            self.file = FileHeader(line[len(RENAME_FROM_PREFIX):], self.file.path_after)
        elif line.startswith(RENAME_TO_PREFIX):
            self.file = FileHeader(self.file.path_before, line[len(RENAME_TO_PREFIX):])
        elif line.startswith(BINARY_PREFIX):
            paths = parse_binary_files(line)
            if paths is None:
                logger.debug("unrecognised binary diff line dropped: %r", line)
            else:
                self.file = FileHeader(*paths)
        # index, mode and similarity lines carry nothing we display

    def _on_hunk(self, raw_line: str, line: str, events: List[Event]) -> None:
        self._hunk_lines.append(classify_hunk_line(line))
