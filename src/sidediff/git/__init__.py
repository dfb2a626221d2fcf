"""Git interface layer — adapter, diff-log parsing, alignment, models."""

from sidediff.git.adapter import GitError, get_repo_root, iter_git_log
from sidediff.git.aligner import AlignPolicy, align_hunk, align_hunk_declared, split_sides
from sidediff.git.diff_parser import (
    DiffLogParser,
    DiffParseError,
    HunkHeaderError,
    parse_binary_files,
    parse_hunk_header,
)
from sidediff.git.models import (
    AlignedRow,
    CommitLine,
    CommitSeparator,
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

__all__ = [
    "AlignPolicy",
    "AlignedRow",
    "CommitLine",
    "CommitSeparator",
    "DiffLogParser",
    "DiffParseError",
    "FileHeader",
    "FileHeaderReady",
    "GitError",
    "HunkHeader",
    "HunkHeaderError",
    "HunkLine",
    "HunkReady",
    "LineKind",
    "RawTextLine",
    "Region",
    "align_hunk",
    "align_hunk_declared",
    "get_repo_root",
    "iter_git_log",
    "parse_binary_files",
    "parse_hunk_header",
    "split_sides",
    "strip_ansi",
]
