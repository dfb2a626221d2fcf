"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

AlignMode = Literal["collected", "declared"]

ALIGN_MODES = ("collected", "declared")


@dataclass
class LayoutConfig:
    width: Optional[int] = None  # None = detect from the terminal
    line_number_width: int = 5
    min_line_width: int = 8


@dataclass
class ThemeConfig:
    """Rich style strings for each element."""

    file_name: str = "yellow"
    hunk_header: str = "dim"
    deleted: str = "bright_red"
    inserted: str = "bright_green"
    unmodified: str = "white"
    commit_sha: str = "yellow"
    commit_meta: str = "dim"
    separator: str = "dim"
    padding: str = "dim"


@dataclass
class ParserConfig:
    align: AlignMode = "collected"


@dataclass
class SidediffConfig:
    version: str = "1.0"
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
