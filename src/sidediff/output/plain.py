"""Colourless renderer producing plain strings, for pipes and files."""

from __future__ import annotations

from typing import List, Optional

from rich.cells import set_cell_size

from sidediff.config.schema import LayoutConfig
from sidediff.git.models import HunkLine
from sidediff.git.sanitize import strip_ansi
from sidediff.output.base import TAB_SIZE, column_width, file_title


def _fit(text: str, width: int) -> str:
    """Crop or pad ``text`` to exactly ``width`` terminal cells."""
    return set_cell_size(text, width)


class PlainRenderer:
    def __init__(self, width: int, layout: Optional[LayoutConfig] = None) -> None:
        self.layout = layout or LayoutConfig()
        self.width = width
        self.line_width = column_width(width, self.layout.line_number_width, self.layout.min_line_width)
        self.side_width = self.layout.line_number_width + 3 + self.line_width
        self.horizontal_separator = "=" * width

    def _side(self, line_no: Optional[int], line: Optional[HunkLine]) -> str:
        if line is None:
            return " " * self.side_width
        number = str(line_no) if line_no is not None else ""
        body = _fit(f"{line.marker} {line.text.expandtabs(TAB_SIZE)}", self.line_width + 2)
        return f"{number.rjust(self.layout.line_number_width)} {body}"

    def format_file_header(self, path_before: str, path_after: str) -> List[str]:
        return ["-" * self.width, _fit(file_title(path_before, path_after), self.width)]

    def format_hunk_header(self, raw_text: str, path_before: str, path_after: str) -> str:
        return _fit(raw_text, self.width)

    def format_aligned_line(
        self,
        no_before: Optional[int],
        before: Optional[HunkLine],
        no_after: Optional[int],
        after: Optional[HunkLine],
    ) -> str:
        return self._side(no_before, before) + self._side(no_after, after)

    def format_commit_line(self, text: str) -> str:
        return text

    def format_raw_line(self, text: str) -> str:
        return strip_ansi(text)
