"""Rich terminal renderer — coloured two-column hunks."""

from __future__ import annotations

import re
from typing import List, Optional

from rich.text import Text

from sidediff.config.schema import LayoutConfig, ThemeConfig
from sidediff.git.models import HunkLine, LineKind
from sidediff.output.base import TAB_SIZE, column_width, file_title

_COMMIT_META_RE = re.compile(r"^(Merge|Author|AuthorDate|Commit|CommitDate|Date):(.*)$")


class TerminalRenderer:
    """Build ``rich.text.Text`` units exactly *width* cells wide."""

    def __init__(self, width: int, layout: Optional[LayoutConfig] = None, theme: Optional[ThemeConfig] = None) -> None:
        self.layout = layout or LayoutConfig()
        self.theme = theme or ThemeConfig()
        self.width = width
        self.line_width = column_width(width, self.layout.line_number_width, self.layout.min_line_width)
        self.side_width = self.layout.line_number_width + 3 + self.line_width
        self.horizontal_separator = Text("━" * width, style=self.theme.separator)

    def _line_style(self, kind: LineKind) -> str:
        if kind is LineKind.DELETED:
            return self.theme.deleted
        if kind is LineKind.INSERTED:
            return self.theme.inserted
        return self.theme.unmodified

    def _side(self, line_no: Optional[int], line: Optional[HunkLine]) -> Text:
        if line is None:
            return Text(" " * self.side_width, style=self.theme.padding)

        style = self._line_style(line.kind)
        number = str(line_no) if line_no is not None else ""
        side = Text(number.rjust(self.layout.line_number_width), style=f"{style} dim")
        side.append(" ")
        body = Text(f"{line.marker} {line.text.expandtabs(TAB_SIZE)}", style=style)
        body.truncate(self.line_width + 2, pad=True)
        side.append_text(body)
        return side

    def _full_width(self, text: str, style: str) -> Text:
        out = Text(text, style=style)
        out.truncate(self.width, pad=True)
        return out

    def format_file_header(self, path_before: str, path_after: str) -> List[Text]:
        return [
            Text("─" * self.width, style=self.theme.separator),
            self._full_width(file_title(path_before, path_after), self.theme.file_name),
        ]

    def format_hunk_header(self, raw_text: str, path_before: str, path_after: str) -> Text:
        return self._full_width(raw_text, self.theme.hunk_header)

    def format_aligned_line(
        self,
        no_before: Optional[int],
        before: Optional[HunkLine],
        no_after: Optional[int],
        after: Optional[HunkLine],
    ) -> Text:
        return Text.assemble(self._side(no_before, before), self._side(no_after, after))

    def format_commit_line(self, text: str) -> Text:
        if text.startswith("commit "):
            return Text.assemble(
                ("commit ", self.theme.commit_meta),
                (text[len("commit "):], self.theme.commit_sha),
            )
        m = _COMMIT_META_RE.match(text)
        if m:
            return Text.assemble((f"{m.group(1)}:", self.theme.commit_meta), m.group(2))
        return Text(text)

    def format_raw_line(self, text: str) -> Text:
        # Keep the producer's own colouring for text outside any diff.
        return Text.from_ansi(text)
