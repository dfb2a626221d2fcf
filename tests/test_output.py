"""Tests for the terminal and plain renderers."""

from rich.cells import cell_len
from rich.text import Text

from sidediff.config.schema import LayoutConfig, ThemeConfig
from sidediff.git.models import HunkLine, LineKind
from sidediff.output.base import TAB_SIZE, column_width, file_title
from sidediff.output.plain import PlainRenderer
from sidediff.output.terminal import TerminalRenderer

DEL = HunkLine(LineKind.DELETED, "old value")
INS = HunkLine(LineKind.INSERTED, "new value")
CTX = HunkLine(LineKind.CONTEXT, "same")


class TestLayout:
    def test_column_width(self):
        assert column_width(80, 5, 8) == 32
        assert column_width(200, 5, 8) == 92

    def test_min_line_width(self):
        assert column_width(20, 5, 8) == 8

    def test_file_titles(self):
        assert file_title("a.py", "a.py") == "a.py"
        assert file_title("a.py", "b.py") == "a.py → b.py"
        assert file_title("", "new.py") == "new.py (new)"
        assert file_title("gone.py", "") == "gone.py (deleted)"
        assert file_title("", "") == "(unknown file)"


class TestTerminalRenderer:
    def test_row_fills_width(self):
        renderer = TerminalRenderer(80)
        row = renderer.format_aligned_line(3, DEL, 4, INS)
        assert isinstance(row, Text)
        assert len(row.plain) == 80
        assert row.plain.startswith("    3 - old value")
        assert row.plain[40:].startswith("    4 + new value")

    def test_padding_side_is_blank(self):
        row = TerminalRenderer(80).format_aligned_line(7, DEL, None, None)
        assert row.plain[40:] == " " * 40

    def test_long_line_cropped(self):
        renderer = TerminalRenderer(60)
        long_line = HunkLine(LineKind.CONTEXT, "x" * 200)
        row = renderer.format_aligned_line(1, long_line, 1, long_line)
        assert len(row.plain) == 60

    def test_tabs_expanded(self):
        row = TerminalRenderer(80).format_aligned_line(1, HunkLine(LineKind.CONTEXT, "\tx"), 1, CTX)
        assert "\t" not in row.plain
        assert row.plain.startswith("    1       x")

    def test_line_styles_from_theme(self):
        theme = ThemeConfig(deleted="magenta", inserted="cyan")
        row = TerminalRenderer(80, theme=theme).format_aligned_line(1, DEL, 1, INS)
        styles = {str(span.style) for span in row.spans}
        assert "magenta" in styles
        assert "cyan" in styles

    def test_file_header(self):
        units = TerminalRenderer(40).format_file_header("src/a.py", "src/b.py")
        assert units[0].plain == "─" * 40
        assert units[1].plain.rstrip() == "src/a.py → src/b.py"

    def test_hunk_header(self):
        unit = TerminalRenderer(40).format_hunk_header("@@ -1,2 +1,2 @@ main()", "a", "a")
        assert unit.plain == "@@ -1,2 +1,2 @@ main()".ljust(40)

    def test_commit_sha_styled(self):
        unit = TerminalRenderer(80).format_commit_line("commit abc123 (HEAD -> main)")
        assert unit.plain == "commit abc123 (HEAD -> main)"
        assert any(str(span.style) == "yellow" for span in unit.spans)

    def test_commit_meta_label(self):
        unit = TerminalRenderer(80).format_commit_line("Author: Ada <ada@example.com>")
        assert unit.plain == "Author: Ada <ada@example.com>"
        assert unit.spans[0].end == len("Author:")

    def test_commit_message_plain(self):
        unit = TerminalRenderer(80).format_commit_line("    Fix the thing")
        assert unit.plain == "    Fix the thing"
        assert unit.spans == []

    def test_raw_line_keeps_colour(self):
        unit = TerminalRenderer(80).format_raw_line("\x1b[31mred\x1b[0m")
        assert unit.plain == "red"
        assert unit.spans

    def test_separator(self):
        assert TerminalRenderer(30).horizontal_separator.plain == "━" * 30

    def test_custom_line_number_width(self):
        renderer = TerminalRenderer(80, layout=LayoutConfig(line_number_width=3))
        row = renderer.format_aligned_line(12, CTX, 12, CTX)
        assert row.plain.startswith(" 12   same")
        assert len(row.plain) == 80


class TestPlainRenderer:
    def test_row(self):
        renderer = PlainRenderer(40)
        row = renderer.format_aligned_line(3, DEL, None, None)
        assert row == "    3 - old value".ljust(20) + " " * 20

    def test_headers(self):
        renderer = PlainRenderer(20)
        assert renderer.format_file_header("a", "a") == ["-" * 20, "a".ljust(20)]
        assert renderer.format_hunk_header("@@ -1 +1 @@", "a", "a") == "@@ -1 +1 @@".ljust(20)
        assert renderer.horizontal_separator == "=" * 20

    def test_raw_line_stripped(self):
        assert PlainRenderer(20).format_raw_line("\x1b[1mbold\x1b[0m") == "bold"

    def test_tabs_expanded(self):
        row = PlainRenderer(80).format_aligned_line(1, HunkLine(LineKind.CONTEXT, "\tx"), 1, CTX)
        assert "\t" not in row
        assert row.startswith("    1   " + " " * TAB_SIZE + "x")

    def test_wide_characters_keep_columns_aligned(self):
        renderer = PlainRenderer(40)
        wide = HunkLine(LineKind.DELETED, "漢字漢字漢字漢字")
        row = renderer.format_aligned_line(1, wide, 1, INS)
        assert cell_len(row) == 40
        assert row.endswith("    1 + new value".ljust(20))
        assert renderer.format_file_header("файл.txt", "файл.txt")[1] == "файл.txt".ljust(40)
        assert cell_len(renderer.format_hunk_header("@@ -1 +1 @@ 日本語" * 5, "a", "a")) == 40
