"""Starter .sidediff.toml template."""

CONFIG_FILENAME = ".sidediff.toml"

DEFAULT_TOML = """\
# sidediff configuration
version = "1.0"

[layout]
# width = 160             # total output width; default: terminal width
line_number_width = 5
min_line_width = 8

[theme]                   # any Rich style string, e.g. "bold red on black"
file_name = "yellow"
hunk_header = "dim"
deleted = "bright_red"
inserted = "bright_green"
unmodified = "white"
commit_sha = "yellow"
commit_meta = "dim"
separator = "dim"
padding = "dim"

[parser]
align = "collected"       # collected | declared (trust hunk bodies or header counts)
"""
