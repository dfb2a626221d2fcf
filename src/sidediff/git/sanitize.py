"""ANSI escape-sequence stripping for coloured git output."""

from __future__ import annotations

import re

# OSC (ESC ] ... BEL | ESC \), CSI (ESC [ or 0x9b, params, final byte),
# and two-character ESC sequences.
_ANSI_RE = re.compile(
    r"(?:\x1b\][^\x07\x1b]*(?:\x07|\x1b\\))"
    r"|(?:(?:\x1b\[|\x9b)[0-?]*[ -/]*[@-~])"
    r"|(?:\x1b[@-Z\\-_])"
)


def strip_ansi(line: str) -> str:
    """Return *line* with every ANSI escape sequence removed."""
    if "\x1b" not in line and "\x9b" not in line:
        return line
    # Removing one sequence can join the halves of another ("\x1b\x1b[0m[1m").
    while True:
        stripped = _ANSI_RE.sub("", line)
        if stripped == line:
            return stripped
        line = stripped
