"""Line framing for streamed input."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, TextIO

_NEWLINE_RE = re.compile(r"\r\n|\n")


def iter_lines(chunks: Iterable[str]) -> Iterator[str]:
    """Yield complete lines from arbitrarily split text *chunks*.

    A line split across chunk boundaries is rejoined. The final
    unterminated piece is yielded only if it is non-empty.
    """
    pending = ""
    for chunk in chunks:
        pieces = _NEWLINE_RE.split(pending + chunk)
        pending = pieces.pop()
        yield from pieces
    if pending:
        yield pending


def iter_stream(stream: TextIO) -> Iterator[str]:
    """Yield lines from *stream* as soon as each one is written."""
    return iter_lines(iter(stream.readline, ""))
