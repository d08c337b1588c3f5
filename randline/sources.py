"""Item sources for the samplers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from randline.errors import SourceReadError


def read_lines(stream: TextIO) -> Iterator[str]:
    """Lazily yield the lines of *stream* without their line terminators.

    Both ``\\n`` and ``\\r\\n`` endings are stripped; a final line without a
    terminator is yielded as-is.

    Raises:
        SourceReadError: If reading or decoding the stream fails.
    """
    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(str(exc)) from exc
        if not line:
            return
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line
