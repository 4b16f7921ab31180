"""Line-by-line reading from files, file objects or descriptors."""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 3

Source = Union[int, Any]


class LineReader:
    """Read a source one line at a time, in chunks of ``buffer_size``.

    ``source`` is an open descriptor (an int) or any object with a
    ``read(size)`` method, text or binary. Each reader keeps its own
    leftover data, so several sources can be read side by side. Lines keep
    their trailing newline; the last line may lack one.
    """

    def __init__(self, source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self._source = source
        self._buffer_size = buffer_size
        self._stash: Optional[Any] = None
        self._newline: Union[str, bytes] = "\n"

    def _read_chunk(self):
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def _fill(self) -> None:
        while self._stash is None or self._newline not in self._stash:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._stash = None
                raise
            if not chunk:
                return
            if self._stash is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
                self._stash = chunk
            else:
                self._stash = self._stash + chunk

    def read_line(self):
        """Return the next line, or None once the source is exhausted."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        end = stash.find(self._newline)
        if end < 0:
            self._stash = None
            return stash
        line, rest = stash[:end + 1], stash[end + 1:]
        self._stash = rest if rest else None
        return line

    def __iter__(self) -> Iterator:
        while (line := self.read_line()) is not None:
            yield line