"""Buffered, line-oriented reading from local files or URLs.

A name that can be opened as a local file is read directly.  Anything
else is fetched with :mod:`urllib.request`.  Both kinds are read through
the same text buffer.
"""

from __future__ import annotations

import codecs
import urllib.request
from types import TracebackType
from typing import BinaryIO

_CHUNK_SIZE = 8192
_ENCODING = "utf-8"


class URLFile:
    """A readable text stream over a local file or a remote URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        self.is_local = False
        self._raw: BinaryIO = self._open_raw()
        self._closed = False
        self._reset_buffer()
        if not self.is_local and not self._has_data():
            self._raw.close()
            self._closed = True
            raise OSError(f"couldn't open {url}: no data received")

    def _open_raw(self) -> BinaryIO:
        try:
            raw = open(self.url, "rb")
        except OSError:
            pass
        else:
            self.is_local = True
            return raw
        try:
            return urllib.request.urlopen(self.url)
        except ValueError as exc:
            raise OSError(f"couldn't open {self.url}: {exc}") from exc

    def _reset_buffer(self) -> None:
        self._decoder = codecs.getincrementaldecoder(_ENCODING)(errors="replace")
        self._buffer = ""
        self._exhausted = False

    def _read_chunk(self) -> bool:
        """Pull one more chunk into the buffer; False once the source is done."""
        if self._exhausted:
            return False
        chunk = self._raw.read(_CHUNK_SIZE)
        if chunk:
            self._buffer += self._decoder.decode(chunk)
        else:
            self._exhausted = True
            self._buffer += self._decoder.decode(b"", final=True)
        return True

    def _has_data(self) -> bool:
        while not self._buffer and self._read_chunk():
            pass
        return bool(self._buffer)

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed URLFile")

    @property
    def closed(self) -> bool:
        """True once the stream has been closed."""
        return self._closed

    def read(self, size: int = -1) -> str:
        """Return up to ``size`` characters (all that remain if negative)."""
        self._check_open()
        if size < 0:
            while self._read_chunk():
                pass
            size = len(self._buffer)
        else:
            while len(self._buffer) < size and self._read_chunk():
                pass
        data, self._buffer = self._buffer[:size], self._buffer[size:]
        return data

    def readline(self, size: int = -1) -> str:
        """Return the next line, newline included, of at most ``size`` characters.

        Returns an empty string at the end of the stream.
        """
        self._check_open()
        limit = size if size >= 0 else None
        while True:
            newline = self._buffer.find("\n")
            if newline != -1:
                end = newline + 1
                break
            if limit is not None and len(self._buffer) >= limit:
                end = limit
                break
            if not self._read_chunk():
                end = len(self._buffer)
                break
        if limit is not None:
            end = min(end, limit)
        line, self._buffer = self._buffer[:end], self._buffer[end:]
        return line

    def at_eof(self) -> bool:
        """Return True if nothing is left to read."""
        self._check_open()
        return not self._has_data()

    def rewind(self) -> None:
        """Go back to the start: seek a local file, refetch a URL."""
        self._check_open()
        if self.is_local:
            self._raw.seek(0)
        else:
            self._raw.close()
            self._raw = self._open_raw()
        self._reset_buffer()

    def close(self) -> None:
        """Release the underlying file or connection."""
        if self._closed:
            return
        self._closed = True
        self._buffer = ""
        self._raw.close()

    def __enter__(self) -> URLFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def url_open(url: str) -> URLFile:
    """Open ``url`` (or a local path) for reading; raise OSError on failure."""
    return URLFile(url)