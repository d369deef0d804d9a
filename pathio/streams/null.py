"""Sources of a fixed length that generate their content on demand.

:class:`NullReader` and :class:`NullInputStream` behave like a text or binary
stream of ``size`` units without holding any data, which makes them useful
for exercising code that processes large inputs. By default they produce NUL
characters or zero bytes; subclasses override :meth:`_NullSource._process`
to generate other content.

End of file is reported once, as an empty chunk (or :class:`EOFError` when
``throw_eof`` is set). Reading or skipping again raises :class:`OSError`.
Closing a source rewinds it to the start.
"""

from __future__ import annotations

import io
import typing as t

from typing_extensions import Self, TypeVar, override

from pathio._validators import validate_non_negative_count

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import types

MARK_NOT_SUPPORTED: t.Final[str] = "Mark not supported"
NO_MARK: t.Final[str] = "No position has been marked"
READ_AFTER_EOF: t.Final[str] = "Read after end of file"
SKIP_AFTER_EOF: t.Final[str] = "Skip after end of file"

_ChunkT = TypeVar("_ChunkT", str, bytes)


class _NullSource(t.Generic[_ChunkT]):
    """Position bookkeeping shared by the text and binary null sources."""

    _empty: t.ClassVar[str | bytes]

    def __init__(
        self,
        size: int = 0,
        *,
        mark_supported: bool = True,
        throw_eof: bool = False,
    ) -> None:
        validate_non_negative_count(size, name="size")
        self._size = size
        self._position = 0
        self._mark = -1
        self._read_limit = 0
        self._eof = False
        self._mark_supported = mark_supported
        self._throw_eof = throw_eof

    @property
    def position(self) -> int:
        """Return the number of units read or skipped so far."""
        return self._position

    @property
    def size(self) -> int:
        """Return the total number of units this source produces."""
        return self._size

    def available(self) -> int:
        """Return how many units remain before end of file."""
        return max(self._size - self._position, 0)

    def readable(self) -> bool:
        """Return ``True``; null sources are always readable."""
        return True

    def mark_supported(self) -> bool:
        """Return ``True`` if :meth:`mark` and :meth:`reset` are available."""
        return self._mark_supported

    def _process(self, count: int) -> _ChunkT:
        """Return the *count* units ending at the current position."""
        raise NotImplementedError

    def _end_of_file(self) -> None:
        """Record end of file, raising :class:`EOFError` when configured."""
        self._eof = True
        if self._throw_eof:
            raise EOFError

    def read(self, size: int | None = -1) -> _ChunkT:
        """
        Read up to *size* units, or all remaining units when negative.

        Raises
        ------
        EOFError
            At end of file when ``throw_eof`` is set.
        OSError
            When reading after end of file has already been reported.
        """
        if self._eof:
            raise OSError(READ_AFTER_EOF)
        if self._position >= self._size:
            self._end_of_file()
            return t.cast("_ChunkT", self._empty)
        remaining = self._size - self._position
        count = remaining if size is None or size < 0 else min(size, remaining)
        self._position += count
        return self._process(count)

    def skip(self, count: int) -> int:
        """
        Skip up to *count* units.

        Returns
        -------
        int
            The number of units skipped, or -1 at end of file.

        Raises
        ------
        OSError
            When skipping after end of file has already been reported.
        """
        validate_non_negative_count(count, name="count")
        if self._eof:
            raise OSError(SKIP_AFTER_EOF)
        if self._position >= self._size:
            self._end_of_file()
            return -1
        skipped = min(count, self._size - self._position)
        self._position += skipped
        return skipped

    def mark(self, read_limit: int) -> None:
        """Remember the current position, valid for *read_limit* more units."""
        validate_non_negative_count(read_limit, name="read_limit")
        if not self._mark_supported:
            raise io.UnsupportedOperation(MARK_NOT_SUPPORTED)
        self._mark = self._position
        self._read_limit = read_limit

    def reset(self) -> None:
        """
        Return to the marked position.

        Raises
        ------
        io.UnsupportedOperation
            If marks are not supported.
        OSError
            If no mark was set or more than the read limit was consumed.
        """
        if not self._mark_supported:
            raise io.UnsupportedOperation(MARK_NOT_SUPPORTED)
        if self._mark < 0:
            raise OSError(NO_MARK)
        if self._position > self._mark + self._read_limit:
            msg = (
                f"Marked position [{self._mark}] is no longer valid - "
                f"passed the read limit [{self._read_limit}]"
            )
            raise OSError(msg)
        self._position = self._mark
        self._eof = False

    def close(self) -> None:
        """Rewind to the start and forget any mark."""
        self._eof = False
        self._position = 0
        self._mark = -1

    def __enter__(self) -> Self:
        """Return the source for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Rewind the source."""
        self.close()


class NullReader(_NullSource[str]):
    """A text source of ``size`` characters, NUL unless overridden."""

    _empty = ""

    @override
    def _process(self, count: int) -> str:
        return "\0" * count

    def read_char(self) -> str:
        """Read one character, or ``""`` at end of file."""
        return self.read(1)


class NullInputStream(_NullSource[bytes]):
    """A binary source of ``size`` bytes, zero unless overridden."""

    _empty = b""

    @override
    def _process(self, count: int) -> bytes:
        return bytes(count)

    def read_byte(self) -> int:
        """Read one byte as an integer, or -1 at end of file."""
        data = self.read(1)
        return data[0] if data else -1


__all__ = [
    "MARK_NOT_SUPPORTED",
    "NO_MARK",
    "READ_AFTER_EOF",
    "SKIP_AFTER_EOF",
    "NullInputStream",
    "NullReader",
]
