"""A text reader that stops after a fixed number of characters."""

from __future__ import annotations

import io
import typing as t

from typing_extensions import Self

from pathio._validators import validate_non_negative_count

from .null import MARK_NOT_SUPPORTED, NO_MARK

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import types


class BoundedReader:
    """
    Limit the number of characters read from a text stream.

    Once *max_chars* characters have been delivered the reader reports end of
    file, even if the wrapped stream holds more. Closing the reader closes
    the wrapped stream.

    Marks are supported when the wrapped stream is seekable: after
    ``mark(limit)`` at most *limit* further characters can be read until
    :meth:`reset` rewinds both the stream and the character count.

    Parameters
    ----------
    target : TextIO
        The stream to read from.
    max_chars : int
        Maximum number of characters to deliver.
    """

    def __init__(self, target: t.TextIO, max_chars: int) -> None:
        validate_non_negative_count(max_chars, name="max_chars")
        self._target = target
        self._max_chars = max_chars
        self._chars_read = 0
        self._marked_at = -1
        self._mark_cookie = 0
        self._read_ahead_limit = 0

    @property
    def chars_read(self) -> int:
        """Return the number of characters delivered so far."""
        return self._chars_read

    @property
    def closed(self) -> bool:
        """Return ``True`` once the wrapped stream is closed."""
        return self._target.closed

    def readable(self) -> bool:
        """Return ``True``; bounded readers are always readable."""
        return True

    def _allowance(self) -> int:
        """Return how many characters may still be delivered."""
        remaining = self._max_chars - self._chars_read
        if self._marked_at >= 0:
            since_mark = self._chars_read - self._marked_at
            remaining = min(remaining, self._read_ahead_limit - since_mark)
        return max(remaining, 0)

    def read(self, size: int | None = -1) -> str:
        """Read up to *size* characters, or everything allowed when negative."""
        allowance = self._allowance()
        if size is not None and size >= 0:
            allowance = min(allowance, size)
        if allowance == 0:
            return ""
        data = self._target.read(allowance)
        self._chars_read += len(data)
        return data

    def read_char(self) -> str:
        """Read a single character, or ``""`` at the bound or end of stream."""
        return self.read(1)

    def skip(self, count: int) -> int:
        """Skip up to *count* characters and return how many were skipped."""
        validate_non_negative_count(count, name="count")
        return len(self.read(count))

    def mark_supported(self) -> bool:
        """Return ``True`` when the wrapped stream can be rewound."""
        return self._target.seekable()

    def mark(self, read_ahead_limit: int) -> None:
        """Remember the current position for a later :meth:`reset`."""
        validate_non_negative_count(read_ahead_limit, name="read_ahead_limit")
        if not self.mark_supported():
            raise io.UnsupportedOperation(MARK_NOT_SUPPORTED)
        self._mark_cookie = self._target.tell()
        self._marked_at = self._chars_read
        self._read_ahead_limit = read_ahead_limit

    def reset(self) -> None:
        """Return to the position saved by :meth:`mark`."""
        if self._marked_at < 0:
            raise OSError(NO_MARK)
        self._target.seek(self._mark_cookie)
        self._chars_read = self._marked_at

    def close(self) -> None:
        """Close the wrapped stream."""
        self._target.close()

    def __enter__(self) -> Self:
        """Return the reader for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close the wrapped stream."""
        self.close()


__all__ = ["BoundedReader"]
