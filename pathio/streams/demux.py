"""Streams that route each thread to its own underlying stream.

A single :class:`DemuxInputStream` or :class:`DemuxOutputStream` can be handed
to many threads. Each thread calls ``bind_stream`` with the stream it wants
to use, and every subsequent read or write made from that thread goes to
that stream only. Bindings are stored in a :class:`threading.local` and are
not inherited by threads started later.

A thread that never bound a stream reads end of file and its writes are
discarded.
"""

from __future__ import annotations

import logging
import threading
import typing as t

from typing_extensions import Self

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import types

logger = logging.getLogger(__name__)


class _ThreadBinding:
    """Per-thread slot holding the stream bound by the calling thread."""

    def __init__(self) -> None:
        self._state = threading.local()

    def get(self) -> t.Any:  # noqa: ANN401 - stream type depends on subclass
        return getattr(self._state, "stream", None)

    def bind(self, stream: t.Any) -> t.Any:  # noqa: ANN401
        previous = self.get()
        self._state.stream = stream
        logger.debug(
            "Bound %r to thread %s (replacing %r)",
            stream,
            threading.current_thread().name,
            previous,
        )
        return previous


class DemuxInputStream:
    """Read from whichever binary stream the calling thread has bound."""

    def __init__(self) -> None:
        self._binding = _ThreadBinding()

    def bind_stream(self, stream: t.BinaryIO | None) -> t.BinaryIO | None:
        """Bind *stream* to the calling thread and return the previous one."""
        return self._binding.bind(stream)

    @property
    def bound_stream(self) -> t.BinaryIO | None:
        """Return the stream bound to the calling thread, if any."""
        return self._binding.get()

    def readable(self) -> bool:
        """Return ``True``; unbound threads simply read end of file."""
        return True

    def read(self, size: int | None = -1) -> bytes:
        """Read up to *size* bytes from the calling thread's stream."""
        stream = self.bound_stream
        if stream is None:
            return b""
        return stream.read(-1 if size is None else size)

    def read_byte(self) -> int:
        """Read one byte as an integer, or -1 at end of file."""
        data = self.read(1)
        return data[0] if data else -1

    def close(self) -> None:
        """Close the calling thread's stream, if one is bound."""
        stream = self.bound_stream
        if stream is not None:
            stream.close()

    def __enter__(self) -> Self:
        """Return the stream for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close the calling thread's stream."""
        self.close()


class DemuxOutputStream:
    """Write to whichever binary stream the calling thread has bound."""

    def __init__(self) -> None:
        self._binding = _ThreadBinding()

    def bind_stream(self, stream: t.BinaryIO | None) -> t.BinaryIO | None:
        """Bind *stream* to the calling thread and return the previous one."""
        return self._binding.bind(stream)

    @property
    def bound_stream(self) -> t.BinaryIO | None:
        """Return the stream bound to the calling thread, if any."""
        return self._binding.get()

    def writable(self) -> bool:
        """Return ``True``; unbound threads have their output discarded."""
        return True

    def write(self, data: bytes) -> int:
        """Write *data* to the calling thread's stream and return its length."""
        stream = self.bound_stream
        if stream is None:
            return len(data)
        stream.write(data)
        return len(data)

    def write_byte(self, value: int) -> None:
        """Write a single byte given as an integer in ``range(256)``."""
        self.write(bytes((value,)))

    def flush(self) -> None:
        """Flush the calling thread's stream, if one is bound."""
        stream = self.bound_stream
        if stream is not None:
            stream.flush()

    def close(self) -> None:
        """Close the calling thread's stream, if one is bound."""
        stream = self.bound_stream
        if stream is not None:
            stream.close()

    def __enter__(self) -> Self:
        """Return the stream for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close the calling thread's stream."""
        self.close()


__all__ = ["DemuxInputStream", "DemuxOutputStream"]
