"""pytest-bdd steps for the bounded, null and demultiplexing streams."""

from __future__ import annotations

import io
import threading
import typing as t

import pytest
from pytest_bdd import given, parsers, then, when

from pathio import (
    BoundedReader,
    DemuxInputStream,
    DemuxOutputStream,
    NullReader,
)

_JOIN_TIMEOUT = 5.0


def _run_named_threads(count: int, target: t.Callable[[str], None]) -> list[str]:
    """Run *target* once per thread and return the thread names used."""
    names = [f"worker-{index}" for index in range(1, count + 1)]
    threads = [
        threading.Thread(target=target, args=(name,), name=name) for name in names
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=_JOIN_TIMEOUT)
        assert not thread.is_alive(), f"{thread.name} did not finish"
    return names


@pytest.fixture
def stream_transcript() -> list[str]:
    """Collect the text chunks read during a scenario."""
    return []


@given(
    parsers.parse('a bounded reader over "{text}" limited to {limit:d} characters'),
    target_fixture="reader",
)
def bounded_reader(text: str, limit: int) -> BoundedReader:
    """Wrap *text* so that at most *limit* characters can be read."""
    return BoundedReader(io.StringIO(text), limit)


@given(parsers.parse("a null reader of {size:d} characters"), target_fixture="reader")
def null_reader(size: int) -> NullReader:
    """Create a generated source of *size* characters."""
    return NullReader(size)


@when("I read everything")
def read_everything(
    reader: BoundedReader | NullReader, stream_transcript: list[str]
) -> None:
    """Read all remaining characters."""
    stream_transcript.append(reader.read())


@when(parsers.parse("I read {count:d} characters"))
def read_characters(
    reader: BoundedReader | NullReader, stream_transcript: list[str], count: int
) -> None:
    """Read up to *count* characters."""
    stream_transcript.append(reader.read(count))


@when(parsers.parse("I mark the position with a limit of {limit:d}"))
def mark_position(reader: BoundedReader | NullReader, limit: int) -> None:
    """Mark the current position."""
    reader.mark(limit)


@when("I reset to the mark")
def reset_to_mark(reader: BoundedReader | NullReader) -> None:
    """Rewind to the marked position."""
    reader.reset()


@then(parsers.parse('the text read is "{text}"'))
def check_text_read(stream_transcript: list[str], text: str) -> None:
    """Assert everything read so far, in order."""
    assert "".join(stream_transcript) == text


@then(parsers.parse("the reader position is {position:d}"))
def check_reader_position(reader: NullReader, position: int) -> None:
    """Assert how far the null reader has advanced."""
    assert reader.position == position


@then("reading again fails after end of file")
def check_read_after_eof(reader: NullReader) -> None:
    """A second read past end of file is an error."""
    with pytest.raises(OSError, match="Read after end of file"):
        reader.read()


@given("a demultiplexing output stream", target_fixture="demux_out")
def demux_output_stream() -> DemuxOutputStream:
    """Create an output stream shared by all threads."""
    return DemuxOutputStream()


@given("a demultiplexing input stream", target_fixture="demux_in")
def demux_input_stream() -> DemuxInputStream:
    """Create an input stream shared by all threads."""
    return DemuxInputStream()


@when(
    parsers.parse("{count:d} threads each write their name through it"),
    target_fixture="thread_data",
)
def write_from_threads(demux_out: DemuxOutputStream, count: int) -> dict[str, bytes]:
    """Have each thread write its own name to its own sink."""
    sinks: dict[str, io.BytesIO] = {}
    lock = threading.Lock()

    def worker(name: str) -> None:
        sink = io.BytesIO()
        with lock:
            sinks[name] = sink
        demux_out.bind_stream(sink)
        demux_out.write(name.encode())
        demux_out.flush()

    _run_named_threads(count, worker)
    return {name: sink.getvalue() for name, sink in sinks.items()}


@then("each thread's stream holds only its own name")
def check_thread_sinks(thread_data: dict[str, bytes]) -> None:
    """Every sink received exactly the name of its thread."""
    assert thread_data
    for name, data in thread_data.items():
        assert data == name.encode()


@when(
    parsers.parse("{count:d} threads each read their own data through it"),
    target_fixture="thread_data",
)
def read_from_threads(demux_in: DemuxInputStream, count: int) -> dict[str, bytes]:
    """Have each thread read back a source holding its own name."""
    received: dict[str, bytes] = {}
    lock = threading.Lock()

    def worker(name: str) -> None:
        demux_in.bind_stream(io.BytesIO(f"data for {name}".encode()))
        data = demux_in.read()
        with lock:
            received[name] = data

    _run_named_threads(count, worker)
    return received


@then("each thread reads only its own data")
def check_thread_reads(thread_data: dict[str, bytes]) -> None:
    """Every thread saw only the data it bound."""
    assert thread_data
    for name, data in thread_data.items():
        assert data == f"data for {name}".encode()


@when("an unbound thread reads from it", target_fixture="thread_data")
def read_unbound(demux_in: DemuxInputStream) -> dict[str, bytes]:
    """Read from a thread that never bound a stream."""
    received: dict[str, bytes] = {}
    demux_in.bind_stream(io.BytesIO(b"owned by the main thread"))

    def worker(name: str) -> None:
        received[name] = demux_in.read()

    _run_named_threads(1, worker)
    return received


@then("the unbound thread reads nothing")
def check_unbound_read(thread_data: dict[str, bytes]) -> None:
    """The unbound thread reached end of file straight away."""
    assert list(thread_data.values()) == [b""]
