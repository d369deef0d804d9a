"""Small wrappers around text and binary streams."""

from __future__ import annotations

from .bounded import BoundedReader
from .demux import DemuxInputStream, DemuxOutputStream
from .null import NullInputStream, NullReader

__all__ = [
    "BoundedReader",
    "DemuxInputStream",
    "DemuxOutputStream",
    "NullInputStream",
    "NullReader",
]
