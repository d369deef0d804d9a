"""String-only path normalization plus a handful of small stream wrappers.

The path helpers classify and normalize hybrid UNIX/Windows path strings
(drive letters, UNC servers, home directories, ``.`` and ``..`` segments)
without touching the filesystem. The stream wrappers bound, fake, or
demultiplex ordinary Python streams.
"""

from __future__ import annotations

from .case import IOCase
from .errors import MalformedPathError, NormalizationError, PathioError
from .filenames import (
    EXTENSION_SEPARATOR,
    concat,
    directory_contains,
    equals,
    equals_normalized,
    equals_normalized_on_system,
    equals_on_system,
    get_base_name,
    get_extension,
    get_full_path,
    get_full_path_no_end_separator,
    get_name,
    get_path,
    get_path_no_end_separator,
    get_prefix,
    index_of_extension,
    index_of_last_separator,
    is_extension,
    normalize,
    normalize_no_end_separator,
    remove_extension,
    wildcard_match,
    wildcard_match_on_system,
)
from .platform import (
    PLATFORM_OVERRIDE_ENV,
    SYSTEM_HOST,
    UNIX_SEPARATOR,
    WINDOWS_SEPARATOR,
    HostProfile,
)
from .prefix import PrefixInfo, PrefixKind, classify_prefix, get_prefix_length
from .separators import (
    SeparatorStyle,
    separators_to_system,
    separators_to_unix,
    separators_to_windows,
    to_separator,
)
from .streams import (
    BoundedReader,
    DemuxInputStream,
    DemuxOutputStream,
    NullInputStream,
    NullReader,
)

__all__ = [
    "EXTENSION_SEPARATOR",
    "PLATFORM_OVERRIDE_ENV",
    "SYSTEM_HOST",
    "UNIX_SEPARATOR",
    "WINDOWS_SEPARATOR",
    "BoundedReader",
    "DemuxInputStream",
    "DemuxOutputStream",
    "HostProfile",
    "IOCase",
    "MalformedPathError",
    "NormalizationError",
    "NullInputStream",
    "NullReader",
    "PathioError",
    "PrefixInfo",
    "PrefixKind",
    "SeparatorStyle",
    "classify_prefix",
    "concat",
    "directory_contains",
    "equals",
    "equals_normalized",
    "equals_normalized_on_system",
    "equals_on_system",
    "get_base_name",
    "get_extension",
    "get_full_path",
    "get_full_path_no_end_separator",
    "get_name",
    "get_path",
    "get_path_no_end_separator",
    "get_prefix",
    "get_prefix_length",
    "index_of_extension",
    "index_of_last_separator",
    "is_extension",
    "normalize",
    "normalize_no_end_separator",
    "remove_extension",
    "separators_to_system",
    "separators_to_unix",
    "separators_to_windows",
    "to_separator",
    "wildcard_match",
    "wildcard_match_on_system",
]
