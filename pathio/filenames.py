"""String-only file name and path manipulation.

Every function here works on the text of a path and never touches the
filesystem. Both ``/`` and ``\\`` are accepted as separators on input, which
lets the same code handle UNIX and Windows names on any host.

A path is read as ``prefix`` + ``path`` + ``name``, for example::

    C:\\dev\\project\\file.txt
    ~~~ ~~~~~~~~~~~~ ~~~~~~~~
    |        |          +-- name, with base name "file" and extension "txt"
    |        +-- path
    +-- prefix

Functions returning text answer ``None`` for a ``None`` input and for inputs
whose prefix cannot be parsed or whose ``..`` segments would climb above the
prefix. Text containing a NUL character raises
:class:`~pathio.errors.MalformedPathError`.

Host-dependent behaviour (the native separator and case rule) is taken from
the ``host`` argument, which defaults to :data:`~pathio.platform.SYSTEM_HOST`.
"""

from __future__ import annotations

import functools
import logging
import re
import typing as t

from ._validators import reject_nul
from .case import IOCase
from .errors import NormalizationError
from .platform import SYSTEM_HOST, UNIX_SEPARATOR, WINDOWS_SEPARATOR
from .prefix import get_prefix_length
from .separators import SeparatorStyle, to_separator

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .platform import HostProfile

logger = logging.getLogger(__name__)

EXTENSION_SEPARATOR: t.Final[str] = "."

_CURRENT_DIR: t.Final[str] = "."
_PARENT_DIR: t.Final[str] = ".."
# Final segments that mark the normalized path as a directory.
_DIRECTORY_MARKERS: t.Final[frozenset[str]] = frozenset(
    {"", _CURRENT_DIR, _PARENT_DIR}
)


def _resolve_segments(rest: str, separator: str) -> tuple[list[str], bool] | None:
    """
    Collapse ``.``, ``..`` and empty segments of *rest*.

    Returns the retained segment names and whether the path names a
    directory, or ``None`` when a ``..`` has no segment left to remove.
    """
    names = rest.split(separator)
    directory = names[-1] in _DIRECTORY_MARKERS
    kept: list[str] = []
    for name in names:
        if name in ("", _CURRENT_DIR):
            continue
        if name == _PARENT_DIR:
            if not kept:
                return None
            kept.pop()
            continue
        kept.append(name)
    return kept, directory


def normalize(
    path: str | None,
    style: SeparatorStyle = SeparatorStyle.SYSTEM,
    *,
    keep_separator: bool = True,
    host: HostProfile = SYSTEM_HOST,
) -> str | None:
    """
    Normalize *path*, removing double and single dot segments.

    Separators are rewritten in *style*, runs of separators collapse to one,
    ``.`` segments are dropped and each ``..`` removes the segment before
    it. A trailing separator is kept when *keep_separator* is true and the
    input names a directory::

        /foo//               -->   /foo/
        /foo/./              -->   /foo/
        /foo/../bar          -->   /bar
        /foo/../bar/         -->   /bar/
        /foo/../bar/../baz   -->   /baz
        //foo//./bar         -->   //foo/bar
        /../                 -->   None
        ../foo               -->   None
        foo/bar/..           -->   foo/
        foo/../../bar        -->   None
        foo/../bar           -->   bar
        //server/foo/../bar  -->   //server/bar
        //server/../bar      -->   None
        C:\\foo\\..\\bar     -->   C:\\bar
        C:\\..\\bar          -->   None
        ~/foo/../bar/        -->   ~/bar/
        ~/../bar             -->   None
        ./~                  -->   ./~

    Parameters
    ----------
    path : str | None
        The path to normalize.
    style : SeparatorStyle, optional
        Separator used in the result. Defaults to the host separator.
    keep_separator : bool, optional
        Whether a trailing separator should survive normalization.
    host : HostProfile, optional
        Host consulted when *style* is ``SYSTEM``.

    Returns
    -------
    str | None
        The normalized path, or ``None`` if *path* is ``None``, has an
        invalid prefix or climbs above its root.

    Raises
    ------
    MalformedPathError
        If *path* contains a NUL character.
    """
    if path is None:
        return None
    reject_nul(path)
    if not path:
        return path

    prefix_length = get_prefix_length(path)
    if prefix_length < 0:
        return None

    separator = style.resolve(host)
    converted = to_separator(path, style, host=host)
    if prefix_length > len(converted):
        # ``~`` or ``~user`` with the separator left implicit.
        return converted + separator

    resolved = _resolve_segments(converted[prefix_length:], separator)
    if resolved is None:
        logger.debug("Cannot normalize %r: '..' climbs above its root", path)
        return None

    names, directory = resolved
    body = separator.join(names)
    if names and directory and keep_separator:
        body += separator
    head = converted[:prefix_length]
    if body and get_prefix_length(head + body) != prefix_length:
        # Dropped ``.`` segments must not turn a name into a prefix.
        head += _CURRENT_DIR + separator
    return head + body


def normalize_no_end_separator(
    path: str | None,
    style: SeparatorStyle = SeparatorStyle.SYSTEM,
    *,
    host: HostProfile = SYSTEM_HOST,
) -> str | None:
    """Normalize *path* like :func:`normalize`, dropping any trailing separator.

    A path that normalizes to its prefix alone (``/``, ``C:/``, ``~/``) keeps
    the separator belonging to the prefix.
    """
    return normalize(path, style, keep_separator=False, host=host)


def concat(
    base_path: str | None,
    full_filename: str | None,
    *,
    host: HostProfile = SYSTEM_HOST,
) -> str | None:
    """
    Join *full_filename* onto *base_path* and normalize the result.

    When *full_filename* carries its own prefix (``/c/d``, ``C:c``, ``~/x``)
    it replaces the base path entirely. The result uses the host separator.

    Returns
    -------
    str | None
        The combined normalized path, or ``None`` when either argument has an
        invalid prefix, *base_path* is ``None`` for a relative name, or the
        result climbs above its root.
    """
    if full_filename is None:
        return None
    prefix_length = get_prefix_length(full_filename)
    if prefix_length < 0:
        return None
    if prefix_length > 0:
        return normalize(full_filename, host=host)
    if base_path is None:
        return None
    if not base_path:
        return normalize(full_filename, host=host)
    if base_path[-1] in (UNIX_SEPARATOR, WINDOWS_SEPARATOR):
        return normalize(base_path + full_filename, host=host)
    return normalize(base_path + UNIX_SEPARATOR + full_filename, host=host)


def index_of_last_separator(path: str | None) -> int:
    """Return the index of the last separator in *path*, or -1 if none."""
    if path is None:
        return -1
    return max(path.rfind(UNIX_SEPARATOR), path.rfind(WINDOWS_SEPARATOR))


def index_of_extension(path: str | None) -> int:
    """Return the index of the dot starting the extension, or -1 if none.

    Only a dot after the last separator counts, so ``a.b/c`` has no
    extension.
    """
    if path is None:
        return -1
    extension_pos = path.rfind(EXTENSION_SEPARATOR)
    if index_of_last_separator(path) > extension_pos:
        return -1
    return extension_pos


def get_prefix(path: str | None) -> str | None:
    """
    Return the prefix of *path* as written, e.g. ``C:\\`` or ``~user/``.

    A home prefix written without its separator (``~``, ``~user``) is
    completed with ``/``.
    """
    if path is None:
        return None
    reject_nul(path)
    length = get_prefix_length(path)
    if length < 0:
        return None
    if length > len(path):
        return path + UNIX_SEPARATOR
    return path[:length]


def _path_between(path: str | None, separator_add: int) -> str | None:
    if path is None:
        return None
    reject_nul(path)
    prefix_length = get_prefix_length(path)
    if prefix_length < 0:
        return None
    index = index_of_last_separator(path)
    end = index + separator_add
    if prefix_length >= len(path) or index < 0 or prefix_length >= end:
        return ""
    return path[prefix_length:end]


def get_path(path: str | None) -> str | None:
    """Return the directory part of *path* between prefix and name.

    The trailing separator is included and separators are returned as
    written: ``C:\\a\\b\\c.txt`` gives ``a\\b\\``.
    """
    return _path_between(path, 1)


def get_path_no_end_separator(path: str | None) -> str | None:
    """Return :func:`get_path` without the trailing separator."""
    return _path_between(path, 0)


def _full_path(path: str | None, *, include_separator: bool) -> str | None:
    if path is None:
        return None
    reject_nul(path)
    prefix_length = get_prefix_length(path)
    if prefix_length < 0:
        return None
    if prefix_length >= len(path):
        return get_prefix(path) if include_separator else path
    index = index_of_last_separator(path)
    if index < 0:
        return path[:prefix_length]
    end = index + 1 if include_separator else index
    # A lone root separator is never stripped.
    return path[: max(end, 1)]


def get_full_path(path: str | None) -> str | None:
    """Return the prefix and path of *path*, everything before the name."""
    return _full_path(path, include_separator=True)


def get_full_path_no_end_separator(path: str | None) -> str | None:
    """Return :func:`get_full_path` without the trailing separator.

    ``/abc`` gives ``/`` rather than an empty string.
    """
    return _full_path(path, include_separator=False)


def get_name(path: str | None) -> str | None:
    """Return the text after the last separator of *path*."""
    if path is None:
        return None
    reject_nul(path)
    return path[index_of_last_separator(path) + 1 :]


def get_base_name(path: str | None) -> str | None:
    """Return the name of *path* minus its extension."""
    return remove_extension(get_name(path))


def get_extension(path: str | None) -> str | None:
    """Return the extension of *path* without the dot, or ``""``."""
    if path is None:
        return None
    index = index_of_extension(path)
    if index == -1:
        return ""
    return path[index + 1 :]


def remove_extension(path: str | None) -> str | None:
    """Return *path* with the extension of its name removed."""
    if path is None:
        return None
    reject_nul(path)
    index = index_of_extension(path)
    if index == -1:
        return path
    return path[:index]


def is_extension(path: str | None, extensions: t.Collection[str] | None) -> bool:
    """
    Return ``True`` if the extension of *path* is one of *extensions*.

    Parameters
    ----------
    path : str | None
        The path to check. ``None`` never matches.
    extensions : Collection[str] | None
        Accepted extensions without the dot, compared case-sensitively.
        ``None`` or an empty collection matches names with no extension; an
        empty string in the collection does the same.

    Raises
    ------
    TypeError
        If *extensions* is a single string rather than a collection.
    MalformedPathError
        If *path* contains a NUL character.
    """
    if path is None:
        return False
    reject_nul(path)
    if isinstance(extensions, str):
        msg = "extensions must be a collection of strings, e.g. {'txt'}"
        raise TypeError(msg)
    if not extensions:
        return index_of_extension(path) == -1
    return get_extension(path) in set(extensions)


def equals(
    path1: str | None,
    path2: str | None,
    *,
    normalized: bool = False,
    case: IOCase | None = IOCase.SENSITIVE,
    host: HostProfile = SYSTEM_HOST,
) -> bool:
    """
    Compare two paths, optionally normalizing them first.

    Parameters
    ----------
    path1, path2 : str | None
        The paths to compare. Two ``None`` values are equal.
    normalized : bool, optional
        Normalize both paths with the host separator before comparing.
    case : IOCase | None, optional
        Case rule for the comparison; ``None`` means case-sensitive.
    host : HostProfile, optional
        Host consulted for the separator and ``IOCase.SYSTEM``.

    Raises
    ------
    NormalizationError
        If *normalized* is set and either path cannot be normalized.
    """
    if path1 is None or path2 is None:
        return path1 is None and path2 is None
    if normalized:
        normalized1 = normalize(path1, host=host)
        normalized2 = normalize(path2, host=host)
        if normalized1 is None or normalized2 is None:
            msg = (
                "Error normalizing one or both of the file names: "
                f"{path1!r}, {path2!r}"
            )
            raise NormalizationError(msg)
        path1, path2 = normalized1, normalized2
    if case is None:
        case = IOCase.SENSITIVE
    return case.check_equals(path1, path2, host=host)


def equals_on_system(
    path1: str | None, path2: str | None, *, host: HostProfile = SYSTEM_HOST
) -> bool:
    """Compare two paths as written, using the case rule of *host*."""
    return equals(path1, path2, case=IOCase.SYSTEM, host=host)


def equals_normalized(
    path1: str | None, path2: str | None, *, host: HostProfile = SYSTEM_HOST
) -> bool:
    """Compare two normalized paths case-sensitively."""
    return equals(path1, path2, normalized=True, host=host)


def equals_normalized_on_system(
    path1: str | None, path2: str | None, *, host: HostProfile = SYSTEM_HOST
) -> bool:
    """Compare two normalized paths using the case rule of *host*."""
    return equals(path1, path2, normalized=True, case=IOCase.SYSTEM, host=host)


@functools.lru_cache(maxsize=256)
def _compile_wildcard(pattern: str, *, case_sensitive: bool) -> re.Pattern[str]:
    """Translate a ``?``/``*`` wildcard into a compiled regular expression."""
    parts: list[str] = []
    for ch in pattern:
        if ch == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE
    return re.compile("".join(parts), flags)


def wildcard_match(
    path: str | None,
    pattern: str | None,
    case: IOCase | None = IOCase.SENSITIVE,
    *,
    host: HostProfile = SYSTEM_HOST,
) -> bool:
    """
    Return ``True`` if *path* matches the wildcard *pattern*.

    ``?`` matches exactly one character and ``*`` matches zero or more.
    Separators get no special treatment, so ``*`` also spans directories::

        wildcard_match("c.txt", "*.txt")      --> True
        wildcard_match("c.txt", "*.jpg")      --> False
        wildcard_match("a/b/c.txt", "a/b/*")  --> True
        wildcard_match("c.txt", "*.???")      --> True
        wildcard_match("c.txt", "*.????")     --> False

    Two ``None`` values match; a single ``None`` does not.
    """
    if path is None or pattern is None:
        return path is None and pattern is None
    if case is None:
        case = IOCase.SENSITIVE
    regex = _compile_wildcard(pattern, case_sensitive=case.is_case_sensitive(host))
    return regex.fullmatch(path) is not None


def wildcard_match_on_system(
    path: str | None, pattern: str | None, *, host: HostProfile = SYSTEM_HOST
) -> bool:
    """Match *path* against *pattern* using the case rule of *host*."""
    return wildcard_match(path, pattern, IOCase.SYSTEM, host=host)


def directory_contains(
    parent: str | None, child: str | None, *, host: HostProfile = SYSTEM_HOST
) -> bool:
    """
    Return ``True`` if the normalized path *child* lies below *parent*.

    Only the text is compared, using the case rule of *host*; a path does not
    contain itself and ``/foo`` does not contain ``/foobar``.

    Raises
    ------
    ValueError
        If *parent* is ``None``.
    """
    if parent is None:
        msg = "Directory must not be null"
        raise ValueError(msg)
    if child is None:
        return False
    case = IOCase.SYSTEM
    if case.check_equals(parent, child, host=host):
        return False
    if not case.check_starts_with(child, parent, host=host):
        return False
    if parent[-1:] in (UNIX_SEPARATOR, WINDOWS_SEPARATOR):
        return True
    return child[len(parent)] in (UNIX_SEPARATOR, WINDOWS_SEPARATOR)


__all__ = [
    "EXTENSION_SEPARATOR",
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
    "index_of_extension",
    "index_of_last_separator",
    "is_extension",
    "normalize",
    "normalize_no_end_separator",
    "remove_extension",
    "wildcard_match",
    "wildcard_match_on_system",
]
