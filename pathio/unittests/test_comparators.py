"""Unit tests for path equality, wildcard matching and containment."""

from __future__ import annotations

import typing as t

import pytest

from pathio.case import IOCase
from pathio.errors import NormalizationError
from pathio.filenames import (
    directory_contains,
    equals,
    equals_normalized,
    equals_normalized_on_system,
    equals_on_system,
    wildcard_match,
    wildcard_match_on_system,
)
from pathio.platform import HostProfile


@pytest.mark.parametrize(
    ("path1", "path2", "expected"),
    [
        (None, None, True),
        (None, "", False),
        ("", None, False),
        ("", "", True),
        ("file.txt", "file.txt", True),
        ("file.txt", "FILE.TXT", False),
        ("a\\b\\file.txt", "a/b/file.txt", False),
    ],
)
def test_equals_compares_text_exactly(
    path1: str | None, path2: str | None, *, expected: bool
) -> None:
    """Plain equality is a case-sensitive text comparison."""
    assert equals(path1, path2) is expected


@pytest.mark.parametrize(
    ("path1", "path2", "expected"),
    [
        (None, None, True),
        (None, "", False),
        ("", "", True),
        ("file.txt", "file.txt", True),
        ("file.txt", "FILE.TXT", False),
        ("a\\b\\file.txt", "a/b/file.txt", True),
        ("a/b/", "a/b", False),
        ("a/./b/../c", "a/c", True),
    ],
)
def test_equals_normalized(
    path1: str | None, path2: str | None, *, expected: bool, host: HostProfile
) -> None:
    """Normalized equality ignores separator style and dot segments."""
    assert equals_normalized(path1, path2, host=host) is expected


def test_equals_on_system_follows_host_case(
    posix_host: HostProfile, windows_host: HostProfile
) -> None:
    """Only case-insensitive hosts treat differently cased names as equal."""
    assert not equals_on_system("file.txt", "FILE.TXT", host=posix_host)
    assert equals_on_system("file.txt", "FILE.TXT", host=windows_host)
    assert not equals_on_system(
        "a\\b\\file.txt", "a/b/file.txt", host=windows_host
    )


def test_equals_normalized_on_system(
    posix_host: HostProfile, windows_host: HostProfile
) -> None:
    """Normalization and host case rules combine."""
    assert equals_normalized_on_system(
        "a\\b\\file.txt", "a/b/file.txt", host=posix_host
    )
    assert not equals_normalized_on_system("a/b/", "a/b", host=posix_host)
    assert not equals_normalized_on_system("A/b", "a/B", host=posix_host)
    assert equals_normalized_on_system("A/b", "a\\B", host=windows_host)


@pytest.mark.parametrize(
    ("case", "expected"),
    [
        (IOCase.SENSITIVE, False),
        (IOCase.INSENSITIVE, True),
        (None, False),
    ],
)
def test_equals_with_explicit_case(case: IOCase | None, *, expected: bool) -> None:
    """An explicit case rule applies; ``None`` falls back to sensitive."""
    assert equals("file.txt", "FILE.TXT", case=case) is expected


@pytest.mark.parametrize(
    "compare",
    [equals_normalized, equals_normalized_on_system],
)
def test_unnormalizable_names_raise(compare: t.Callable[[str, str], bool]) -> None:
    """A name that cannot be normalized makes the comparison fail loudly."""
    with pytest.raises(NormalizationError, match="Error normalizing"):
        compare("//file.txt", "file.txt")


def test_normalization_error_is_a_value_error() -> None:
    """Callers catching ``ValueError`` also see normalization failures."""
    with pytest.raises(ValueError, match="file names"):
        equals("../a", "a", normalized=True)


@pytest.mark.parametrize(
    ("path", "pattern", "expected"),
    [
        (None, "Foo", False),
        ("Foo", None, False),
        (None, None, True),
        ("Foo", "Foo", True),
        ("", "", True),
        ("", "Foo", False),
        ("Foo", "Fo*", True),
        ("Foo", "Fo?", True),
        ("Foo Bar and Catflap", "Fo*", True),
        ("New Bookmarks", "N?w ?o?k??r?s", True),
        ("Foo", "Bar", False),
        ("Foo Bar Foo", "F*o Bar*", True),
        ("Adobe Acrobat Installer", "Ad*er", True),
        ("Foo", "*Foo", True),
        ("BarFoo", "*Foo", True),
        ("Foo", "Foo*", True),
        ("FooBar", "Foo*", True),
        ("FOO", "*Foo", False),
        ("BARFOO", "*Foo", False),
        ("FOO", "Foo*", False),
        ("FOOBAR", "Foo*", False),
        ("aaa", "aa*?", True),
        ("", "?*", False),
        ("a", "a?*", False),
        ("abab", "*ab", True),
        ("a/b/c.txt", "a/b/*", True),
        ("c.txt", "*.???", True),
        ("c.txt", "*.????", False),
        ("a+b(c).txt", "a+b(?).*", True),
        ("line\nbreak", "line*", True),
    ],
)
def test_wildcard_match(
    path: str | None, pattern: str | None, *, expected: bool
) -> None:
    """``?`` matches one character and ``*`` any run, including none."""
    assert wildcard_match(path, pattern) is expected


@pytest.mark.parametrize(
    ("path", "pattern"),
    [("FOO", "*Foo"), ("BARFOO", "*Foo"), ("FOO", "Foo*"), ("FOOBAR", "Foo*")],
)
def test_wildcard_match_insensitive(path: str, pattern: str) -> None:
    """Case-insensitive matching folds both sides."""
    assert wildcard_match(path, pattern, IOCase.INSENSITIVE)
    assert not wildcard_match(path, pattern, IOCase.SENSITIVE)


def test_wildcard_match_on_system(
    posix_host: HostProfile, windows_host: HostProfile
) -> None:
    """System matching uses the case rule of the host."""
    assert not wildcard_match_on_system("FOO.TXT", "*.txt", host=posix_host)
    assert wildcard_match_on_system("FOO.TXT", "*.txt", host=windows_host)


@pytest.mark.parametrize(
    ("parent", "child", "expected"),
    [
        ("/foo", "/foo/bar", True),
        ("/foo/", "/foo/bar", True),
        ("/foo", "/foo/bar/baz.txt", True),
        ("/foo", "/foobar", False),
        ("/foo", "/foo", False),
        ("/foo", "/fo", False),
        ("/foo", None, False),
        ("C:\\foo", "C:\\foo\\bar", True),
    ],
)
def test_directory_contains(
    parent: str, child: str | None, *, expected: bool, posix_host: HostProfile
) -> None:
    """Containment needs a separator boundary after the parent."""
    assert directory_contains(parent, child, host=posix_host) is expected


def test_directory_contains_follows_host_case(
    posix_host: HostProfile, windows_host: HostProfile
) -> None:
    """Case-insensitive hosts ignore case when checking containment."""
    assert not directory_contains("C:\\Foo", "c:\\foo\\bar", host=posix_host)
    assert directory_contains("C:\\Foo", "c:\\foo\\bar", host=windows_host)


def test_directory_contains_requires_parent() -> None:
    """A missing parent directory is a caller error."""
    with pytest.raises(ValueError, match="Directory must not be null"):
        directory_contains(None, "/foo")
