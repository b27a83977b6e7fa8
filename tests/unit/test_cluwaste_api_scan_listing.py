"""Unit tests for directory listing helpers and error classification."""

import os

import pytest

from cluwaste.api.scan.is_ignorable_error import is_ignorable_error
from cluwaste.api.scan.list_files import list_files
from cluwaste.api.scan.list_subdirectories import list_subdirectories
from cluwaste.api.scan.matches_pattern import matches_pattern

pytestmark = pytest.mark.scan


def _names(listing):
    return sorted(entry.name for entry in listing.entries)


def test_list_subdirectories_returns_only_directories(tmp_path, make_tree):
    make_tree(tmp_path, {"a": None, "b/c": None, "file.txt": 3})

    listing = list_subdirectories(str(tmp_path))

    assert listing.ok
    assert _names(listing) == ["a", "b"]


def test_list_files_applies_pattern(tmp_path, make_tree):
    make_tree(tmp_path, {"one.jpg": 1, "two.JPG.txt": 2, "three.flac": 3, "sub/four.jpg": 4})

    assert _names(list_files(str(tmp_path), "*.jpg")) == ["one.jpg"]
    assert _names(list_files(str(tmp_path))) == ["one.jpg", "three.flac", "two.JPG.txt"]


def test_listing_missing_directory_returns_error(tmp_path):
    missing = str(tmp_path / "gone")

    for listing in (list_subdirectories(missing), list_files(missing)):
        assert not listing.ok
        assert listing.entries == []
        assert listing.path == missing
        assert isinstance(listing.error, FileNotFoundError)
        assert is_ignorable_error(listing.error)


def test_listing_a_file_returns_error(tmp_path):
    target = tmp_path / "plain.txt"
    target.write_text("x")

    listing = list_subdirectories(str(target))

    assert isinstance(listing.error, NotADirectoryError)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_listing_skips_links_unless_followed(tmp_path, make_tree):
    make_tree(tmp_path, {"real/data.bin": 10})
    (tmp_path / "link_dir").symlink_to(tmp_path / "real", target_is_directory=True)
    (tmp_path / "link_file").symlink_to(tmp_path / "real" / "data.bin")

    assert _names(list_subdirectories(str(tmp_path))) == ["real"]
    assert _names(list_subdirectories(str(tmp_path), follow_symlinks=True)) == ["link_dir", "real"]
    assert _names(list_files(str(tmp_path))) == []
    assert _names(list_files(str(tmp_path), follow_symlinks=True)) == ["link_file"]


@pytest.mark.parametrize(
    "error",
    [PermissionError("denied"), FileNotFoundError("gone"), NotADirectoryError("nope"), OSError(5, "I/O error")],
)
def test_access_errors_are_ignorable(error):
    assert is_ignorable_error(error)


@pytest.mark.parametrize("error", [ValueError("bug"), TypeError("bug"), RuntimeError("bug")])
def test_programming_errors_are_not_ignorable(error):
    assert not is_ignorable_error(error)


@pytest.mark.parametrize(
    ("pattern", "name", "expected"),
    [
        ("*", "anything", True),
        ("*", ".hidden", True),
        ("*.*", "README", True),
        ("*.*", "song.flac", True),
        ("*.?", "README", False),
        ("*.flac", "song.flac", True),
        ("*.flac", "song.mp3", False),
        ("cover.???", "cover.jpg", True),
        ("[ab]*", "beta", True),
        ("[ab]*", "gamma", False),
    ],
)
def test_matches_pattern(pattern, name, expected):
    assert matches_pattern(pattern, name) is expected
