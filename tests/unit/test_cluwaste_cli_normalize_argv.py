"""Unit tests for the sequential switch aliases."""

import pytest

from cluwaste.cli._normalize_argv import _normalize_argv

pytestmark = pytest.mark.cli


@pytest.mark.parametrize("alias", ["/s", "/S", "-S", "-s"])
def test_aliases_become_dash_s(alias):
    assert _normalize_argv([alias, "/data"]) == ["-s", "/data"]


def test_paths_are_left_alone():
    argv = ["/srv", "/s/x", "*.txt"]
    assert _normalize_argv(argv) == argv
