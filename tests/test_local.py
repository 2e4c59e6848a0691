"""Tests for LPath."""

from __future__ import annotations

import dataclasses

import pytest

from safe_path._config import FormatOptions
from safe_path._errors import InvalidPathName, InvalidSegment
from safe_path._local import LPath
from safe_path._name import PathName
from safe_path._segment import PARENT, Name
from safe_path._separator import PathSegSep


class TestLPathConstruction:
    def test_defaults(self) -> None:
        p = LPath()
        assert p.segments == ()
        assert p.rooted is False

    def test_segments_become_tuple(self, foo_seg: Name) -> None:
        p = LPath([PARENT, foo_seg], rooted=True)
        assert p.segments == (PARENT, foo_seg)
        assert p.rooted is True

    def test_rejects_non_segments(self) -> None:
        with pytest.raises(InvalidSegment):
            LPath(["foo"])  # type: ignore[list-item]

    def test_from_reversed(self, foo_seg: Name) -> None:
        p = LPath.from_reversed([foo_seg, PARENT])
        assert p.segments == (PARENT, foo_seg)
        assert p.reversed_segments == (foo_seg, PARENT)

    def test_of(self, src_main: LPath) -> None:
        assert src_main.render() == ("..", "src", "main.py")
        assert src_main.rooted is False

    def test_of_rejects_current_directory(self) -> None:
        with pytest.raises(InvalidPathName):
            LPath.of("a", ".", "b")

    def test_immutable(self) -> None:
        p = LPath()
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.rooted = True  # type: ignore[misc]


class TestLPathPureAscent:
    def test_empty(self) -> None:
        assert LPath().is_pure_ascent() is True
        assert LPath(rooted=True).is_pure_ascent() is True

    def test_only_parents(self) -> None:
        assert LPath((PARENT, PARENT)).is_pure_ascent() is True

    def test_with_name(self, src_main: LPath) -> None:
        assert src_main.is_pure_ascent() is False

    def test_matches_rendered_parents(self, foo_seg: Name) -> None:
        """Pure ascent exactly when every segment renders as '..'."""
        for segs in [(), (PARENT,), (foo_seg,), (PARENT, foo_seg), (foo_seg, PARENT), (PARENT,) * 3]:
            p = LPath(segs)
            assert p.is_pure_ascent() == all(r == ".." for r in p.render())


class TestLPathAccessors:
    def test_names(self, src_main: LPath) -> None:
        assert src_main.names == (PathName.from_str("src"), PathName.from_str("main.py"))

    def test_len_and_iter(self, src_main: LPath) -> None:
        assert len(src_main) == 3
        assert list(src_main)[0] is PARENT

    def test_truediv_appends(self) -> None:
        p = LPath.of("a", rooted=True) / "b" / PARENT
        assert p.render() == ("a", "b", "..")
        assert p.rooted is True

    def test_equality(self) -> None:
        assert LPath.of("a", "b") == LPath.of("a") / "b"
        assert LPath.of("a") != LPath.of("a", rooted=True)

    def test_render_is_repeatable(self, src_main: LPath) -> None:
        assert src_main.render() == src_main.render()


class TestLPathToString:
    def test_rooted_slash(self, foo_seg: Name) -> None:
        assert LPath((foo_seg,), rooted=True).to_string() == "/foo"

    def test_relative(self, src_main: LPath) -> None:
        assert str(src_main) == "../src/main.py"

    def test_backslash(self, src_main: LPath) -> None:
        assert src_main.to_string(FormatOptions(separator=PathSegSep.BACKSLASH)) == "..\\src\\main.py"
