"""Tests for character classification and normalization."""

from __future__ import annotations

import pytest

from safe_path._chars import REPLACEMENT, classify, is_valid_char, normalize


class TestIsValidChar:
    @pytest.mark.parametrize("c", ["a", "Z", "0", " ", "-", "_", "~", "é", "日", "."])
    def test_valid(self, c: str) -> None:
        assert is_valid_char(c) is True

    @pytest.mark.parametrize("c", ["/", "\\", ":"])
    def test_reserved(self, c: str) -> None:
        assert is_valid_char(c) is False

    def test_control_characters(self) -> None:
        """Everything below space and DEL is invalid."""
        for code in range(0x20):
            assert is_valid_char(chr(code)) is False
        assert is_valid_char("\x7f") is False

    def test_space_is_first_valid(self) -> None:
        assert is_valid_char(" ") is True


class TestClassify:
    def test_passes_valid_through(self) -> None:
        assert classify("a") == "a"

    def test_rejects_invalid(self) -> None:
        assert classify("/") is None
        assert classify("\0") is None

    def test_dot_is_valid_verbatim(self) -> None:
        assert classify(".") == "."


class TestNormalize:
    def test_ordinary_unchanged(self) -> None:
        assert normalize("a") == "a"
        assert normalize("日") == "日"

    def test_dot_becomes_underscore(self) -> None:
        assert normalize(".") == REPLACEMENT == "_"

    @pytest.mark.parametrize("c", ["/", "\\", ":", "\n", "\t", "\0", "\x7f"])
    def test_invalid_becomes_underscore(self, c: str) -> None:
        assert normalize(c) == "_"

    def test_never_dot(self) -> None:
        """No character normalizes to '.'."""
        for code in range(0x300):
            assert normalize(chr(code)) != "."
