"""Shared test fixtures."""

from __future__ import annotations

import pytest

from safe_path import LPath, Name, PathName


@pytest.fixture
def foo() -> PathName:
    """A name rendering as ``foo``."""
    return PathName((), "f", "oo")


@pytest.fixture
def foo_seg(foo: PathName) -> Name:
    return Name(foo)


@pytest.fixture
def src_main() -> LPath:
    """Relative path ``../src/main.py``."""
    return LPath.of("..", "src", "main.py")
