"""Normalized error hierarchy for safe_path."""

from __future__ import annotations

from typing import Optional


class SafePathError(Exception):
    """Base class for all safe_path errors.

    :param message: Human-readable error description.
    :param path: The raw input involved in the error, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.path is not None:
            return f"{base} | path={self.path!r}"
        return base

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(super().__str__())]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        return f"{cls}({', '.join(args)})"


class InvalidPathName(SafePathError):
    """Raised when a name cannot be built: no ordinary character, or a malformed field."""


class InvalidSegment(SafePathError):
    """Raised when a value that is not a path segment is used as one."""
