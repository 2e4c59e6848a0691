"""Path segment separators."""

from __future__ import annotations

import enum


class PathSegSep(enum.Enum):
    """The two characters that may delimit path segments."""

    BACKSLASH = "\\"
    SLASH = "/"

    @property
    def char(self) -> str:
        """The literal separator character."""
        return self.value
