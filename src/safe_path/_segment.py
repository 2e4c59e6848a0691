"""Path segments — a name or the parent-directory marker."""

from __future__ import annotations

import abc
import dataclasses

from safe_path._errors import InvalidSegment
from safe_path._name import PathName


class PathSeg(abc.ABC):
    """One segment of a path: :class:`Name` or :class:`Parent`.

    There is no segment for the current directory.
    """

    __slots__ = ()

    @abc.abstractmethod
    def render(self) -> str:
        """Characters this segment contributes to a path."""

    @property
    @abc.abstractmethod
    def is_name(self) -> bool:
        """Whether this segment is a :class:`Name`."""

    @classmethod
    def from_str(cls, text: str) -> PathSeg:
        """Build a segment from one component string.

        ``".."`` becomes :data:`PARENT`; anything else must be a valid name.

        :raises InvalidPathName: If *text* is ``"."`` or otherwise all dots.
        """
        if text == "..":
            return PARENT
        return Name(PathName.from_str(text))

    def __str__(self) -> str:
        return self.render()


@dataclasses.dataclass(frozen=True)
class Name(PathSeg):
    """A named segment.

    :param name: The component name.
    """

    name: PathName

    def __post_init__(self) -> None:
        if not isinstance(self.name, PathName):
            raise InvalidSegment(f"Name requires a PathName, got {type(self.name).__name__}")

    def render(self) -> str:
        return self.name.render()

    @property
    def is_name(self) -> bool:
        return True


@dataclasses.dataclass(frozen=True)
class Parent(PathSeg):
    """The parent-directory segment, rendered as ``..``."""

    def render(self) -> str:
        return ".."

    @property
    def is_name(self) -> bool:
        return False


PARENT = Parent()


def as_segment(value: PathSeg | str) -> PathSeg:
    """Coerce a component string to a segment; pass segments through.

    :raises InvalidSegment: If *value* is neither a segment nor a string.
    """
    if isinstance(value, PathSeg):
        return value
    if isinstance(value, str):
        return PathSeg.from_str(value)
    raise InvalidSegment(f"Expected a PathSeg or str, got {type(value).__name__}")


def require_segment(value: object) -> PathSeg:
    """Return *value* if it is a segment.

    :raises InvalidSegment: If it is not.
    """
    if not isinstance(value, PathSeg):
        raise InvalidSegment(f"Expected a PathSeg, got {type(value).__name__}")
    return value
