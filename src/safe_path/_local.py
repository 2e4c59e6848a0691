"""LPath — local path as a sequence of segments plus rootedness."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from safe_path._segment import Name, PathSeg, as_segment, require_segment

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from safe_path._config import FormatOptions
    from safe_path._name import PathName


@dataclasses.dataclass(frozen=True)
class LPath:
    """An immutable local path.

    Segments are held in display order (``a/b`` is ``(a, b)``).
    :meth:`from_reversed` accepts the last-first order used when a path is
    built up one segment at a time from its end.

    :param segments: Path segments, in display order.
    :param rooted: Whether the path is anchored at a filesystem root.
    :raises InvalidSegment: If an item is not a :class:`PathSeg`.
    """

    segments: tuple[PathSeg, ...] = ()
    rooted: bool = False

    def __post_init__(self) -> None:
        segs = tuple(require_segment(s) for s in self.segments)
        object.__setattr__(self, "segments", segs)
        object.__setattr__(self, "rooted", bool(self.rooted))

    @classmethod
    def from_reversed(cls, segments: Iterable[PathSeg], *, rooted: bool = False) -> LPath:
        """Construct from segments given last segment first."""
        return cls(tuple(reversed(tuple(segments))), rooted=rooted)

    @classmethod
    def of(cls, *parts: str | PathSeg, rooted: bool = False) -> LPath:
        """Construct from component strings or segments, in display order.

        Example: ``LPath.of("..", "src", "main.py")``.

        :raises InvalidPathName: If a component is ``"."`` or all dots.
        """
        return cls(tuple(as_segment(p) for p in parts), rooted=rooted)

    @property
    def reversed_segments(self) -> tuple[PathSeg, ...]:
        """Segments, last first."""
        return self.segments[::-1]

    @property
    def names(self) -> tuple[PathName, ...]:
        """The names of all :class:`Name` segments, in display order."""
        return tuple(s.name for s in self.segments if isinstance(s, Name))

    def is_pure_ascent(self) -> bool:
        """True if no segment is a name: only parents, or no segments at all."""
        return not any(s.is_name for s in self.segments)

    def render(self) -> tuple[str, ...]:
        """Rendered segments, in display order."""
        return tuple(s.render() for s in self.segments)

    def to_string(self, options: FormatOptions | None = None) -> str:
        """Join into a single path string, see :func:`~safe_path.format_local`."""
        from safe_path._format import format_local

        return format_local(self, options)

    def __truediv__(self, other: PathSeg | str) -> LPath:
        return LPath((*self.segments, as_segment(other)), rooted=self.rooted)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PathSeg]:
        return iter(self.segments)

    def __str__(self) -> str:
        return self.to_string()
