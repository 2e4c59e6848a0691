"""NetworkPath — remote host plus the path on that host."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from safe_path._segment import PathSeg, as_segment, require_segment

if TYPE_CHECKING:
    from collections.abc import Iterator

    from safe_path._config import FormatOptions


@dataclasses.dataclass(frozen=True)
class NetworkPath:
    """An immutable UNC-style network path.

    The host is a segment of its own, kept apart from the remote segments.

    :param host: Segment naming the remote host.
    :param segments: Remote path segments, in display order.
    :raises InvalidSegment: If the host or an item is not a :class:`PathSeg`.
    """

    host: PathSeg
    segments: tuple[PathSeg, ...] = ()

    def __post_init__(self) -> None:
        require_segment(self.host)
        object.__setattr__(self, "segments", tuple(require_segment(s) for s in self.segments))

    @classmethod
    def of(cls, host: str | PathSeg, *parts: str | PathSeg) -> NetworkPath:
        """Construct from a host and remote components, strings or segments.

        Example: ``NetworkPath.of("fileserver", "share", "report.pdf")``.
        """
        return cls(as_segment(host), tuple(as_segment(p) for p in parts))

    def render(self) -> tuple[str, ...]:
        """The host rendering followed by the remote segment renderings."""
        return (self.host.render(), *(s.render() for s in self.segments))

    def to_string(self, options: FormatOptions | None = None) -> str:
        """Join into a single path string, see :func:`~safe_path.format_network`."""
        from safe_path._format import format_network

        return format_network(self, options)

    def __truediv__(self, other: PathSeg | str) -> NetworkPath:
        return NetworkPath(self.host, (*self.segments, as_segment(other)))

    def __iter__(self) -> Iterator[PathSeg]:
        return iter(self.segments)

    def __str__(self) -> str:
        return self.to_string()
