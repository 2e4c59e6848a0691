"""Path — a local or a remote path."""

from __future__ import annotations

import abc
import dataclasses
from typing import TYPE_CHECKING

from safe_path._errors import InvalidSegment
from safe_path._local import LPath
from safe_path._network import NetworkPath

if TYPE_CHECKING:
    from safe_path._config import FormatOptions


class Path(abc.ABC):
    """Either :class:`Local` or :class:`Remote`."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def is_remote(self) -> bool:
        """Whether this path addresses a remote host."""

    @abc.abstractmethod
    def render(self) -> tuple[str, ...]:
        """Rendered segments of the wrapped path."""

    def to_string(self, options: FormatOptions | None = None) -> str:
        """Join into a single path string, see :func:`~safe_path.format_path`."""
        from safe_path._format import format_path

        return format_path(self, options)

    def __str__(self) -> str:
        return self.to_string()


@dataclasses.dataclass(frozen=True)
class Local(Path):
    """A path on the local filesystem.

    :param path: The wrapped local path.
    """

    path: LPath

    def __post_init__(self) -> None:
        if not isinstance(self.path, LPath):
            raise InvalidSegment(f"Local requires an LPath, got {type(self.path).__name__}")

    @property
    def is_remote(self) -> bool:
        return False

    @property
    def rooted(self) -> bool:
        """Whether the wrapped path is rooted."""
        return self.path.rooted

    def render(self) -> tuple[str, ...]:
        return self.path.render()


@dataclasses.dataclass(frozen=True)
class Remote(Path):
    """A path on a remote host.

    :param path: The wrapped network path.
    """

    path: NetworkPath

    def __post_init__(self) -> None:
        if not isinstance(self.path, NetworkPath):
            raise InvalidSegment(f"Remote requires a NetworkPath, got {type(self.path).__name__}")

    @property
    def is_remote(self) -> bool:
        return True

    def render(self) -> tuple[str, ...]:
        return self.path.render()
