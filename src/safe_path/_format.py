"""Composition of rendered segments into a single path string."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from safe_path._config import FormatOptions
from safe_path._path import Local, Remote

if TYPE_CHECKING:
    from collections.abc import Sequence

    from safe_path._local import LPath
    from safe_path._network import NetworkPath
    from safe_path._path import Path

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = FormatOptions()


def _join(rendered: Sequence[str], options: FormatOptions) -> str:
    sep = options.separator.char
    joined = sep.join(rendered)
    if options.trailing_separator and rendered:
        joined += sep
    return joined


def format_local(path: LPath, options: FormatOptions | None = None) -> str:
    """Join a local path.

    Segments are separated by the separator; a rooted path starts with one.
    The empty rooted path is the bare separator, the empty relative path is
    ``""``.
    """
    options = options or _DEFAULT_OPTIONS
    body = _join(path.render(), options)
    result = options.separator.char + body if path.rooted else body
    logger.debug("Formatted local path %r as %r", path, result)
    return result


def format_network(path: NetworkPath, options: FormatOptions | None = None) -> str:
    """Join a network path as two separators, the host, then each segment.

    Example: ``\\\\fileserver\\share`` with :attr:`PathSegSep.BACKSLASH`.
    """
    options = options or _DEFAULT_OPTIONS
    sep = options.separator.char
    host, *remote = path.render()
    result = sep * 2 + host
    if remote:
        result += sep + _join(remote, options)
    logger.debug("Formatted network path %r as %r", path, result)
    return result


def format_path(path: Path, options: FormatOptions | None = None) -> str:
    """Join a :class:`Local` or :class:`Remote` path.

    :raises TypeError: If *path* is not one of the two variants.
    """
    if isinstance(path, Local):
        return format_local(path.path, options)
    if isinstance(path, Remote):
        return format_network(path.path, options)
    raise TypeError(f"Expected Local or Remote, got {type(path).__name__}")
