"""Formatting configuration — immutable options for joining paths into strings."""

from __future__ import annotations

import dataclasses

from safe_path._separator import PathSegSep


@dataclasses.dataclass(frozen=True)
class FormatOptions:
    """Describes how a path is joined into one string.

    :param separator: Character placed between segments.
    :param trailing_separator: Append a separator after the last segment.
    """

    separator: PathSegSep = PathSegSep.SLASH
    trailing_separator: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> FormatOptions:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        ``separator`` is a member name (``"slash"``, ``"backslash"``) or the
        separator character itself.

        :param data: Dict with optional ``separator`` and ``trailing_separator`` keys.
        :raises TypeError: If *data* or a value has the wrong type.
        :raises ValueError: If ``separator`` names no known separator.
        """
        if not isinstance(data, dict):
            msg = f"Expected a dict, got {type(data).__name__}"
            raise TypeError(msg)

        raw_sep = data.get("separator", PathSegSep.SLASH)
        if isinstance(raw_sep, PathSegSep):
            separator = raw_sep
        elif isinstance(raw_sep, str):
            separator = _parse_separator(raw_sep)
        else:
            msg = f"'separator' must be a string, got {type(raw_sep).__name__}"
            raise TypeError(msg)

        trailing = data.get("trailing_separator", False)
        if not isinstance(trailing, bool):
            msg = f"'trailing_separator' must be a bool, got {type(trailing).__name__}"
            raise TypeError(msg)

        return cls(separator=separator, trailing_separator=trailing)


def _parse_separator(raw: str) -> PathSegSep:
    for sep in PathSegSep:
        if raw == sep.value or raw.upper() == sep.name:
            return sep
    raise ValueError(
        f"Unknown separator {raw!r}. Available separators: {sorted(s.name.lower() for s in PathSegSep)}"
    )
