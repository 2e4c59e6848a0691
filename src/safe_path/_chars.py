"""Character classification and normalization for path names."""

from __future__ import annotations

from typing import Final, Optional

#: Characters that separate path segments or drives on some platform.
RESERVED_CHARS: Final = frozenset("/\\:")

#: Replacement for every character that may not appear verbatim.
REPLACEMENT: Final = "_"


def is_valid_char(c: str) -> bool:
    """Whether *c* may appear verbatim in a path name.

    Control characters (below space, and DEL) and the reserved characters
    ``/``, ``\\`` and ``:`` are invalid. ``.`` is valid here; names store
    literal dots positionally, see :func:`normalize`.
    """
    code = ord(c)
    if code < 0x20 or code == 0x7F:
        return False
    return c not in RESERVED_CHARS


def classify(c: str) -> Optional[str]:
    """Return *c* unchanged if it is valid verbatim, else ``None``."""
    return c if is_valid_char(c) else None


def normalize(c: str) -> str:
    """Map *c* to the character emitted for it inside a name.

    ``.`` and every invalid character become ``_``; anything else passes
    through. The result is never ``.``.
    """
    if c == "." or classify(c) is None:
        return REPLACEMENT
    return c
