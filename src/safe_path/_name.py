"""PathName — immutable path component that never renders as all dots."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from safe_path._chars import is_valid_char, normalize
from safe_path._errors import InvalidPathName

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class PathName:
    """A single path component other than ``.`` and ``..``.

    Literal dots are not stored as characters. ``dots`` is a run-length
    list: each entry counts the ordinary characters emitted before the next
    literal ``.``. Ordinary characters are ``head`` followed by ``tail``;
    because ``head`` always exists and :func:`normalize` never yields ``.``,
    the rendered name always contains a non-dot character.

    Character content is not checked here. Dots or reserved characters in
    ``head``/``tail`` are rendered as ``_``.

    :param dots: Run-length dot encoding (non-negative integers).
    :param head: The first ordinary character.
    :param tail: The remaining ordinary characters, in order.
    :raises InvalidPathName: If a field is structurally malformed.
    """

    __slots__ = ("_dots", "_head", "_tail")
    _dots: Final[tuple[int, ...]]  # type: ignore[misc]
    _head: Final[str]  # type: ignore[misc]
    _tail: Final[tuple[str, ...]]  # type: ignore[misc]

    def __init__(self, dots: Iterable[int], head: str, tail: Iterable[str] = ()) -> None:
        if not isinstance(head, str) or len(head) != 1:
            raise InvalidPathName(f"head must be a single character, got {head!r}")
        tail_chars = tuple(tail)
        for c in tail_chars:
            if not isinstance(c, str) or len(c) != 1:
                raise InvalidPathName(f"tail items must be single characters, got {c!r}")
        runs = tuple(dots)
        for n in runs:
            # bool is an int subclass but never a meaningful count
            if not isinstance(n, int) or isinstance(n, bool) or n < 0:
                raise InvalidPathName(f"dot offsets must be non-negative integers, got {n!r}")
        object.__setattr__(self, "_dots", runs)
        object.__setattr__(self, "_head", head)
        object.__setattr__(self, "_tail", tail_chars)

    @classmethod
    def from_str(cls, text: str) -> PathName:
        """Decompose one component string into its run-length form.

        Every ``.`` in *text* is kept as a literal dot; the other characters
        become ordinary characters and are normalized when rendered.

        Example: ``PathName.from_str("file.txt")`` has ``dots == (4,)``,
        ``head == "f"`` and ``tail == ("i", "l", "e", "t", "x", "t")``.

        :raises InvalidPathName: If *text* has no character other than ``.``.
        """
        dots: list[int] = []
        ordinary: list[str] = []
        run = 0
        for c in text:
            if c == ".":
                dots.append(run)
                run = 0
            else:
                ordinary.append(c)
                run += 1
        if not ordinary:
            raise InvalidPathName("Name has no character other than '.'", path=text)
        if not all(is_valid_char(c) for c in ordinary):
            logger.debug("Name %r contains characters rendered as '_'", text)
        return cls(dots, ordinary[0], ordinary[1:])

    @property
    def dots(self) -> tuple[int, ...]:
        """Run-length dot encoding."""
        return self._dots

    @property
    def head(self) -> str:
        """First ordinary character."""
        return self._head

    @property
    def tail(self) -> tuple[str, ...]:
        """Remaining ordinary characters."""
        return self._tail

    def render(self) -> str:
        """Interleave literal dots with the normalized ordinary characters.

        Each run-length entry consumes up to that many ordinary characters
        and then emits one ``.``; a zero entry emits its dot without
        consuming. Entries left over once the characters run out emit one
        ``.`` each. Characters left over once the entries run out are
        emitted in order.
        """
        chars = (self._head, *self._tail)
        out: list[str] = []
        pos = 0
        for run in self._dots:
            while run and pos < len(chars):
                out.append(normalize(chars[pos]))
                pos += 1
                run -= 1
            out.append(".")
        out.extend(normalize(c) for c in chars[pos:])
        return "".join(out)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"PathName(dots={self._dots!r}, head={self._head!r}, tail={self._tail!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathName):
            return (self._dots, self._head, self._tail) == (other._dots, other._head, other._tail)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._dots, self._head, self._tail))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"PathName is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"PathName is immutable: cannot delete '{name}'")
