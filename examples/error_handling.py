"""Error handling — what is rejected and what is normalized.

Character content is never rejected: reserved and control characters are
rendered as ``_``. Only names with no ordinary character, and values that
are not segments, raise errors.
"""

from __future__ import annotations

from safe_path import InvalidPathName, InvalidSegment, LPath, PathName, PathSeg, SafePathError

if __name__ == "__main__":
    # --- Normalized, not rejected ---
    print(f"Normalized: {PathName.from_str('a/b:c.txt')}")

    # --- InvalidPathName: '.' cannot be a name ---
    try:
        PathSeg.from_str(".")
    except InvalidPathName as exc:
        print(f"\nInvalidPathName: {exc}")
        print(f"  path={exc.path!r}")

    # --- '..' is the parent segment, never a name ---
    try:
        PathName.from_str("..")
    except InvalidPathName as exc:
        print(f"\nInvalidPathName: {exc}")
    print(f"PathSeg.from_str('..') -> {PathSeg.from_str('..')!r}")

    # --- InvalidSegment: plain strings are not segments ---
    try:
        LPath(("docs",))  # type: ignore[arg-type]
    except InvalidSegment as exc:
        print(f"\nInvalidSegment: {exc}")

    # --- Catch any safe_path error with the base class ---
    for text in ["", "..."]:
        try:
            PathName.from_str(text)
        except SafePathError as exc:
            print(f"\nSafePathError ({type(exc).__name__}): {exc}")

    print("\nDone!")
