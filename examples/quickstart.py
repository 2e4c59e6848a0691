"""Quickstart — build names and paths, then render them.

Demonstrates:
- Building a PathName from its run-length form and from a string
- Assembling segments into local and network paths
- Joining a path into a string
"""

from __future__ import annotations

from safe_path import PARENT, Local, LPath, Name, NetworkPath, PathName, Remote

if __name__ == "__main__":
    # "file.txt": four ordinary characters, then a literal dot
    name = PathName([4], "f", "iletxt")
    print(f"Rendered: {name}")
    print(f"Same as from_str: {name == PathName.from_str('file.txt')}")

    # Dots inside head/tail are never emitted as dots
    print(f"Embedded dot: {PathName((), 'a', '.b')}")

    # A rooted local path
    home = Local(LPath((Name(PathName.from_str("home")), Name(name)), rooted=True))
    print(f"Local: {home}")

    # A relative path that only climbs
    up = LPath((PARENT, PARENT))
    print(f"Pure ascent: {up} -> {up.is_pure_ascent()}")

    # A network path keeps the host apart from the remote segments
    share = Remote(NetworkPath.of("fileserver", "public", "report.pdf"))
    print(f"Remote: {share}")
    print(f"Segments: {share.render()}")
