"""Configuration — FormatOptions as code and from_dict().

Demonstrates choosing the separator and trailing-separator behaviour used
when paths are joined into strings.
"""

from __future__ import annotations

from safe_path import FormatOptions, LPath, NetworkPath, PathSegSep

if __name__ == "__main__":
    path = LPath.of("Users", "alice", "notes.md", rooted=True)
    unc = NetworkPath.of("fileserver", "share")

    # --- Option 1: Config-as-code with Python objects ---
    windows = FormatOptions(separator=PathSegSep.BACKSLASH)
    print("Backslash:", path.to_string(windows))
    print("UNC:", unc.to_string(windows))

    # --- Option 2: from_dict() — e.g. loaded from TOML or JSON ---
    raw = {"separator": "slash", "trailing_separator": True}
    options = FormatOptions.from_dict(raw)
    print("From dict:", path.to_string(options))

    # --- Invalid configuration ---
    try:
        FormatOptions.from_dict({"separator": "|"})
    except ValueError as exc:
        print(f"ValueError: {exc}")
