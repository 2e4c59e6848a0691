"""Path names and paths that can never be mistaken for ``.`` or ``..``."""

from safe_path._chars import classify, is_valid_char, normalize
from safe_path._config import FormatOptions
from safe_path._errors import InvalidPathName, InvalidSegment, SafePathError
from safe_path._format import format_local, format_network, format_path
from safe_path._local import LPath
from safe_path._name import PathName
from safe_path._network import NetworkPath
from safe_path._path import Local, Path, Remote
from safe_path._segment import PARENT, Name, Parent, PathSeg
from safe_path._separator import PathSegSep

__version__ = "0.1.0"

__all__ = [
    # Names & segments
    "PathName",
    "PathSeg",
    "Name",
    "Parent",
    "PARENT",
    # Paths
    "LPath",
    "NetworkPath",
    "Path",
    "Local",
    "Remote",
    # Characters
    "classify",
    "is_valid_char",
    "normalize",
    # Formatting
    "PathSegSep",
    "FormatOptions",
    "format_local",
    "format_network",
    "format_path",
    # Errors
    "SafePathError",
    "InvalidPathName",
    "InvalidSegment",
    # Version
    "__version__",
]
