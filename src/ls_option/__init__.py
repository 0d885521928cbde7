"""Configurable filesystem listing.

This package lists the files and directories reachable from a root path,
filtered by type, visibility, depth and name suffix, without shelling out to
an external utility.
"""

from importlib.metadata import PackageNotFoundError, version

from ls_option.exceptions import ListingError, PathAccessError, PathEncodingError
from ls_option.file_system import BaseFileSystem, LocalFileSystem
from ls_option.list_option import ListOption
from ls_option.lister import list_paths, would_show
from ls_option.tree import build_tree, render_tree

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("ls-option")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "BaseFileSystem",
    "ListOption",
    "ListingError",
    "LocalFileSystem",
    "PathAccessError",
    "PathEncodingError",
    "build_tree",
    "list_paths",
    "render_tree",
    "would_show",
]
