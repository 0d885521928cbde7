"""Listing options and their fluent builder.

A ``ListOption`` describes which entries a listing should report. It is an
immutable value: every builder method returns a new option and leaves the
receiver untouched, so one base option can safely seed several listings.
"""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from ls_option.types import PathType

if TYPE_CHECKING:
    from ls_option.file_system.base_file_system import BaseFileSystem


@dataclass(frozen=True)
class ListOption:
    """Filter settings for a single listing.

    Attributes:
        include_dirs (bool): Directories pass the type filter.
        include_files (bool): Regular files pass the type filter.
        include_hidden (bool): Names starting with ``.`` pass the visibility filter.
        include_unhidden (bool): Names not starting with ``.`` pass the visibility filter.
        recursive (bool): Descend without limit, ignoring ``depth``.
        depth (int): Remaining levels of descent when not recursive. 0 means
            children are not visited.
        suffixes (Tuple[str, ...]): When non-empty, only names ending with one of
            these strings are reported.

    The defaults list the direct, unhidden children of a directory:

    Example:
        >>> opt = ListOption()
        >>> (opt.include_dirs, opt.include_files, opt.include_hidden, opt.include_unhidden)
        (True, True, False, True)
        >>> (opt.recursive, opt.depth, opt.suffixes)
        (False, 1, ())
        >>> opt.only_files().add_suffix("py").suffixes
        ('.py',)
        >>> opt.suffixes
        ()
    """

    include_dirs: bool = True
    include_files: bool = True
    include_hidden: bool = False
    include_unhidden: bool = True
    recursive: bool = False
    depth: int = 1
    suffixes: Tuple[str, ...] = ()

    def set_dirs(self, show: bool) -> "ListOption":
        """Return a copy that does or does not report directories."""
        return replace(self, include_dirs=show)

    def set_files(self, show: bool) -> "ListOption":
        """Return a copy that does or does not report regular files."""
        return replace(self, include_files=show)

    def set_hidden(self, show: bool) -> "ListOption":
        """Return a copy that does or does not report hidden entries."""
        return replace(self, include_hidden=show)

    def set_unhidden(self, show: bool) -> "ListOption":
        """Return a copy that does or does not report unhidden entries."""
        return replace(self, include_unhidden=show)

    def set_recursive(self, recursive: bool) -> "ListOption":
        """Return a copy that descends without a depth limit when ``recursive`` is True."""
        return replace(self, recursive=recursive)

    def set_depth(self, depth: int) -> "ListOption":
        """Return a copy limited to ``depth`` levels below the root.

        ``depth`` only matters when the option is not recursive.
        """
        return replace(self, depth=depth)

    def add_suffix(self, ext: str) -> "ListOption":
        """Append an extension filter.

        A dot is prepended, so ``add_suffix("rs")`` accepts names ending in ``.rs``.
        Earlier suffixes stay active.

        Example:
            >>> ListOption().add_suffix("rs").add_suffix("toml").suffixes
            ('.rs', '.toml')
        """
        return replace(self, suffixes=self.suffixes + (f".{ext}",))

    def add_suffixes(self, exts: Iterable[str]) -> "ListOption":
        """Replace all suffix filters with the given extensions.

        Each extension gets a leading dot. Suffixes added before this call are
        discarded.

        Example:
            >>> ListOption().add_suffixes(["rs"]).add_suffixes(["toml"]).suffixes
            ('.toml',)
            >>> ListOption().add_raw_suffix("lock").add_suffixes(["toml"]).suffixes
            ('.toml',)
        """
        return replace(self, suffixes=tuple(f".{ext}" for ext in exts))

    def add_raw_suffix(self, suffix: str) -> "ListOption":
        """Append a literal suffix filter, used verbatim.

        Example:
            >>> ListOption().add_raw_suffix("_test.py").add_suffix("md").suffixes
            ('_test.py', '.md')
        """
        return replace(self, suffixes=self.suffixes + (suffix,))

    def add_raw_suffixes(self, suffixes: Iterable[str]) -> "ListOption":
        """Replace all suffix filters with the given literal suffixes.

        Example:
            >>> ListOption().add_raw_suffixes([".rs"]).add_raw_suffixes([".toml"]).suffixes
            ('.toml',)
        """
        return replace(self, suffixes=tuple(suffixes))

    def only_dirs(self) -> "ListOption":
        return replace(self, include_dirs=True, include_files=False)

    def only_files(self) -> "ListOption":
        return replace(self, include_dirs=False, include_files=True)

    def only_hidden(self) -> "ListOption":
        return replace(self, include_hidden=True, include_unhidden=False)

    def only_unhidden(self) -> "ListOption":
        return replace(self, include_hidden=False, include_unhidden=True)

    @property
    def can_descend(self) -> bool:
        """Whether entries at this level may be reported and their children visited."""
        return self.recursive or self.depth > 0

    def descend(self) -> "ListOption":
        """Return the option that applies one directory level further down.

        Recursive options are returned unchanged. Otherwise the depth is
        decremented and never drops below zero.

        Example:
            >>> ListOption().set_depth(2).descend().depth
            1
            >>> ListOption().set_depth(0).descend().depth
            0
            >>> ListOption().set_recursive(True).set_depth(0).descend().depth
            0
        """
        if self.recursive:
            return self
        return replace(self, depth=max(self.depth - 1, 0))

    def list(self, path: PathType, file_system: Optional["BaseFileSystem"] = None) -> List[str]:
        """List the entries under ``path`` that these options accept.

        Shortcut for :func:`ls_option.lister.list_paths`.

        Example:
            >>> ListOption().only_files().set_recursive(True).add_suffix("py").list("src")  # doctest: +SKIP
            ['/home/me/project/src/ls_option/__init__.py', ...]
        """
        from ls_option.lister import list_paths

        return list_paths(self, path, file_system)
