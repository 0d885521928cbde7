"""Directory listing driven by a ``ListOption``.

This module walks a directory tree depth-first and reports every entry that
passes the option's filters. Each directory level gets its own option value,
derived from its parent's with one level of depth used up, so the limit a
sibling sees never depends on how deep a previous sibling's walk went.

Output paths are absolute. The root is canonicalized once; its descendants are
reported as the canonical root joined with their names, so symbolic links below
the root keep their own names in the output.
"""

import errno
import os
from pathlib import Path
from typing import List, Optional

from ls_option.exceptions import PathAccessError, PathEncodingError
from ls_option.file_system.base_file_system import BaseFileSystem
from ls_option.file_system.local_file_system import LocalFileSystem
from ls_option.list_option import ListOption
from ls_option.types import FileType, PathType


def list_paths(options: ListOption, path: PathType, file_system: Optional[BaseFileSystem] = None) -> List[str]:
    """List the entries at and below ``path`` that ``options`` accepts.

    The root itself is tested first and is not subject to the depth limit: with
    ``depth=0`` a matching root is still reported, but nothing below it is.
    Every other entry is tested with the option of the directory that contains
    it, then its own subtree is walked with that option's ``descend()``.

    Results are ordered root first, then each child followed directly by its
    subtree. With ``LocalFileSystem`` children come in name order.

    Args:
        options: The filters to apply.
        path: The root of the listing. A file root yields at most itself.
        file_system: Filesystem to read from. Defaults to ``LocalFileSystem()``.

    Returns:
        Absolute paths of all accepted entries. Empty if ``path`` does not exist.

    Raises:
        PathAccessError: If any visited entry cannot be examined. No partial
            result is returned.
        PathEncodingError: If a visited path cannot be represented as text.

    Example:
        >>> opt = ListOption().only_files().set_recursive(True).add_suffix("txt")
        >>> list_paths(opt, "docs")  # doctest: +SKIP
        ['/home/me/project/docs/intro.txt', '/home/me/project/docs/api/usage.txt']
        >>> list_paths(opt, "/definitely/does/not/exist")
        []
    """
    fs = file_system if file_system is not None else LocalFileSystem()
    root = Path(path)

    if not _exists(fs, root):
        return []

    root = _canonicalize(fs, root)

    results: List[str] = []
    root_text = _as_text(root)
    root_type = _file_type(fs, root)

    if _passes_filters(options, root, root_type):
        results.append(root_text)

    if root_type is FileType.DIRECTORY and options.can_descend:
        _walk(fs, options, root, results)

    return results


def would_show(options: ListOption, path: PathType, file_system: Optional[BaseFileSystem] = None) -> bool:
    """Check whether ``options`` accepts a single entry.

    All four filters must pass:

    - type: the entry is a file and files are included, or a directory and
      directories are included
    - visibility: hidden names (leading ``.``) need ``include_hidden``, all
      others need ``include_unhidden``
    - depth: the option is recursive or has depth left
    - suffix: there are no suffixes, or the final path component ends with one

    The path is judged the way ``list_paths`` judges its root: it is
    canonicalized first, so ``"."`` is tested under the name of the current
    directory and a symbolic link under the name of its target.

    A path that does not exist is never shown.

    Raises:
        PathAccessError: If the entry cannot be canonicalized or its type
            cannot be determined.
        PathEncodingError: If ``path`` cannot be represented as text.

    Example:
        >>> would_show(ListOption().only_dirs(), "/")
        True
        >>> would_show(ListOption().only_dirs().set_depth(0), "/")
        False
    """
    fs = file_system if file_system is not None else LocalFileSystem()
    target = Path(path)
    _as_text(target)
    if not _exists(fs, target):
        return False
    target = _canonicalize(fs, target)
    return options.can_descend and _passes_filters(options, target, _file_type(fs, target))


def _walk(fs: BaseFileSystem, options: ListOption, directory: Path, results: List[str]) -> None:
    """Append the accepted entries below ``directory`` to ``results``.

    ``options`` is the option of ``directory``'s level: it decides which
    children are shown, and its ``descend()`` decides how far their subtrees go.
    """
    try:
        children = fs.list_children(directory)
    except OSError as e:
        raise PathAccessError(_display(directory), e) from e

    child_options = options.descend()

    for child in children:
        child_text = _as_text(child)

        # The entry was just enumerated, so a missing target means a dangling
        # symlink or a concurrent removal
        if not _exists(fs, child):
            raise PathAccessError(child_text, FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), child_text))

        child_type = _file_type(fs, child)
        if options.can_descend and _passes_filters(options, child, child_type):
            results.append(child_text)

        if child_type is FileType.DIRECTORY and child_options.can_descend:
            _walk(fs, child_options, child, results)


def _passes_filters(options: ListOption, path: Path, file_type: FileType) -> bool:
    """Apply the type, visibility and suffix filters. Depth is left to the caller."""
    if file_type is FileType.FILE:
        type_ok = options.include_files
    elif file_type is FileType.DIRECTORY:
        type_ok = options.include_dirs
    else:
        type_ok = False

    name = path.name
    hidden = name.startswith(".")
    visibility_ok = (options.include_hidden and hidden) or (options.include_unhidden and not hidden)

    suffix_ok = not options.suffixes or any(name.endswith(suffix) for suffix in options.suffixes)

    return type_ok and visibility_ok and suffix_ok


def _file_type(fs: BaseFileSystem, path: Path) -> FileType:
    try:
        if fs.is_file(path):
            return FileType.FILE
        if fs.is_dir(path):
            return FileType.DIRECTORY
    except OSError as e:
        raise PathAccessError(_display(path), e) from e
    return FileType.OTHER


def _canonicalize(fs: BaseFileSystem, path: Path) -> Path:
    try:
        return fs.canonicalize(path)
    except OSError as e:
        raise PathAccessError(_display(path), e) from e


def _exists(fs: BaseFileSystem, path: Path) -> bool:
    try:
        return fs.exists(path)
    except OSError as e:
        raise PathAccessError(_display(path), e) from e


def _as_text(path: Path) -> str:
    """Return ``path`` as a string that can be encoded, or raise PathEncodingError.

    Undecodable bytes in a file name reach Python as lone surrogates; such a
    string cannot be written out as UTF-8.
    """
    text = os.fspath(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathEncodingError(_display(path), e) from e
    return text


def _display(path: Path) -> str:
    """Printable form of ``path`` for error messages, escaping undecodable bytes."""
    return os.fspath(path).encode("utf-8", "backslashreplace").decode("utf-8")
