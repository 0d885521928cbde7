"""Tree view of a listing result.

``list_paths`` returns a flat list. This module arranges such a list under its
root as an ``anytree`` tree and renders it in the style of the Unix ``tree``
command. Directories that were not themselves listed but lead to listed
entries are kept as connecting nodes.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional

from anytree import Node, RenderTree
from anytree.render import ContStyle

from ls_option.exceptions import PathAccessError
from ls_option.file_system.base_file_system import BaseFileSystem
from ls_option.file_system.local_file_system import LocalFileSystem
from ls_option.types import PathType


class ListingNode(Node):  # type: ignore
    """Node for one entry of a listing tree.

    Extends anytree.Node with the entry's type and whether the listing
    reported it.

    Attributes:
        name (str): The entry's base name (the full root path for the root node).
        is_dir (bool): True if this node represents a directory.
        listed (bool): True if the entry appeared in the listing, False for
            connecting directories.

    Example:
        >>> root = ListingNode("/srv", is_dir=True, listed=False)
        >>> child = ListingNode("a.txt", parent=root)
        >>> [node.name for node in root.children]
        ['a.txt']
        >>> child.listed
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["ListingNode"] = None,
        is_dir: bool = False,
        listed: bool = True,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.listed = listed


def build_tree(
    paths: Iterable[str], root: PathType, file_system: Optional[BaseFileSystem] = None
) -> ListingNode:
    """Arrange listed paths under ``root``.

    Args:
        paths: Paths returned by ``list_paths`` for ``root``.
        root: The canonical root of that listing.
        file_system: Used to tell listed directories from files. Defaults to
            ``LocalFileSystem()``.

    Returns:
        The root node. Its ``listed`` flag tells whether the root itself was
        part of the listing.

    Raises:
        ValueError: If a path does not lie under ``root``.
        PathAccessError: If a listed entry's type cannot be determined.

    Example:
        >>> root = build_tree(["/srv/docs/a.txt"], "/srv", file_system=LocalFileSystem())  # doctest: +SKIP
        >>> [node.name for node in root.descendants]  # doctest: +SKIP
        ['docs', 'a.txt']
    """
    fs = file_system if file_system is not None else LocalFileSystem()
    root_path = Path(root)
    root_node = ListingNode(str(root_path), is_dir=True, listed=False)
    nodes: Dict[Path, ListingNode] = {root_path: root_node}

    for text in paths:
        path = Path(text)
        try:
            is_dir = fs.is_dir(path)
        except OSError as e:
            raise PathAccessError(text, e) from e

        if path == root_path:
            root_node.listed = True
            root_node.is_dir = is_dir
            continue

        parent = root_node
        current = root_path
        for part in path.relative_to(root_path).parts[:-1]:
            current = current / part
            if current not in nodes:
                nodes[current] = ListingNode(part, parent=parent, is_dir=True, listed=False)
            parent = nodes[current]

        if path in nodes:
            # Reached earlier as a connecting directory
            nodes[path].listed = True
        else:
            nodes[path] = ListingNode(path.name, parent=parent, is_dir=is_dir)

    return root_node


def render_tree(root: ListingNode) -> Iterator[str]:
    """Render a listing tree one line at a time.

    Directories get a trailing ``/`` and are shown before files; both are
    sorted case-insensitively.

    Example:
        >>> root = ListingNode("/srv", is_dir=True, listed=False)
        >>> docs = ListingNode("docs", parent=root, is_dir=True)
        >>> _ = ListingNode("b.txt", parent=docs)
        >>> _ = ListingNode("a.txt", parent=root)
        >>> print("\\n".join(render_tree(root)))
        /srv/
        ├── docs/
        │   └── b.txt
        └── a.txt
    """
    _sort_children(root)
    for prefix, _, node in RenderTree(root, style=ContStyle()):
        marker = "/" if node.is_dir and not node.name.endswith("/") else ""
        yield f"{prefix}{node.name}{marker}"


def _sort_children(node: ListingNode) -> None:
    if node.children:
        node.children = sorted(node.children, key=lambda n: (not n.is_dir, n.name.lower()))
        for child in node.children:
            _sort_children(child)
