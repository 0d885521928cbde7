from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry types as seen by the match predicate.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        OTHER: Anything else that exists (socket, FIFO, device node)
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
