from typing import Optional


class ListingError(Exception):
    """
    Base class for failures that abort a listing.

    A listing is all or nothing: when any path cannot be examined the whole call
    fails and no partial result is returned. The offending path and the
    underlying exception are kept on the error so callers can decide how to
    react.

    Attributes:
        path (str): The path that could not be examined.
        cause (Optional[BaseException]): The exception raised by the filesystem, if any.

    Example:
        >>> error = ListingError("/srv/data", OSError(5, "Input/output error"))
        >>> error.path
        '/srv/data'
        >>> str(error)
        'Cannot list /srv/data: [Errno 5] Input/output error'
    """

    reason = "Cannot list"

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        """
        Initialize the error with the offending path and its cause.

        Args:
            path (str): The path that could not be examined.
            cause (Optional[BaseException]): The underlying exception. Defaults to None.
        """
        self.path = path
        self.cause = cause
        message = f"{self.reason} {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class PathAccessError(ListingError):
    """
    Exception raised when a path exists but cannot be examined.

    Covers permission errors, I/O errors, dangling symbolic links and symlink
    loops met while testing an entry's type, enumerating a directory, or
    canonicalizing the root.

    Example:
        >>> error = PathAccessError("/root/secret", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot access /root/secret: [Errno 13] Permission denied'
        >>> isinstance(error.cause, PermissionError)
        True
    """

    reason = "Cannot access"


class PathEncodingError(ListingError):
    """
    Exception raised when a path cannot be represented as text.

    On POSIX systems file names are byte strings; names that are not valid in
    the filesystem encoding reach Python as surrogate escapes and cannot be
    turned into a printable ``str``. They are reported separately from access
    failures so callers can tell the two apart.

    Example:
        >>> error = PathEncodingError("/tmp/bad\\udcff")
        >>> error.cause is None
        True
    """

    reason = "Cannot encode path"
