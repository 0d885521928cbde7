"""Command-line interface for ls-option.

Lists the entries below a path according to the filter flags and prints them
one per line, NUL-separated, or as a tree.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Every Markdown file below the current directory
    $ ls-option -f -r -x md

    # Display version information
    $ ls-option --version
"""

import os
import sys
from typing import Iterable, List, Optional

from ls_option.cli.argparser import build_options, create_parser, validate_args
from ls_option.cli.interrupt import InterruptibleFileSystem, InterruptState, ListingInterrupted
from ls_option.exceptions import PathAccessError
from ls_option.file_system.local_file_system import LocalFileSystem
from ls_option.lister import list_paths
from ls_option.tree import build_tree, render_tree
from ls_option.types import PathType


def format_tree(paths: List[str], root: PathType, file_system: Optional[LocalFileSystem] = None) -> Iterable[str]:
    """Render listed paths as a tree rooted at the canonical form of ``root``.

    Args:
        paths: Result of ``list_paths`` for ``root``.
        root: The path that was listed.
        file_system: Filesystem used to resolve the root and tell directories
            from files. Defaults to ``LocalFileSystem()``.

    Returns:
        The tree lines, or nothing when the listing is empty.
    """
    if not paths:
        return []
    fs = file_system if file_system is not None else LocalFileSystem()
    return render_tree(build_tree(paths, fs.canonicalize(root), fs))


def main() -> None:
    """Main entry point for the ls-option command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    state = InterruptState()
    state.install()

    try:
        parser = create_parser()
        # argparse exits with 2 on usage errors and 0 for --version
        args = parser.parse_args()
        validate_args(args)

        fs = InterruptibleFileSystem(state)
        paths = list_paths(build_options(args), args.path, fs)

        if args.tree:
            lines = format_tree(paths, args.path, fs)
            terminator = "\n"
        else:
            lines = paths
            terminator = "\0" if args.null else "\n"

        try:
            for line in lines:
                if state.sigint_received.is_set():
                    break
                sys.stdout.write(line + terminator)
            sys.stdout.flush()
        except BrokenPipeError:
            # Only reached where SIGPIPE does not exist. Keep the interpreter
            # from failing again while flushing stdout at shutdown.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(141)

    except ListingInterrupted:
        sys.exit(130)
    except PathAccessError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        if isinstance(e.cause, PermissionError):
            sys.exit(126)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if state.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
