"""Command-line argument parsing for ls-option.

This module defines the command-line interface for ls-option and turns the
parsed arguments into a ``ListOption``.
"""

import argparse
from typing import Any, List, Optional, Sequence, Union

from ls_option import __version__
from ls_option.list_option import ListOption


class SuffixAction(argparse.Action):
    """Collect ``-x/--ext`` and ``-s/--suffix`` values into one ordered list.

    Extensions get a leading dot, raw suffixes are kept verbatim, and both
    append to ``namespace.suffixes`` in the order they appear on the command
    line.
    """

    def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if values is None:
            return
        suffix = str(values)
        if option_string in ("-x", "--ext"):
            suffix = f".{suffix}"

        if getattr(namespace, "suffixes", None) is None:
            namespace.suffixes = []
        namespace.suffixes.append(suffix)


def non_negative_int(value: str) -> int:
    """argparse type for ``--depth``."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}' is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid depth: {number} is negative")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with ls-option's options.
    """
    description = """
    ls-option: list files and directories with declarative filters.

    Lists the entries at and below PATH that pass every filter:
    - type: directories and/or regular files
    - visibility: hidden (leading '.') and/or unhidden names
    - depth: how many directory levels to descend, or no limit with -r
    - suffix: names ending with one of the given extensions or suffixes

    Paths are printed as absolute paths below the resolved PATH, the root
    first and each directory followed by its contents.
    """

    epilog = """
    Examples:
      # Unhidden entries directly inside the current directory
      ls-option

      # Every Python file in a project, at any depth
      ls-option -f -r -x py /path/to/project

      # Directories up to two levels down, hidden ones included
      ls-option -d -a -l 2 /path/to/project

      # Only dotfiles in the home directory
      ls-option -A ~

      # Files ending in "_test.py" or ".toml", shown as a tree
      ls-option -f -r -s _test.py -x toml -t .

      # NUL-separated output for xargs -0
      ls-option -f -r -0 . | xargs -0 wc -l
    """

    parser = argparse.ArgumentParser(
        prog="ls-option",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"ls-option {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The file or directory to list (default: current directory).",
    )

    kind = parser.add_mutually_exclusive_group()
    kind.add_argument("-d", "--dirs-only", action="store_true", help="List directories only.")
    kind.add_argument("-f", "--files-only", action="store_true", help="List regular files only.")

    visibility = parser.add_mutually_exclusive_group()
    visibility.add_argument("-a", "--all", action="store_true", help="Include hidden entries.")
    visibility.add_argument("-A", "--hidden-only", action="store_true", help="List hidden entries only.")

    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Descend into every subdirectory, ignoring --depth.",
    )
    parser.add_argument(
        "-l",
        "--depth",
        type=non_negative_int,
        default=1,
        metavar="N",
        help="Number of directory levels to descend (default: 1). 0 lists only PATH itself.",
    )
    parser.add_argument(
        "-x",
        "--ext",
        metavar="EXT",
        action=SuffixAction,
        dest="suffixes",
        help="Only list names with this extension, given without the dot (can be specified multiple times).",
    )
    parser.add_argument(
        "-s",
        "--suffix",
        metavar="SUFFIX",
        action=SuffixAction,
        dest="suffixes",
        help="Only list names ending with this literal suffix (can be specified multiple times).",
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Render the result as a tree instead of one path per line.",
    )
    parser.add_argument(
        "-0",
        "--null",
        action="store_true",
        help="Terminate each path with a NUL character instead of a newline.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate combinations argparse cannot express.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.tree and args.null:
        raise ValueError("--tree cannot be combined with -0/--null")


def build_options(args: argparse.Namespace) -> ListOption:
    """Translate parsed arguments into a ``ListOption``.

    Example:
        >>> args = create_parser().parse_args(["-f", "-r", "-x", "py", "src"])
        >>> opt = build_options(args)
        >>> (opt.include_dirs, opt.include_files, opt.recursive, opt.suffixes)
        (False, True, True, ('.py',))
    """
    options = ListOption().set_recursive(args.recursive).set_depth(args.depth)

    if args.dirs_only:
        options = options.only_dirs()
    elif args.files_only:
        options = options.only_files()

    if args.all:
        options = options.set_hidden(True).set_unhidden(True)
    elif args.hidden_only:
        options = options.only_hidden()

    if args.suffixes:
        options = options.add_raw_suffixes(args.suffixes)

    return options
