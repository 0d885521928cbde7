"""Interrupt handling for the ls-option CLI.

A listing is built in full before anything is printed, so Ctrl+C has to reach
the directory walk itself. The SIGINT handler records the signal, and the
filesystem the CLI hands to ``list_paths`` checks that record before every
filesystem call and aborts the walk with ``ListingInterrupted``.
"""

import signal
from pathlib import Path
from threading import Event
from types import FrameType
from typing import List, Optional

from ls_option.file_system.local_file_system import LocalFileSystem


class ListingInterrupted(Exception):
    """Raised inside the walk once SIGINT has been received."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Interrupted while listing {path}")


class InterruptState:
    """Records SIGINT for the walk to poll.

    The first SIGINT only sets ``sigint_received`` and restores the previous
    handler, so a second Ctrl+C raises KeyboardInterrupt at once if the walk
    is stuck in a slow system call.

    Attributes:
        sigint_received: Set once SIGINT has arrived.
        previous_handler: The SIGINT handler to restore after the first signal.
    """

    def __init__(self) -> None:
        self.sigint_received = Event()
        self.previous_handler = signal.getsignal(signal.SIGINT)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.previous_handler)

    def install(self) -> None:
        """Make this state the SIGINT handler.

        SIGPIPE is reset to the default action where it exists, so writing to a
        closed pipe ends the process quietly instead of raising BrokenPipeError
        halfway through the output.
        """
        self.previous_handler = signal.getsignal(signal.SIGINT)
        signal.signal(signal.SIGINT, self.handle_sigint)
        if hasattr(signal, "SIGPIPE"):
            signal.signal(signal.SIGPIPE, signal.SIG_DFL)

    def check(self, path: Path) -> None:
        """Raise ListingInterrupted if SIGINT has been received."""
        if self.sigint_received.is_set():
            raise ListingInterrupted(path)


class InterruptibleFileSystem(LocalFileSystem):
    """LocalFileSystem that stops the walk as soon as SIGINT is recorded.

    ``exists`` runs once per visited entry and ``list_children`` once per
    directory, so the walk stops after at most one more entry even inside a
    large directory.

    Example:
        >>> state = InterruptState()
        >>> fs = InterruptibleFileSystem(state)
        >>> fs.exists(Path("/"))
        True
        >>> state.sigint_received.set()
        >>> fs.exists(Path("/"))
        Traceback (most recent call last):
            ...
        ls_option.cli.interrupt.ListingInterrupted: Interrupted while listing /
    """

    def __init__(self, state: InterruptState) -> None:
        self.state = state

    def exists(self, path: Path) -> bool:
        self.state.check(path)
        return super().exists(path)

    def list_children(self, path: Path) -> List[Path]:
        self.state.check(path)
        return super().list_children(path)
