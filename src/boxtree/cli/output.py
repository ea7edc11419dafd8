"""Tree output for the boxtree CLI.

Lines are written straight to a file descriptor and stop at the first sign that nobody
is reading any more: a closed pipe (EPIPE), or SIGPIPE/SIGINT caught by Interrupts.
"""

import errno
import os
import signal
import sys
import types
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Type

from boxtree.types import PathType

# Status of a process killed by SIGPIPE, also used when EPIPE arrives without the signal
EXIT_BROKEN_PIPE = 141


def _interrupt_signals() -> Tuple[int, ...]:
    # SIGPIPE does not exist on Windows
    pipe = getattr(signal, "SIGPIPE", None)
    return (signal.SIGINT,) if pipe is None else (signal.SIGINT, pipe)


class Interrupts:
    """Records the first interrupting signal while installed as a context manager.

    Each signal is caught once: the handler records it and puts back the previous
    handler, so a second Ctrl+C behaves as usual. Leaving the ``with`` block restores
    every handler that was replaced.

    Attributes:
        signals: Signal numbers caught while installed.
        received: The first signal caught, or None.

    Example:
        >>> with Interrupts() as interrupts:  # doctest: +SKIP
        ...     run_walk(interrupts)
        >>> interrupts.exit_code  # doctest: +SKIP
        130
    """

    def __init__(self, signals: Optional[Iterable[int]] = None) -> None:
        self.signals = tuple(signals) if signals is not None else _interrupt_signals()
        self.received: Optional[int] = None
        self._previous: Dict[int, Any] = {}

    def __bool__(self) -> bool:
        return self.received is not None

    @property
    def exit_code(self) -> Optional[int]:
        """Shell-style status for the signal received (128 + number), or None."""
        return None if self.received is None else 128 + self.received

    def _catch(self, signum: int, frame: Optional[types.FrameType]) -> None:
        if self.received is None:
            self.received = signum
        signal.signal(signum, self._previous.get(signum, signal.SIG_DFL))

    def __enter__(self) -> "Interrupts":
        for signum in self.signals:
            previous = signal.signal(signum, self._catch)
            # None means the handler was installed outside Python
            self._previous[signum] = signal.SIG_DFL if previous is None else previous
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        for signum, handler in self._previous.items():
            signal.signal(signum, handler)
        self._previous.clear()


class LineWriter:
    """Writes UTF-8 lines to a file descriptor until the reader goes away.

    ``os.write`` is used directly so that no output sits in a Python buffer when the
    pipe closes. Both a closed pipe and a caught interrupt surface as BrokenPipeError.
    """

    def __init__(self, fd: int, interrupts: Optional[Interrupts] = None) -> None:
        self.fd = fd
        self.interrupts = interrupts

    def write_line(self, line: str = "") -> None:
        """Write one line followed by a newline.

        Raises:
            BrokenPipeError: If the pipe is closed or an interrupt has been received.
            OSError: For any other write failure.
        """
        if self.interrupts:
            raise BrokenPipeError()

        data = (line + "\n").encode("utf-8")
        try:
            # os.write may write only part of the data to a pipe
            while data:
                written = os.write(self.fd, data)
                data = data[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_line(line)


@contextmanager
def open_output(path: Optional[PathType] = None, interrupts: Optional[Interrupts] = None) -> Iterator[LineWriter]:
    """Provide a LineWriter for standard output, or for ``path`` when one is given.

    A file is created (truncating an existing one) on entry and closed on exit.
    Standard output is never closed.

    Raises:
        OSError: If the output file cannot be created.
    """
    if path is None:
        yield LineWriter(sys.stdout.fileno(), interrupts)
        return

    with open(path, "wb") as f:
        yield LineWriter(f.fileno(), interrupts)
