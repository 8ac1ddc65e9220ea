"""Progress indicator utilities for long-running operations."""

from types import TracebackType

from rich.console import Console


class ProgressDots:
    """Prints a dot per step of a long-running wait.

    The line of dots is terminated with a single newline when the session
    closes, whichever way the wrapped block exits. Nothing is written when
    no dot was printed.
    """

    def __init__(self, console: Console | None = None, marker: str = "."):
        """Initialize the dot printer.

        Args:
            console: Rich console to write to, stderr by default
            marker: Text written on each tick
        """
        self._console = console or Console(stderr=True, highlight=False)
        self._marker = marker
        self._count = 0
        self._closed = False

    @property
    def count(self) -> int:
        """Number of markers written so far."""
        return self._count

    def tick(self) -> None:
        """Write one progress marker."""
        if self._closed:
            return
        self._console.print(self._marker, end="", markup=False, highlight=False)
        self._count += 1

    def close(self) -> None:
        """Terminate the line of markers, at most once."""
        if self._closed:
            return
        self._closed = True
        if self._count:
            self._console.print()

    def __enter__(self) -> "ProgressDots":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

