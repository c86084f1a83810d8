"""Per-file progress for batch ``.DAT`` conversion.

:func:`~dat2inp.converter.convert_directory` reports each converted
file to a :class:`ProgressReporter` instead of printing.  The CLI
installs a callback that echoes the message to stderr, so stdout stays
free for ``--stdout`` and ``--dump`` output.
"""

from typing import Callable, Optional


class ProgressReporter:
    """Tracks how far a batch conversion has got.

    Skipped files do not produce a message, but they still count
    towards the fraction once a later file finishes.

    Attributes:
        message: Status line of the last converted file, e.g.
            ``"SPEC0001.DAT converted successfully"``.
        progress: Fraction of the batch's ``.DAT`` files handled so far,
            between 0.0 and 1.0.
    """

    def __init__(
        self,
        callback: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        """
        Args:
            callback: Called with ``(message, progress)`` each time a
                file is converted.
        """
        self.message: str = ""
        self.progress: float = 0.0
        self._callback = callback

    def update(self, message: str, progress: float = 0.0) -> None:
        """Store the status line and pass it to the callback."""
        self.message = message
        self.progress = progress
        if self._callback:
            self._callback(message, progress)

    def file_done(self, index: int, total: int, message: str) -> None:
        """Report that file number *index* (0-based) of *total* was converted."""
        fraction = (index + 1) / total if total else 1.0
        self.update(message, fraction)
