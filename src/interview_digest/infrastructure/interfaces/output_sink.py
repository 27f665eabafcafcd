"""Abstract interface for the pipeline's output destination."""

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Append-only text destination that can always be flushed."""

    name: str

    @abstractmethod
    def write(self, text: str) -> None:
        """
        Appends text to the destination.

        Raises:
            OutputWriteError: If the write fails.
        """

    @abstractmethod
    def flush(self) -> None:
        """
        Makes everything written so far visible to other readers of the destination.

        Raises:
            OutputWriteError: If the flush fails.
        """
