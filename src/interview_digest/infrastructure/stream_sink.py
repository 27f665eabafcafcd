"""Text stream implementation of the OutputSink interface."""

import os
from typing import TextIO

from interview_digest.exceptions import OutputWriteError

from .interfaces import OutputSink


class StreamSink(OutputSink):
    """Writes to an open text stream such as a file or stdout."""

    def __init__(self, stream: TextIO, name: str | None = None):
        self._stream = stream
        self.name = name or getattr(stream, "name", "<stream>")

    def write(self, text: str) -> None:
        try:
            self._stream.write(text)
        except (OSError, ValueError) as e:
            raise OutputWriteError(self.name, e) from e

    def flush(self) -> None:
        try:
            self._stream.flush()
            fileno = self._fileno()
            # Regular files are synced so flushed blocks survive a crash.
            if fileno is not None and os.path.isfile(self.name):
                os.fsync(fileno)
        except (OSError, ValueError) as e:
            raise OutputWriteError(self.name, e) from e

    def _fileno(self) -> int | None:
        try:
            return self._stream.fileno()
        except (AttributeError, OSError, ValueError):
            return None
