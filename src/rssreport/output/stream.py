"""Line-oriented output stream with an explicit open/close lifecycle."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from rssreport.exceptions import OutputError


class OutputStream:
    """Append-only text sink writing one line per call.

    Writes are only legal while the stream is open. ``close`` is
    idempotent so that a context manager exit after an explicit close
    does not fail.
    """

    def __init__(self, handle: TextIO, name: str):
        self._handle = handle
        self._name = name
        self._open = True

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_open(self) -> bool:
        return self._open

    def println(self, line: str = "") -> None:
        """Append ``line`` followed by a newline."""
        if not self._open:
            raise OutputError(self._name, "write to a closed stream")
        try:
            self._handle.write(line + "\n")
        except OSError as e:
            raise OutputError(self._name, str(e)) from e

    def close(self) -> None:
        if not self._open:
            return
        self._open = False
        try:
            self._handle.close()
        except OSError as e:
            raise OutputError(self._name, str(e)) from e

    def __enter__(self) -> OutputStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_output(path: Path | str) -> OutputStream:
    """Open a fresh output file, creating parent directories as needed.

    Raises:
        OutputError: When the file cannot be created.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handle = path.open("w", encoding="utf-8")
    except OSError as e:
        raise OutputError(str(path), str(e)) from e
    return OutputStream(handle, str(path))
