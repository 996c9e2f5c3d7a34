"""
File emitter — writes one rendered file to disk.

Two strategies, tried in order:

    1. direct byte write of the whole payload
    2. buffered text writer (only when 1 raised OSError)

If the fallback fails as well, ``FileWriteError`` is raised and the
caller aborts the run.  There is exactly one retry per file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from csv_fixtures.core.errors import FileWriteError

logger = logging.getLogger(__name__)


class FileEmitter:
    """Writes ``content`` plus one line terminator, overwriting the target."""

    line_terminator: str = os.linesep
    encoding: str = "utf-8"

    def write(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path``, falling back once on I/O errors.

        Raises:
            FileWriteError: If both write strategies fail.
        """
        try:
            self._write_direct(path, content)
            return
        except OSError as e:
            logger.error("Failed to create file %s: %s", path, e)

        try:
            self._write_buffered(path, content)
        except OSError as e:
            logger.error("Failed to create file %s with buffered writer: %s", path, e)
            raise FileWriteError(f"Unable to create file: {path}") from e

        logger.info("Successfully created file %s using buffered writer", path)

    def _write_direct(self, path: Path, content: str) -> None:
        path.write_bytes((content + self.line_terminator).encode(self.encoding))

    def _write_buffered(self, path: Path, content: str) -> None:
        # newline="" keeps the terminator exactly as given
        with open(path, "w", encoding=self.encoding, newline="") as writer:
            writer.write(content)
            writer.write(self.line_terminator)
