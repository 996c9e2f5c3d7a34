"""
CSV splitter — one output file per input line.

Lines are copied verbatim (no CSV parsing).  Output files are named
``line_<n>_<timestamp>.csv`` so repeated splits into the same
directory never collide; the directory is not cleaned.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable

from csv_fixtures.core.errors import DirectoryCreationError, InputDecodeError
from csv_fixtures.core.models.result import SplitResult
from csv_fixtures.core.services.file_emitter import FileEmitter
from csv_fixtures.core.services.sequence import TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 50


def split_lines(
    lines: Iterable[str],
    original_name: str,
    output_dir: Path,
    *,
    emitter: FileEmitter | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> SplitResult:
    """Write each line of ``lines`` to its own file in ``output_dir``.

    Args:
        lines: Text lines, with or without trailing newlines.
        original_name: Name of the uploaded file (reported back only).
        output_dir: Target directory, created if missing.
        emitter: File writer (defaults to ``FileEmitter()``).
        clock: Source of the run timestamp.

    Raises:
        DirectoryCreationError: Output directory could not be created.
        FileWriteError: A line could not be written.
    """
    logger.info("Starting CSV split process for file: %s", original_name)

    if not output_dir.exists():
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(
                f"Unable to create split directory {output_dir}: {e}"
            ) from e
        logger.info("Created output directory: %s", output_dir)

    emitter = emitter or FileEmitter()
    timestamp = clock().strftime(TIMESTAMP_FORMAT)
    generated: list[str] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        path = output_dir / f"line_{line_number}_{timestamp}.csv"
        emitter.write(path, line)
        generated.append(str(path))
        logger.info("Created file: %s with content: %s...", path, line[:_PREVIEW_CHARS])

    logger.info("Successfully split CSV into %d files", len(generated))
    return SplitResult(
        original_file_name=original_name,
        total_lines_processed=len(generated),
        generated_files=tuple(generated),
        output_directory=str(output_dir),
        timestamp=timestamp,
    )


def split_file(
    source: Path,
    output_dir: Path,
    *,
    emitter: FileEmitter | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> SplitResult:
    """Split a CSV file on disk; see ``split_lines``.

    Raises:
        InputDecodeError: ``source`` is not UTF-8 text.
    """
    try:
        with source.open(encoding="utf-8", newline="") as f:
            return split_lines(f, source.name, output_dir, emitter=emitter, clock=clock)
    except UnicodeDecodeError as e:
        raise InputDecodeError(f"{source} is not UTF-8 text: {e.reason}") from e
