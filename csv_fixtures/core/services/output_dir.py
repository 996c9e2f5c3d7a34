"""
Output directory manager — clean slate before each generation run.

Only files following the generated naming convention
(``file_<digits>.csv``) are removed.  Subdirectories and any other
files are left alone.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from csv_fixtures.core.errors import DirectoryCreationError

logger = logging.getLogger(__name__)

GENERATED_FILE_RE = re.compile(r"^file_\d+\.csv$")


def is_generated_file(path: Path) -> bool:
    """Whether ``path`` names a file produced by the generator."""
    return bool(GENERATED_FILE_RE.match(path.name))


def prepare_output_dir(path: Path) -> int:
    """Create ``path`` if needed, otherwise delete previously generated files.

    Deletion is best-effort: a file that cannot be removed is logged
    and skipped.

    Args:
        path: Output directory for the run.

    Returns:
        Number of stale files removed.

    Raises:
        DirectoryCreationError: If the directory cannot be created.
    """
    if not path.exists():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(
                f"Unable to create output directory {path}: {e}"
            ) from e
        logger.info("Created output directory: %s", path)
        return 0

    if not path.is_dir():
        raise DirectoryCreationError(f"Output path is not a directory: {path}")

    removed = 0
    try:
        entries = list(path.iterdir())
    except OSError as e:
        logger.warning("Could not list %s for cleanup: %s", path, e)
        return 0

    for entry in entries:
        if not entry.is_file() or not is_generated_file(entry):
            continue
        try:
            entry.unlink(missing_ok=True)
            removed += 1
        except OSError as e:
            logger.warning("Could not delete existing file %s: %s", entry, e)

    if removed:
        logger.info("Cleaned up %d existing CSV file(s) in %s", removed, path)
    return removed
