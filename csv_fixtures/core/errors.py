"""
Error types shared by the generation and splitting services.

Fatal errors abort a run and surface to the caller with a
human-readable message.  Cleanup problems never raise; they are
logged as warnings by the directory manager.
"""

from __future__ import annotations


class FixtureError(Exception):
    """Base class for fatal fixture-generation failures."""


class DirectoryCreationError(FixtureError):
    """Raised when the output directory cannot be created."""


class FileWriteError(FixtureError):
    """Raised when a file cannot be written by any write strategy."""


class InputDecodeError(FixtureError):
    """Raised when a file to split is not UTF-8 text."""
