"""
Settings model — tunables loaded from csvfixtures.yml.

Every key is optional; a missing config file yields these defaults.
Directory values may be relative, in which case they are resolved
against the config file's directory (see ``Settings.resolve_dir``).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Generation and splitting settings."""

    output_dir: str = "generated_files"
    split_dir: str = "split_files"

    counter_base: int = 2000
    max_file_count: int = Field(default=1000, ge=1)

    # Pause briefly after every Nth file written (0 disables)
    throttle_every: int = Field(default=10, ge=0)
    throttle_seconds: float = Field(default=0.001, ge=0)

    # Directory the relative paths above are resolved against
    base_dir: str = ""

    def resolve_dir(self, value: str) -> Path:
        """Resolve a configured directory against ``base_dir``."""
        path = Path(value)
        if path.is_absolute() or not self.base_dir:
            return path
        return Path(self.base_dir) / path

    @property
    def output_path(self) -> Path:
        return self.resolve_dir(self.output_dir)

    @property
    def split_path(self) -> Path:
        return self.resolve_dir(self.split_dir)
