"""
Run result models — what a generation or split run reports back.

A generation run produces one of two shapes, tagged by ``mode``:

    SingleRowResult   one record per file
    MultiRowResult    several records per file, plus row totals

``GenerationResult`` is the discriminated union of both, so callers
can match on the concrete type instead of checking optional fields.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _RunSummary(BaseModel):
    """Fields shared by both generation modes."""

    model_config = ConfigDict(frozen=True)

    mode: str
    total_files_generated: int
    generated_files: tuple[str, ...] = ()
    output_directory: str
    timestamp: str                  # run start, yyyyMMdd_HHmmss
    tomorrow_date: str              # value date, yyyyMMdd
    starting_counter: int
    ending_counter: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase JSON shape served by the API."""
        return {
            "mode": self.mode,
            "totalFilesGenerated": self.total_files_generated,
            "generatedFiles": list(self.generated_files),
            "outputDirectory": self.output_directory,
            "timestamp": self.timestamp,
            "tomorrowDate": self.tomorrow_date,
            "startingPosition8Value": self.starting_counter,
            "endingPosition8Value": self.ending_counter,
        }


class SingleRowResult(_RunSummary):
    """Result of a run that wrote one record per file."""

    mode: Literal["single_row"] = "single_row"


class MultiRowResult(_RunSummary):
    """Result of a run that wrote ``rows_per_file`` records per file."""

    mode: Literal["multi_row"] = "multi_row"
    rows_per_file: int
    total_rows: int

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["rowsPerFile"] = self.rows_per_file
        data["totalRows"] = self.total_rows
        return data


GenerationResult = Annotated[
    Union[SingleRowResult, MultiRowResult],
    Field(discriminator="mode"),
]


class SplitResult(BaseModel):
    """Result of splitting an uploaded CSV into one file per line."""

    model_config = ConfigDict(frozen=True)

    original_file_name: str
    total_lines_processed: int
    generated_files: tuple[str, ...] = ()
    output_directory: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "originalFileName": self.original_file_name,
            "totalLinesProcessed": self.total_lines_processed,
            "generatedFiles": list(self.generated_files),
            "outputDirectory": self.output_directory,
            "timestamp": self.timestamp,
        }
