"""
Generation engine — renders the record template into numbered CSV files.

Two modes, picked by ``rows_per_file``:

    None / 1   single-row: file_NNN.csv holds one record
    >= 2       multi-row:  file_NNN.csv holds rows_per_file records

In both modes the counter starts at the configured base and advances
once per row across the whole run, in file-then-row order.  The value
date and run timestamp are captured once at the start.

A run is all-or-nothing from the caller's point of view: the first
fatal error (directory creation or a file write that also failed its
fallback) propagates, and files already written stay on disk.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable

from csv_fixtures.core.models.result import (
    GenerationResult,
    MultiRowResult,
    SingleRowResult,
)
from csv_fixtures.core.models.settings import Settings
from csv_fixtures.core.models.template import DEFAULT_TEMPLATE, RecordTemplate
from csv_fixtures.core.services.file_emitter import FileEmitter
from csv_fixtures.core.services.output_dir import prepare_output_dir
from csv_fixtures.core.services.sequence import SequenceAllocator

logger = logging.getLogger(__name__)

MIN_INDEX_WIDTH = 3


def file_name(index: int, width: int = MIN_INDEX_WIDTH) -> str:
    """Name of the ``index``-th generated file (1-based)."""
    return f"file_{index:0{width}d}.csv"


def index_width(file_count: int) -> int:
    """Zero-padding width that keeps every name in a run the same length."""
    return max(MIN_INDEX_WIDTH, len(str(file_count)))


@dataclass
class RunContext:
    """Everything one run needs, passed explicitly to each step."""

    output_dir: Path
    allocator: SequenceAllocator
    template: RecordTemplate
    emitter: FileEmitter
    file_count: int
    throttle_every: int = 0
    throttle_seconds: float = 0.0
    sleep: Callable[[float], None] = time.sleep
    generated: list[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        return index_width(self.file_count)

    def path_for(self, index: int) -> Path:
        return self.output_dir / file_name(index, self.width)

    def render_row(self) -> tuple[int, str]:
        """Take the next counter value and render one record with it."""
        counter = self.allocator.next()
        return counter, self.template.render(counter, self.allocator.current_date())

    def emit(self, index: int, content: str) -> Path:
        """Write one file and record it; throttle every Nth file."""
        path = self.path_for(index)
        self.emitter.write(path, content)
        self.generated.append(str(path))

        if self.throttle_every and index % self.throttle_every == 0:
            self.sleep(self.throttle_seconds)
        return path

    def should_log(self, index: int) -> bool:
        # First three files and the last one
        return index <= 3 or index == self.file_count


def generate_files(
    file_count: int,
    rows_per_file: int | None = None,
    *,
    settings: Settings | None = None,
    output_dir: Path | None = None,
    template: RecordTemplate = DEFAULT_TEMPLATE,
    emitter: FileEmitter | None = None,
    clock: Callable[[], datetime] = datetime.now,
    sleep: Callable[[float], None] = time.sleep,
) -> GenerationResult:
    """Generate ``file_count`` CSV files into a freshly cleaned directory.

    ``file_count`` and ``rows_per_file`` are expected to be validated
    positive integers; range checks belong to the caller.

    Args:
        file_count: Number of files to write.
        rows_per_file: Records per file.  None or 1 selects single-row mode.
        settings: Counter base, throttle and default output directory.
        output_dir: Overrides ``settings.output_path``.
        template: Record template to render.
        emitter: File writer (defaults to ``FileEmitter()``).
        clock: Source of the run start time.
        sleep: Used for the write throttle.

    Returns:
        SingleRowResult or MultiRowResult.

    Raises:
        DirectoryCreationError: Output directory could not be created.
        FileWriteError: A file could not be written by either strategy.
    """
    settings = settings or Settings()
    target = output_dir if output_dir is not None else settings.output_path
    multi_row = rows_per_file is not None and rows_per_file > 1

    if multi_row:
        logger.info(
            "Starting CSV generation: %d files with %d rows each", file_count, rows_per_file,
        )
    else:
        logger.info("Starting CSV generation process for %d files", file_count)

    prepare_output_dir(target)

    ctx = RunContext(
        output_dir=target,
        allocator=SequenceAllocator(base=settings.counter_base, clock=clock),
        template=template,
        emitter=emitter or FileEmitter(),
        file_count=file_count,
        throttle_every=settings.throttle_every,
        throttle_seconds=settings.throttle_seconds,
        sleep=sleep,
    )

    if multi_row:
        assert rows_per_file is not None
        return _generate_multi_row(ctx, rows_per_file)
    return _generate_single_row(ctx)


def _generate_single_row(ctx: RunContext) -> SingleRowResult:
    date = ctx.allocator.current_date()

    for index in range(1, ctx.file_count + 1):
        counter, row = ctx.render_row()
        path = ctx.emit(index, row)
        if ctx.should_log(index):
            logger.info(
                "Generated file %d: %s with position8=%d, date=%s",
                index, path, counter, date,
            )

    logger.info("Successfully generated %d CSV files", len(ctx.generated))
    return SingleRowResult(
        total_files_generated=len(ctx.generated),
        generated_files=tuple(ctx.generated),
        output_directory=str(ctx.output_dir),
        timestamp=ctx.allocator.timestamp,
        tomorrow_date=date,
        starting_counter=ctx.allocator.base,
        ending_counter=ctx.allocator.peek() - 1,
    )


def _generate_multi_row(ctx: RunContext, rows_per_file: int) -> MultiRowResult:
    date = ctx.allocator.current_date()
    terminator = ctx.emitter.line_terminator

    for index in range(1, ctx.file_count + 1):
        rows = [ctx.render_row() for _ in range(rows_per_file)]
        # The emitter appends the final terminator
        content = terminator.join(row for _, row in rows)
        path = ctx.emit(index, content)
        if ctx.should_log(index):
            logger.info(
                "Generated file %d: %s with %d rows, position8 range: %d to %d",
                index, path, rows_per_file, rows[0][0], rows[-1][0],
            )

    total_rows = ctx.file_count * rows_per_file
    logger.info(
        "Successfully generated %d CSV files with %d rows each (total: %d rows)",
        len(ctx.generated), rows_per_file, total_rows,
    )
    return MultiRowResult(
        total_files_generated=len(ctx.generated),
        generated_files=tuple(ctx.generated),
        output_directory=str(ctx.output_dir),
        timestamp=ctx.allocator.timestamp,
        tomorrow_date=date,
        starting_counter=ctx.allocator.base,
        ending_counter=ctx.allocator.peek() - 1,
        rows_per_file=rows_per_file,
        total_rows=total_rows,
    )
