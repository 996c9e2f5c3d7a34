"""
Sequence allocator — counter and value date for one generation run.

An allocator is created at the start of a run and handed to every
step that needs a value.  It holds no module-level state, so two
allocators never share a counter.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

DEFAULT_COUNTER_BASE = 2000

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
DATE_FORMAT = "%Y%m%d"


class SequenceAllocator:
    """Hands out the running counter and the fixed value date.

    The date is the day after ``started_at`` and is computed once, so a
    run that crosses midnight still stamps every row with the same date.
    """

    def __init__(
        self,
        base: int = DEFAULT_COUNTER_BASE,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.base = base
        self._next = base
        self.started_at = clock()
        self._date = (self.started_at.date() + timedelta(days=1)).strftime(DATE_FORMAT)

    def next(self) -> int:
        """Return the current counter value, then advance it."""
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """Return the value the next ``next()`` call will hand out."""
        return self._next

    def current_date(self) -> str:
        """Return tomorrow's date (relative to run start) as yyyyMMdd."""
        return self._date

    @property
    def timestamp(self) -> str:
        """Run start as yyyyMMdd_HHmmss."""
        return self.started_at.strftime(TIMESTAMP_FORMAT)
