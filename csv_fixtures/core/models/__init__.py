"""
Domain models — Pydantic types for fixture generation.

All models are re-exported here for convenient access:

    from csv_fixtures.core.models import RecordTemplate, SingleRowResult, MultiRowResult
"""

from csv_fixtures.core.models.result import (
    GenerationResult,
    MultiRowResult,
    SingleRowResult,
    SplitResult,
)
from csv_fixtures.core.models.settings import Settings
from csv_fixtures.core.models.template import DEFAULT_TEMPLATE, RecordTemplate

__all__ = [
    # template.py
    "DEFAULT_TEMPLATE",
    # result.py
    "GenerationResult",
    "MultiRowResult",
    "RecordTemplate",
    # settings.py
    "Settings",
    "SingleRowResult",
    "SplitResult",
]
