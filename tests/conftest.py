"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

import pytest

from csv_fixtures.core.models.settings import Settings
from csv_fixtures.core.models.template import DEFAULT_TEMPLATE, RecordTemplate

# 14:30:05 on 18 Oct 2026 → value date 20261019
RUN_START = datetime(2026, 10, 18, 14, 30, 5)


@pytest.fixture
def fixed_clock():
    """A clock frozen at RUN_START."""
    return lambda: RUN_START


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Default settings rooted in tmp_path, throttle off."""
    return Settings(base_dir=str(tmp_path), throttle_every=0)


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "generated_files"


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any setup_logging() a test (or a CLI invocation) performed."""
    root = logging.getLogger()
    level = root.level
    yield root
    # pytest's own capture handlers are subclasses; leave those alone
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def _unrender(template: RecordTemplate, line: str) -> tuple[str, int, str]:
    """Reverse a rendering: return (reconstructed template, counter, date)."""
    counter_marker, date_marker = template.placeholders()
    pattern = (
        re.escape(template.text)
        .replace(re.escape(counter_marker), r"(\d+)", 1)
        .replace(re.escape(date_marker), r"(\d{8})", 1)
    )
    m = re.fullmatch(pattern, line)
    assert m is not None, f"line does not match template: {line[:60]}"
    start_c, end_c = m.span(1)
    start_d, end_d = m.span(2)
    rebuilt = (
        line[:start_c] + counter_marker + line[end_c:start_d] + date_marker + line[end_d:]
    )
    return rebuilt, int(m.group(1)), m.group(2)


@pytest.fixture
def unrender():
    """Callable that reverses a template rendering."""
    return lambda line, template=DEFAULT_TEMPLATE: _unrender(template, line)
