"""
CSV routes — generate fixture files and split uploads.

Blueprint: csv_bp
Prefix: /api

Thin HTTP wrappers over ``csv_fixtures.core.services``.  Parameter
validation lives here; the services assume valid input.

Endpoints:
    POST /csv/generate?count=N[&rowsPerFile=R]  — generate N files
    POST /csv/split                             — split an uploaded CSV
    GET  /csv/test                              — liveness check
"""

from __future__ import annotations

import io
import logging

from flask import Blueprint, current_app, jsonify, request

from csv_fixtures.core.errors import FixtureError
from csv_fixtures.core.models.settings import Settings
from csv_fixtures.core.services.generator import generate_files
from csv_fixtures.core.services.splitter import split_lines

logger = logging.getLogger(__name__)

csv_bp = Blueprint("csv", __name__)

_DETAILS = "Check server logs for more information"


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _fail(message: str, status: int = 400):  # type: ignore[no-untyped-def]
    return jsonify({"success": False, "error": message}), status


@csv_bp.route("/csv/generate", methods=["POST"])
def csv_generate():  # type: ignore[no-untyped-def]
    """Generate ``count`` files, one record each or ``rowsPerFile`` each."""
    settings = _settings()
    max_count = settings.max_file_count

    count = request.args.get("count", type=int)
    if count is None or count <= 0 or count > max_count:
        return _fail(f"Count must be between 1 and {max_count}!")

    raw_rows = request.args.get("rowsPerFile")
    rows_per_file = request.args.get("rowsPerFile", type=int)
    if raw_rows is not None and (rows_per_file is None or rows_per_file < 1):
        return _fail("Rows per file must be at least 1!")

    multi_row = rows_per_file is not None and rows_per_file > 1
    if multi_row:
        logger.info("Generating %d CSV files with %d rows each (multi-row mode)", count, rows_per_file)
    else:
        logger.info("Generating %d CSV files with 1 row each (single-row mode)", count)

    try:
        result = generate_files(count, rows_per_file, settings=settings)
    except FixtureError as e:
        logger.error("Error generating files: %s", e, exc_info=True)
        return jsonify({"success": False, "error": str(e), "details": _DETAILS}), 500

    per_file = rows_per_file if multi_row else 1
    noun = "rows" if multi_row else "row"
    return jsonify({
        "success": True,
        "message": f"Generated {count} files with {per_file} {noun} each successfully!",
        "data": result.to_dict(),
    })


@csv_bp.route("/csv/split", methods=["POST"])
def csv_split():  # type: ignore[no-untyped-def]
    """Split an uploaded CSV (multipart field ``file``) into one file per line."""
    if "file" not in request.files:
        return _fail("No file provided")

    uploaded = request.files["file"]
    if not uploaded.filename:
        return _fail("No filename")

    try:
        text = uploaded.read().decode("utf-8")
    except UnicodeDecodeError:
        return _fail("File must be UTF-8 text")

    try:
        result = split_lines(
            io.StringIO(text, newline=""),
            uploaded.filename,
            _settings().split_path,
        )
    except FixtureError as e:
        logger.error("Error splitting file: %s", e, exc_info=True)
        return jsonify({"success": False, "error": str(e), "details": _DETAILS}), 500

    return jsonify({
        "success": True,
        "message": f"Split {result.total_lines_processed} lines successfully!",
        "data": result.to_dict(),
    })


@csv_bp.route("/csv/test")
def csv_test():  # type: ignore[no-untyped-def]
    """Liveness check with usage hint."""
    return jsonify({
        "success": True,
        "message": "CSV fixture generator is RUNNING!",
        "instruction": "Use POST /api/csv/generate?count=X&rowsPerFile=Y to generate files",
    })
