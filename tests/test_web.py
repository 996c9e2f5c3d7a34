"""
Tests for the HTTP API — app factory and CSV routes.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from flask.testing import FlaskClient

from csv_fixtures.core.errors import FileWriteError
from csv_fixtures.core.models.settings import Settings
from csv_fixtures.ui.web.server import create_app


@pytest.fixture()
def client(tmp_path: Path) -> FlaskClient:
    settings = Settings(base_dir=str(tmp_path), throttle_every=0)
    app = create_app(project_root=tmp_path, settings=settings)
    app.config["TESTING"] = True
    return app.test_client()


# ── App Factory Tests ────────────────────────────────────────────────


class TestAppFactory:
    def test_create_app(self, tmp_path: Path):
        app = create_app(project_root=tmp_path)
        assert app.config["SETTINGS"].output_path == tmp_path.resolve() / "generated_files"
        assert "PROJECT_ROOT" not in app.config
        assert isinstance(app.config["SETTINGS"], Settings)

    def test_loads_config_file(self, tmp_path: Path):
        cfg = tmp_path / "csvfixtures.yml"
        cfg.write_text("max_file_count: 5\n")
        app = create_app(project_root=tmp_path, config_path=cfg)
        assert app.config["SETTINGS"].max_file_count == 5


# ── Generate ─────────────────────────────────────────────────────────


class TestGenerate:
    def test_single_row(self, client: FlaskClient, tmp_path: Path):
        resp = client.post("/api/csv/generate?count=3")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["success"] is True
        assert body["message"] == "Generated 3 files with 1 row each successfully!"

        data = body["data"]
        assert data["mode"] == "single_row"
        assert data["totalFilesGenerated"] == 3
        assert data["startingPosition8Value"] == 2000
        assert data["endingPosition8Value"] == 2002
        assert "totalRows" not in data
        assert (tmp_path / "generated_files" / "file_003.csv").is_file()

    def test_multi_row(self, client: FlaskClient):
        resp = client.post("/api/csv/generate?count=2&rowsPerFile=3")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["message"] == "Generated 2 files with 3 rows each successfully!"
        assert body["data"]["mode"] == "multi_row"
        assert body["data"]["totalRows"] == 6
        assert body["data"]["endingPosition8Value"] == 2005

    def test_rows_per_file_one(self, client: FlaskClient):
        resp = client.post("/api/csv/generate?count=2&rowsPerFile=1")
        assert resp.status_code == 200
        assert resp.get_json()["data"]["mode"] == "single_row"

    @pytest.mark.parametrize("query", [
        "", "count=0", "count=-3", "count=1001", "count=abc",
    ])
    def test_invalid_count(self, client: FlaskClient, query: str):
        resp = client.post(f"/api/csv/generate?{query}")
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["success"] is False
        assert body["error"] == "Count must be between 1 and 1000!"

    @pytest.mark.parametrize("rows", ["0", "-1", "many"])
    def test_invalid_rows_per_file(self, client: FlaskClient, rows: str):
        resp = client.post(f"/api/csv/generate?count=2&rowsPerFile={rows}")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Rows per file must be at least 1!"

    def test_get_not_allowed(self, client: FlaskClient):
        assert client.get("/api/csv/generate?count=1").status_code == 405

    def test_fatal_error_is_500(self, client: FlaskClient, monkeypatch):
        from csv_fixtures.ui.web import routes_csv

        def boom(*args, **kwargs):
            raise FileWriteError("Unable to create file: file_001.csv")

        monkeypatch.setattr(routes_csv, "generate_files", boom)
        resp = client.post("/api/csv/generate?count=1")
        assert resp.status_code == 500
        body = resp.get_json()
        assert body["success"] is False
        assert body["error"] == "Unable to create file: file_001.csv"
        assert "details" in body


# ── Split ────────────────────────────────────────────────────────────


class TestSplit:
    def test_split_upload(self, client: FlaskClient, tmp_path: Path):
        resp = client.post(
            "/api/csv/split",
            data={"file": (io.BytesIO(b"a,b\r\nc,d\n"), "upload.csv")},
            content_type="multipart/form-data",
        )
        assert resp.status_code == 200
        data = resp.get_json()["data"]
        assert data["originalFileName"] == "upload.csv"
        assert data["totalLinesProcessed"] == 2
        split_dir = tmp_path / "split_files"
        assert len(list(split_dir.glob("line_*_*.csv"))) == 2

    def test_missing_file(self, client: FlaskClient):
        resp = client.post("/api/csv/split", data={}, content_type="multipart/form-data")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "No file provided"

    def test_not_utf8(self, client: FlaskClient):
        resp = client.post(
            "/api/csv/split",
            data={"file": (io.BytesIO(b"\xff\xfe\xfa"), "bad.csv")},
            content_type="multipart/form-data",
        )
        assert resp.status_code == 400


class TestLiveness:
    def test_test_endpoint(self, client: FlaskClient):
        resp = client.get("/api/csv/test")
        assert resp.status_code == 200
        assert "RUNNING" in resp.get_json()["message"]
