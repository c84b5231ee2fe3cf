"""Shared test fixtures for sfident tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty directory so no sfident.yaml leaks in."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(project_dir: Path):
    """Write an sfident.yaml into the project directory."""

    def _write(text: str, name: str = "sfident.yaml") -> Path:
        path = project_dir / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def duck():
    """In-memory DuckDB connection, closed after the test."""
    duckdb = pytest.importorskip("duckdb")
    conn = duckdb.connect()
    try:
        yield conn
    finally:
        conn.close()
