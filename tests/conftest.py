"""Pytest fixtures and utilities for jsonfold tests."""

import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def settings_path(temp_dir: Path, monkeypatch) -> Path:
    """Point JSONFOLD_CONFIG at a throwaway location for every test."""
    path = temp_dir / "config" / "settings.json"
    monkeypatch.setenv("JSONFOLD_CONFIG", str(path))
    return path


@pytest.fixture
def annotated_text() -> str:
    """Lenient JSON exercising every dialect feature plus comments."""
    return (
        "{\n"
        "    'name': 'demo', // project name\n"
        "    `url`: \"http://example.com\", // homepage\n"
        "    \"tags\": ['a', 'b',],\n"
        "    \"nested\": { // settings block\n"
        "        \"depth\": 2, // how deep\n"
        "        \"empty\": [],\n"
        "    },\n"
        "}\n"
    )


@pytest.fixture
def mock_clipboard():
    """Patch the clipboard backend and yield the mock."""
    with patch("jsonfold.clipboard.pyperclip.copy") as copy:
        yield copy
