"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml file."""
    content = """\
# Project metadata
[project]
name = "test-package"
version = "1.4.2"  # bumped by CI
dependencies = [
    "requests>=2.0",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


@pytest.fixture
def tmp_package_json(tmp_path: Path) -> Path:
    """Create a temporary package.json file."""
    package_json = tmp_path / "package.json"
    package_json.write_text(
        json.dumps({"name": "test-package", "version": "0.5.9", "private": True})
    )
    return package_json
