"""Shared pytest fixtures for the friendly-errors test suite."""

from __future__ import annotations

import pytest

from tests.helpers import HELLO_WORLD


@pytest.fixture
def hello_world() -> str:
    return HELLO_WORLD


@pytest.fixture
def source_file(tmp_path):
    """A small file with a syntax error on line 2."""
    path = tmp_path / "main.rs"
    path.write_text("let x = 1;\nlet y = ;\n")
    return path
