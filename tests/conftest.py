"""Shared fixtures for snippetscope tests."""

from pathlib import Path
from typing import Dict, Optional

import pytest


FILLER = "    $total = $total + 1;"


def build_lines(total: int, overrides: Optional[Dict[int, str]] = None) -> list:
    """Return `total` filler lines with selected 1-indexed lines replaced."""
    overrides = overrides or {}
    return [overrides.get(num, FILLER) for num in range(1, total + 1)]


@pytest.fixture
def make_lines():
    return build_lines


@pytest.fixture
def write_source(tmp_path):
    """Factory writing a source file from a list of lines."""

    def _write(lines, name: str = "Example.php", newline: str = "\n") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes((newline.join(lines) + newline).encode("utf-8"))
        return path

    return _write
