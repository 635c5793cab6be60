from __future__ import annotations

from pathlib import Path

import pytest

from aoc2023.util import read_lines

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def example():
    def _load(name: str):
        return read_lines(EXAMPLES_DIR / name)

    return _load
