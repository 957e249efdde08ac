from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SNAPSHOT_DIR = Path(__file__).parent / "snapshots"


@pytest.fixture
def read_fixture() -> Callable[[str], str]:
    def read(name: str) -> str:
        return (FIXTURE_DIR / name).read_text(encoding="utf-8")

    return read


@pytest.fixture
def snapshot() -> Callable[[str], Any]:
    def load(name: str) -> Any:
        return json.loads((SNAPSHOT_DIR / name).read_text(encoding="utf-8"))

    return load
