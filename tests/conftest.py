"""Test configuration helpers for ensuring local imports resolve."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()


@pytest.fixture
def write_model(tmp_path: Path):
    """Writes a model dictionary to a JSON file and returns its path."""

    def _write(model, name: str = "model.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(model, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
