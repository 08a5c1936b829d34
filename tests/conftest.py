from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_csv():
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding="utf-8") as f:
            f.write(text)
        return path

    return _write


@pytest.fixture
def companies(tmp_path, write_csv):
    """The two-file example: one empty cell in F1, one literal null in F2."""
    d = tmp_path / "companies"
    write_csv(d / "F1.csv", "Name,City\nAcme,NY\nBeta,\n")
    write_csv(d / "F2.csv", "Name,Revenue\nAcme,100\nGamma,null\n")
    return d
