from __future__ import annotations

from pathlib import Path
from typing import List


CSV_SUFFIX = ".csv"


def _is_csv(path: Path) -> bool:
    return path.name.lower().endswith(CSV_SUFFIX)


def ensure_input_dir(input_dir: Path) -> bool:
    """Return True when input_dir already exists; otherwise create it and return False.

    A freshly created folder means there is no input yet, which callers treat
    as a normal (first-run) termination rather than an error.
    """
    if input_dir.exists():
        return True
    input_dir.mkdir(parents=True, exist_ok=True)
    return False


def list_csv_files(input_dir: Path) -> List[Path]:
    # Non-recursive; directories named "*.csv" are not inputs
    files = [p for p in input_dir.iterdir() if p.is_file() and _is_csv(p)]
    return sorted(files, key=lambda p: p.name)
