#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from merge import combine_directory


INPUT_FOLDER = Path("data/companies")
OUTPUT_FILE = Path("data/combined_companies.csv")


def main() -> int:
    combine_directory(INPUT_FOLDER, OUTPUT_FILE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
