from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE


SHEET_TITLE = "combined"


def _clean(value: str) -> str:
    # Control characters are not allowed in worksheet XML
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def write_xlsx(path: Path, records: Iterable[List[str]]) -> None:
    """Mirror rendered records (header first) into a single-sheet workbook.

    Every cell is stored as text, so values such as "=HYPERLINK(...)" stay
    literal instead of becoming formulas.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    for rec in records:
        ws.append([_clean(v) for v in rec])
        for cell in ws[ws.max_row]:
            cell.data_type = "s"
    wb.save(str(path))
