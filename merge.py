from __future__ import annotations

import csv
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from scanner import ensure_input_dir, list_csv_files
from xlsx_export import write_xlsx


DEFAULT_INPUT_DIR = Path("data/companies")
DEFAULT_OUTPUT_FILE = Path("data/combined_companies.csv")

DELIMITER = ","
NULL_LITERAL = "null"

# Console colors
RED = "\033[31m"
RESET = "\033[0m"

Row = Dict[str, str]
Splitter = Callable[[str], List[str]]


def split_plain(line: str) -> List[str]:
    # Literal split: quoted values with embedded commas will misalign columns
    return line.split(DELIMITER)


def split_rfc4180(line: str) -> List[str]:
    # csv.reader yields [] for a blank line; match split_plain's [""]
    fields = next(csv.reader([line], delimiter=DELIMITER), [])
    return fields or [""]


@dataclass
class Rejection:
    source: Path
    line_no: int
    row: Row
    reason: str


@dataclass
class MergeResult:
    headers: List[str] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    rejected: List[Rejection] = field(default_factory=list)
    files_read: List[Path] = field(default_factory=list)


class Outcome(enum.Enum):
    CREATED_INPUT_DIR = "created_input_dir"
    NO_INPUT_FILES = "no_input_files"
    WRITTEN = "written"


def _is_null(value: Optional[str]) -> bool:
    return value is None or value.lower() == NULL_LITERAL


def rejection_reason(row: Row) -> Optional[str]:
    """Describe the first cell that disqualifies the row, or None if it is valid."""
    for col, val in row.items():
        if val is None or not val.strip():
            return f"empty value in column '{col}'"
        if val.strip().lower() == NULL_LITERAL:
            return f"null value in column '{col}'"
    return None


def is_row_valid(row: Row) -> bool:
    return rejection_reason(row) is None


def _add_headers(headers: List[str], seen: set, tokens: Iterable[str]) -> None:
    for h in tokens:
        if h not in seen:
            seen.add(h)
            headers.append(h)


def _build_row(local_headers: List[str], fields: List[str]) -> Row:
    row: Row = {}
    for i, h in enumerate(local_headers):
        row[h] = fields[i].strip() if i < len(fields) else ""
    return row


def collect_rows(files: Iterable[Path], splitter: Splitter = split_plain) -> MergeResult:
    """Read every file in order, unifying headers and keeping only valid rows.

    Headers are ordered by first occurrence (file order, then left to right).
    Each row only carries the columns of its own file; values beyond the
    file's header count are dropped and missing trailing values become "".
    Files without any lines are skipped.
    """
    result = MergeResult()
    seen: set = set()
    for path in files:
        # utf-8-sig drops a leading BOM so the first header matches across files
        with path.open(encoding="utf-8-sig", newline="") as f:
            lines = (ln.rstrip("\r\n") for ln in f)
            header_line = next(lines, None)
            if header_line is None:
                continue
            local_headers = [h.strip() for h in splitter(header_line)]
            _add_headers(result.headers, seen, local_headers)
            result.files_read.append(path)

            for line_no, line in enumerate(lines, start=2):
                row = _build_row(local_headers, splitter(line))
                reason = rejection_reason(row)
                if reason is None:
                    result.rows.append(row)
                else:
                    result.rejected.append(Rejection(source=path, line_no=line_no, row=row, reason=reason))
    return result


def render_value(row: Row, header: str) -> str:
    val = row.get(header)
    if _is_null(val):
        return ""
    return val


def _write_lines(path: Path, records: Iterable[List[str]], quoted: bool) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        if quoted:
            w = csv.writer(f, delimiter=DELIMITER, lineterminator="\n")
            for rec in records:
                w.writerow(rec)
        else:
            for rec in records:
                f.write(DELIMITER.join(rec) + "\n")


def render_records(headers: List[str], rows: Iterable[Row]) -> List[List[str]]:
    """Header record followed by one record per row, in header order."""
    records = [list(headers)]
    for row in rows:
        records.append([render_value(row, h) for h in headers])
    return records


def write_combined_csv(path: Path, headers: List[str], rows: Iterable[Row], quoted: bool = False) -> None:
    _write_lines(path, render_records(headers, rows), quoted)


def write_rejected_csv(path: Path, headers: List[str], rejected: Iterable[Rejection], quoted: bool = False) -> None:
    records = [["source_file", "line", "reason"] + list(headers)]
    for rej in rejected:
        # Keep raw cells here so the offending "null" stays visible
        cells = [rej.row.get(h, "") or "" for h in headers]
        records.append([rej.source.name, str(rej.line_no), rej.reason] + cells)
    _write_lines(path, records, quoted)


def combine_directory(
    input_dir: Path = DEFAULT_INPUT_DIR,
    output_file: Path = DEFAULT_OUTPUT_FILE,
    *,
    quoted: bool = False,
    verbose: bool = False,
    rejected_file: Optional[Path] = None,
    xlsx_file: Optional[Path] = None,
) -> Outcome:
    if not ensure_input_dir(input_dir):
        print(f"Created input folder: {input_dir.resolve()}")
        print("Please add your company CSV files and re-run.")
        return Outcome.CREATED_INPUT_DIR

    csv_files = list_csv_files(input_dir)
    if not csv_files:
        print(f"No CSV files found in folder: {input_dir}")
        return Outcome.NO_INPUT_FILES

    if verbose:
        print(f"[combine] found {len(csv_files)} CSV file(s) in {input_dir}")

    result = collect_rows(csv_files, splitter=split_rfc4180 if quoted else split_plain)

    if verbose:
        print(f"[combine] headers: {result.headers}")
        for rej in result.rejected:
            print(f"{RED}[combine] rejected {rej.source.name}:{rej.line_no} {rej.reason}{RESET}")

    write_combined_csv(output_file, result.headers, result.rows, quoted=quoted)
    print(f"Combined CSV written to: {output_file}")

    if rejected_file is not None:
        write_rejected_csv(rejected_file, result.headers, result.rejected, quoted=quoted)
        print(f"Wrote {rejected_file}")

    if xlsx_file is not None:
        write_xlsx(xlsx_file, render_records(result.headers, result.rows))
        print(f"Wrote {xlsx_file}")

    print(
        f"Merged {len(result.files_read)} file(s): {len(result.rows)} row(s) kept, "
        f"{len(result.rejected)} rejected, {len(result.headers)} column(s)"
    )
    return Outcome.WRITTEN
