import argparse
import sys
from pathlib import Path

from merge import DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_FILE, combine_directory


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Combine per-company CSV files into one CSV with a unified header, dropping rows with empty/null cells.",
    )
    p.add_argument("--dir", type=Path, default=DEFAULT_INPUT_DIR, help="Folder with per-company CSVs (created if missing)")
    p.add_argument("--out", type=Path, default=DEFAULT_OUTPUT_FILE, help="Output CSV path")
    p.add_argument(
        "--quoted",
        action="store_true",
        help="Parse lines as RFC 4180 CSV (quoted fields may contain commas); output is quoted where needed",
    )
    p.add_argument("--rejected", type=Path, default=None, help="Optional CSV listing rejected rows and why")
    p.add_argument("--xlsx", type=Path, default=None, help="Optional Excel copy of the combined table")
    p.add_argument("--verbose", action="store_true", help="Log headers and every rejected row")
    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(argv)

    combine_directory(
        input_dir=args.dir,
        output_file=args.out,
        quoted=args.quoted,
        verbose=args.verbose,
        rejected_file=args.rejected,
        xlsx_file=args.xlsx,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
