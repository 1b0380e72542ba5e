"""
Export a course file as a normalized table (CSV or xlsx).

Usage:
    python scripts/export_catalog.py [--src PATH] [--out PATH]

Defaults:
    --src  data/ABCU_Advising_Program_Input.csv (repo root)
    --out  data/courses_export.csv              (repo root)

The output extension picks the format: .xlsx is written with openpyxl,
anything else as CSV.
"""

import argparse
import os
import sys

import pandas as pd

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "backend"))

from data_loader import load_courses

EXPORT_COLUMNS = ["course_number", "course_title", "prerequisites", "prereq_count"]
PREREQ_JOIN = ";"


def catalog_to_frame(catalog) -> pd.DataFrame:
    """One row per course, sorted by course number."""
    rows = [
        {
            "course_number": record.number,
            "course_title": record.title,
            "prerequisites": PREREQ_JOIN.join(record.prerequisites),
            "prereq_count": len(record.prerequisites),
        }
        for record in catalog.sorted_records()
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_catalog(src: str, dest: str, skip_malformed: bool = False) -> int:
    result = load_courses(src, skip_malformed=skip_malformed)
    if not result.ok:
        print(f"[FATAL] {result.error}", file=sys.stderr)
        return 1

    df = catalog_to_frame(result.catalog)
    out_dir = os.path.dirname(os.path.abspath(dest))
    os.makedirs(out_dir, exist_ok=True)

    if dest.lower().endswith(".xlsx"):
        with pd.ExcelWriter(dest, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="courses", index=False)
    else:
        df.to_csv(dest, index=False)

    print(f"[OK]   {len(df)} course(s) → {dest}")
    return 0


def main(args=None) -> int:
    repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    parser = argparse.ArgumentParser(description="Export the course file as a normalized table.")
    parser.add_argument(
        "--src",
        default=os.path.join(repo_root, "data", "ABCU_Advising_Program_Input.csv"),
        help="Source course file",
    )
    parser.add_argument(
        "--out",
        default=os.path.join(repo_root, "data", "courses_export.csv"),
        help="Destination .csv or .xlsx file",
    )
    parser.add_argument("--skip-malformed", action="store_true", help="Drop rows with fewer than two fields.")
    opts = parser.parse_args(args)
    return export_catalog(opts.src, opts.out, skip_malformed=opts.skip_malformed)


if __name__ == "__main__":
    raise SystemExit(main())
