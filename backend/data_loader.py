import sys
from dataclasses import dataclass, field

from catalog import Catalog
from course_parser import DELIMITER, is_malformed_line, parse_course_line


@dataclass
class LoadResult:
    """Outcome of one load: the new catalog, or an empty one plus the reason."""

    catalog: Catalog
    ok: bool = True
    error: str | None = None
    malformed_lines: list[int] = field(default_factory=list)

    @classmethod
    def failure(cls, reason: str) -> "LoadResult":
        return cls(catalog=Catalog.empty(), ok=False, error=reason)


def load_courses_from_lines(
    lines,
    delimiter: str = DELIMITER,
    skip_malformed: bool = False,
) -> LoadResult:
    """Build a catalog from an iterable of text rows, one course per row."""
    records = []
    malformed: list[int] = []

    for line_no, line in enumerate(lines, start=1):
        if is_malformed_line(line, delimiter):
            malformed.append(line_no)
            if skip_malformed:
                continue
        records.append(parse_course_line(line, delimiter))

    if malformed:
        action = "skipped" if skip_malformed else "kept with empty fields"
        print(
            f"[WARN] {len(malformed)} line(s) have fewer than two fields ({action}): {malformed}",
            file=sys.stderr,
        )

    return LoadResult(catalog=Catalog(records), ok=True, malformed_lines=malformed)


def load_courses(
    data_path: str,
    delimiter: str = DELIMITER,
    encoding: str = "utf-8",
    skip_malformed: bool = False,
) -> LoadResult:
    """
    Load the course file at data_path.

    A file that cannot be opened or decoded is not fatal: the result carries an
    empty catalog with ok=False and the reason, and the caller reports it.
    """
    try:
        with open(data_path, "r", encoding=encoding, newline="") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"[WARN] Could not read course file {data_path}: {exc}", file=sys.stderr)
        return LoadResult.failure(f"source not accessible: {data_path} ({exc})")

    # Rows end at "\n" only; a trailing "\r" is dropped by the parser.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    result = load_courses_from_lines(lines, delimiter=delimiter, skip_malformed=skip_malformed)
    print(f"[INFO] Loaded {len(result.catalog)} course(s) from {data_path}")
    return result
