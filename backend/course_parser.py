from catalog import CourseRecord
from normalizer import normalize_code, normalize_codes

# Course rows are plain comma-separated text: no quoting, no escaping.
DELIMITER = ","

MIN_FIELDS = 2
_LINE_ENDINGS = ("\r\n", "\n", "\r")


def _strip_line_ending(line: str) -> str:
    for ending in _LINE_ENDINGS:
        if line.endswith(ending):
            return line[: -len(ending)]
    return line


def split_fields(line: str, delimiter: str = DELIMITER) -> list[str]:
    """
    Splits one row into fields, keeping empty fields as "".
    Only the line terminator is removed; whitespace around fields is kept.
    """
    return _strip_line_ending(line or "").split(delimiter)


def is_malformed_line(line: str, delimiter: str = DELIMITER) -> bool:
    """True when the row does not carry both a course number and a title."""
    text = _strip_line_ending(line or "")
    if not text:
        return True
    return len(text.split(delimiter)) < MIN_FIELDS


def parse_course_line(line: str, delimiter: str = DELIMITER) -> CourseRecord:
    """
    Parses 'NUMBER,TITLE,PREREQ1,PREREQ2,...' into a CourseRecord.

    - NUMBER and every PREREQ are normalized; TITLE is kept verbatim.
    - Empty PREREQ slots ('MATH201,Calculus I,,') are dropped.
    - Missing NUMBER/TITLE fields default to "" so any line yields a record;
      callers decide what to do with those via is_malformed_line().
    """
    fields = split_fields(line, delimiter)
    number = normalize_code(fields[0]) if len(fields) > 0 else ""
    title = fields[1] if len(fields) > 1 else ""
    prerequisites = tuple(normalize_codes(fields[2:]))
    return CourseRecord(number=number, title=title, prerequisites=prerequisites)
