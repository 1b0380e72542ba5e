"""Text formatting for the advising menu. Returns lines; printing is the caller's job."""

from catalog import Catalog, CourseRecord

MENU_OPTIONS = [
    (1, "Load Courses"),
    (2, "Print Course List"),
    (3, "Print Course"),
    (9, "Exit"),
]

NO_COURSES_MESSAGE = "No courses loaded."
NOT_FOUND_MESSAGE = "Course not found."
PREREQ_SEPARATOR = ", "


def format_menu() -> str:
    lines = ["", "Menu:"]
    lines.extend(f"  {number}. {label}" for number, label in MENU_OPTIONS)
    return "\n".join(lines)


def format_course_line(record: CourseRecord) -> str:
    return f"{record.number}, {record.title}"


def format_prerequisites(record: CourseRecord) -> str:
    if not record.has_prerequisites:
        return "Prerequisites: None"
    return "Prerequisites: " + PREREQ_SEPARATOR.join(record.prerequisites)


def format_course_list(catalog: Catalog) -> list[str]:
    """Header plus one 'NUMBER, TITLE' line per course, sorted by number."""
    if not catalog:
        return [NO_COURSES_MESSAGE]
    lines = ["", "Course List:"]
    lines.extend(format_course_line(r) for r in catalog.sorted_records())
    return lines


def format_course_detail(record: CourseRecord) -> list[str]:
    return [format_course_line(record), format_prerequisites(record)]
