"""
ABCU advising menu.

Usage:
    python backend/advisor.py
    python backend/advisor.py --path data/ABCU_Advising_Program_Input.csv --load
    COURSE_DATA_PATH=other.csv python backend/advisor.py
"""

import argparse
import os
import sys

# Ensure backend/ is on sys.path so sibling imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

from catalog import Catalog
from data_loader import load_courses
from normalizer import normalize_code
from presenter import (
    NOT_FOUND_MESSAGE,
    format_course_detail,
    format_course_list,
    format_menu,
)

# ── Paths / config ────────────────────────────────────────────────────────────
BACKEND_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(BACKEND_DIR)
DEFAULT_DATA_PATH = os.path.join(PROJECT_ROOT, "data", "ABCU_Advising_Program_Input.csv")

CHOICE_LOAD = 1
CHOICE_LIST = 2
CHOICE_FIND = 3
CHOICE_EXIT = 9

_BOOL_TRUTHY = {"true", "1", "yes", "y"}


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _BOOL_TRUTHY


def resolve_data_path(raw_path: str | None) -> str:
    """Relative paths are taken from the project root, matching DEFAULT_DATA_PATH."""
    if not raw_path:
        return DEFAULT_DATA_PATH
    if not os.path.isabs(raw_path):
        return os.path.join(PROJECT_ROOT, raw_path)
    return raw_path


def parse_menu_choice(raw: str | None) -> int | None:
    """Returns the menu number typed by the user, or None if it is not an integer."""
    text = (raw or "").strip()
    if not text:
        return None
    sign = 1
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if not text.isdigit() or not text.isascii():
        return None
    return sign * int(text)


class AdvisingSession:
    """Owns the current catalog and runs the menu against it."""

    def __init__(
        self,
        data_path: str,
        input_fn=input,
        output_fn=print,
        encoding: str = "utf-8",
        skip_malformed: bool = False,
    ):
        self.data_path = data_path
        self.encoding = encoding
        self.skip_malformed = skip_malformed
        self.catalog = Catalog.empty()
        self._input = input_fn
        self._output = output_fn

    def _emit(self, lines) -> None:
        for line in lines:
            self._output(line)

    def load(self) -> bool:
        # A failed load still replaces the catalog (with an empty one).
        result = load_courses(
            self.data_path,
            encoding=self.encoding,
            skip_malformed=self.skip_malformed,
        )
        self.catalog = result.catalog
        if not result.ok:
            self._output(f"Error: Unable to load courses ({result.error}).")
            return False
        self._output(f"Courses loaded successfully. ({len(self.catalog)} courses)")
        return True

    def print_course_list(self) -> None:
        self._emit(format_course_list(self.catalog))

    def print_course(self, raw_number: str) -> bool:
        record = self.catalog.find(normalize_code(raw_number))
        if record is None:
            self._output(NOT_FOUND_MESSAGE)
            return False
        self._emit(format_course_detail(record))
        return True

    def handle(self, choice: int) -> bool:
        """Run one menu choice. Returns False once the user asks to exit."""
        if choice == CHOICE_LOAD:
            self.load()
        elif choice == CHOICE_LIST:
            self.print_course_list()
        elif choice == CHOICE_FIND:
            raw_number = self._input("Enter course number (e.g., CSCI100): ")
            self.print_course(raw_number)
        elif choice == CHOICE_EXIT:
            self._output("Goodbye.")
            return False
        else:
            self._output("Not a valid option.")
        return True

    def run(self) -> int:
        running = True
        while running:
            self._output(format_menu())
            try:
                raw = self._input("Enter choice: ")
            except (EOFError, KeyboardInterrupt):
                self._output("")
                self._output("Goodbye.")
                break

            choice = parse_menu_choice(raw)
            if choice is None:
                self._output("Invalid input. Please enter a number from the menu.")
                continue

            try:
                running = self.handle(choice)
            except (EOFError, KeyboardInterrupt):
                self._output("")
                self._output("Goodbye.")
                break
        return 0


def build_session(args=None) -> AdvisingSession:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Browse course titles and prerequisites.")
    parser.add_argument(
        "--path",
        default=None,
        help="Course file (NUMBER,TITLE,PREREQ...), relative to the current directory. "
        "Defaults to COURSE_DATA_PATH or data/.",
    )
    parser.add_argument(
        "--encoding",
        default=os.environ.get("COURSE_DATA_ENCODING", "utf-8"),
        help="Text encoding of the course file.",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        default=_env_bool("COURSE_SKIP_MALFORMED"),
        help="Drop rows with fewer than two fields instead of keeping them blank.",
    )
    parser.add_argument("--load", action="store_true", help="Load courses before showing the menu.")
    opts = parser.parse_args(args)

    # --path follows the shell; COURSE_DATA_PATH and the default follow the project root.
    if opts.path:
        data_path = os.path.abspath(opts.path)
    else:
        data_path = resolve_data_path(os.environ.get("COURSE_DATA_PATH"))

    session = AdvisingSession(
        data_path,
        encoding=opts.encoding,
        skip_malformed=opts.skip_malformed,
    )
    if opts.load:
        session.load()
    return session


def main(args=None) -> int:
    return build_session(args).run()


if __name__ == "__main__":
    raise SystemExit(main())
