import sys
import os

import pytest

# Add backend/ to path so tests can import backend modules directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

# Add scripts/ to path so tests can import script modules directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "scripts"))


@pytest.fixture
def course_file(tmp_path):
    """Write rows to a course file and return its path."""
    def _write(*rows, name="courses.csv", trailing_newline=True):
        path = tmp_path / name
        text = "\n".join(rows)
        if rows and trailing_newline:
            text += "\n"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
