import string

# ASCII-only uppercase map so the result always has the same length as the input.
# str.upper() would expand characters like "ß" to "SS".
_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize_code(raw: str | None) -> str:
    """
    Normalizes a course number to its canonical uppercase form.
    Handles: 'csci100', 'CsCi100', 'CSCI100' -> 'CSCI100'
    Whitespace, digits and punctuation are left exactly as they are.
    None is treated as the empty string.
    """
    if raw is None:
        return ""
    return str(raw).translate(_UPPER_TABLE)


def normalize_codes(raw_codes) -> list[str]:
    """Normalizes each code in order, dropping empty entries."""
    return [normalize_code(code) for code in raw_codes if code]
