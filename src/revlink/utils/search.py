"""Locating a search option inside file content."""

import re


def find_line(content: str, search_option: str | None) -> int | None:
    """Return the 1-based line number a search option points at.

    - ``"42"`` is a line number (clamped to the file length)
    - ``"/regex/"`` matches a regular expression
    - anything else is looked up as text, then case-insensitively
    """
    if not search_option:
        return None

    lines = content.splitlines()
    if not lines:
        return None

    if search_option.isdecimal():
        return max(1, min(int(search_option), len(lines)))

    if len(search_option) > 2 and search_option.startswith("/") and search_option.endswith("/"):
        try:
            regex = re.compile(search_option[1:-1])
        except re.error:
            regex = None
        if regex is not None:
            for number, line in enumerate(lines, 1):
                if regex.search(line):
                    return number
            return None

    for number, line in enumerate(lines, 1):
        if search_option in line:
            return number

    needle = search_option.lower()
    for number, line in enumerate(lines, 1):
        if needle in line.lower():
            return number

    return None
