"""Line-by-line substring search over UTF-8 text files."""

from collections.abc import Iterable

from .logs import get_logger

# utf-8-sig drops a leading byte-order mark and otherwise reads plain UTF-8.
TEXT_ENCODING = "utf-8-sig"


def make_line_matcher(needle: str, case_sensitive: bool):
    if case_sensitive:
        def is_match(line: str) -> bool:
            return needle in line
    else:
        folded = needle.casefold()

        def is_match(line: str) -> bool:
            return folded in line.casefold()
    return is_match


def lines_contain(lines: Iterable[str], needle: str, case_sensitive: bool) -> bool:
    """True on the first line containing ``needle``; stops reading there."""
    is_match = make_line_matcher(needle, case_sensitive)
    for line in lines:
        if is_match(line.rstrip("\n")):
            return True
    return False


def search_file(path: str, needle: str, case_sensitive: bool) -> bool:
    """Like ``file_contains`` but lets ``OSError`` through to the caller."""
    with open(path, "r", encoding=TEXT_ENCODING, errors="replace") as f:
        return lines_contain(f, needle, case_sensitive)


def file_contains(path: str, needle: str, case_sensitive: bool = False) -> bool:
    """
    Whether any line of ``path`` contains ``needle``.

    Read failures count as "no match"; one bad file never stops a scan.
    An empty ``needle`` matches any file with at least one line.
    """
    try:
        return search_file(path, needle, case_sensitive)
    except OSError as e:
        get_logger().debug("Error reading %s: %s", path, e)
        return False
