"""Errors that abort a scan before it starts.

Everything else (unreadable folders, unreadable files) is reported per path
and never raised past the scan driver.
"""


class ScanError(Exception):
    """Base class for fatal scan errors."""


class InvalidRootError(ScanError):
    def __init__(self, root: str):
        super().__init__(f"Invalid folder path: {root!r}")
        self.root = root


class EmptySearchTermError(ScanError):
    def __init__(self):
        super().__init__("Please enter a search string.")
