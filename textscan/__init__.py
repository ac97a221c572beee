"""
textscan: find the UTF-8 text files under a folder that contain a string.

Run as ``textscan`` (console script) or ``python -m textscan``; the scanning
pieces are importable on their own.
"""

__version__ = "0.1.0"

from .classifier import Classification, ClassifyResult, classify_file, is_utf8_file, is_valid_utf8
from .errors import EmptySearchTermError, InvalidRootError, ScanError
from .matcher import file_contains
from .models import FileOutcome, FileStatus, ScanRequest, ScanResult
from .reveal import reveal_in_file_manager
from .scanner import Scanner, process_file, run_scan
from .walker import count_files, walk_files

__all__ = [
    "__version__",
    "Classification",
    "ClassifyResult",
    "EmptySearchTermError",
    "FileOutcome",
    "FileStatus",
    "InvalidRootError",
    "ScanError",
    "ScanRequest",
    "ScanResult",
    "Scanner",
    "classify_file",
    "count_files",
    "file_contains",
    "is_utf8_file",
    "is_valid_utf8",
    "process_file",
    "reveal_in_file_manager",
    "run_scan",
    "walk_files",
]
