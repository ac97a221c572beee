"""Iterative directory traversal that survives unreadable folders."""

import os
from collections.abc import Callable, Iterator

from .logs import get_logger

ErrorCallback = Callable[[str, OSError], None]


def _report(path: str, exc: OSError, on_error: ErrorCallback | None, log: bool) -> None:
    if log:
        if isinstance(exc, PermissionError):
            get_logger().warning("Access denied: %s", path)
        else:
            get_logger().warning("Cannot list %s: %s", path, exc.strerror or exc)
    if on_error is not None:
        on_error(path, exc)


def walk_files(root: str, on_error: ErrorCallback | None = None, log_errors: bool = True) -> Iterator[str]:
    """
    Yield the path of every file under ``root``, the root's own files included.

    Directories are kept on an explicit stack rather than recursed into.
    A folder that cannot be listed is reported through ``on_error`` and
    skipped with everything beneath it; the walk carries on with the rest.
    Symlinked folders are not followed.
    """
    stack = [os.fspath(root)]
    while stack:
        current = stack.pop()
        files: list[str] = []
        subdirs: list[str] = []
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            subdirs.append(entry.path)
                        elif entry.is_file():
                            files.append(entry.path)
                    except OSError:
                        # Entry vanished or cannot be stat'ed; nothing to read.
                        continue
        except OSError as exc:
            _report(current, exc, on_error, log_errors)
            continue

        yield from files
        stack.extend(reversed(subdirs))


def count_files(root: str) -> int | None:
    """
    Count the files ``walk_files`` would yield, for progress display only.

    Returns None when the count cannot be trusted (the root itself is
    unreadable or the walk fails unexpectedly).
    """
    root = os.fspath(root)
    root_failed = False

    def on_error(path: str, _exc: OSError) -> None:
        nonlocal root_failed
        if path == root:
            root_failed = True

    try:
        total = sum(1 for _ in walk_files(root, on_error=on_error, log_errors=False))
    except Exception as e:
        get_logger().warning("File count failed for %s: %s", root, e)
        return None
    if root_failed:
        get_logger().warning("File count failed for %s: folder cannot be listed", root)
        return None
    return total
