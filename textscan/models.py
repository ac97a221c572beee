import os
import threading
from dataclasses import dataclass, field
from enum import Enum

from .errors import EmptySearchTermError, InvalidRootError


def default_parallelism() -> int:
    if hasattr(os, "sched_getaffinity"):
        try:
            return len(os.sched_getaffinity(0)) or 1
        except OSError:
            pass
    return os.cpu_count() or 1


@dataclass(frozen=True)
class ScanRequest:
    root: str
    search_term: str
    case_sensitive: bool = False
    count_first: bool = False
    reveal_matches: bool = False
    parallelism: int = field(default_factory=default_parallelism)
    # Carry a multi-byte sequence split by a read boundary into the next chunk.
    join_chunks: bool = False

    def __post_init__(self):
        if self.parallelism < 1:
            raise ValueError(f"parallelism must be a positive integer, got {self.parallelism}")

    def validate(self) -> None:
        if not self.root or not os.path.isdir(self.root):
            raise InvalidRootError(self.root)
        if not self.search_term:
            raise EmptySearchTermError()


class FileStatus(Enum):
    MATCHED = "Found"
    NOT_MATCHED = "Not Found"
    BINARY = "Not Found (binary)"
    ERROR = "Error"


@dataclass(frozen=True)
class FileOutcome:
    path: str
    status: FileStatus
    reason: str | None = None

    @property
    def label(self) -> str:
        if self.status is FileStatus.ERROR:
            return f"Error ({self.reason})" if self.reason else "Error"
        return self.status.value


@dataclass
class ScanResult:
    """Aggregate of one scan; read-only once ``run_scan`` returns."""

    scanned: int = 0
    errors: int = 0
    matches: set[str] = field(default_factory=set)
    inaccessible: list[str] = field(default_factory=list)
    total: int | None = None
    elapsed: float = 0.0
    root_unreadable: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, outcome: FileOutcome) -> bool:
        """Count one processed file. Returns True when the path is a new match."""
        with self._lock:
            self.scanned += 1
            if outcome.status is FileStatus.ERROR:
                self.errors += 1
            elif outcome.status is FileStatus.MATCHED and outcome.path not in self.matches:
                self.matches.add(outcome.path)
                return True
            return False

    def add_inaccessible(self, path: str) -> None:
        with self._lock:
            self.inaccessible.append(path)

    def matched_paths(self) -> list[str]:
        with self._lock:
            return sorted(self.matches)

    @property
    def matched(self) -> int:
        return len(self.matches)
