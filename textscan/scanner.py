"""Drive walker output through the classifier and matcher on a thread pool."""

import os
import queue
import threading
import time
from collections.abc import Callable

from .classifier import Classification, classify_file
from .logs import get_logger, log_exception
from .matcher import search_file
from .models import FileOutcome, FileStatus, ScanRequest, ScanResult
from .reveal import reveal_in_file_manager
from .walker import count_files, walk_files

ProgressHook = Callable[[FileOutcome, ScanResult], None]
StartHook = Callable[[ScanResult], None]
MatchHook = Callable[[str], None]

# Pending tasks (and unreported results) allowed per worker before producers wait.
QUEUE_DEPTH = 64

_DONE = object()


def process_file(path: str, request: ScanRequest) -> FileOutcome:
    """Classify one file and, if it is text, search it. Never raises OSError."""
    verdict = classify_file(path, join_chunks=request.join_chunks)
    if verdict.kind is Classification.READ_ERROR:
        return FileOutcome(path, FileStatus.ERROR, verdict.reason)
    if verdict.kind is Classification.BINARY:
        return FileOutcome(path, FileStatus.BINARY)
    try:
        found = search_file(path, request.search_term, request.case_sensitive)
    except OSError as e:
        return FileOutcome(path, FileStatus.ERROR, e.strerror or str(e))
    return FileOutcome(path, FileStatus.MATCHED if found else FileStatus.NOT_MATCHED)


class Scanner:
    def __init__(
        self,
        request: ScanRequest,
        *,
        on_progress: ProgressHook | None = None,
        on_match: MatchHook | None = None,
        on_start: StartHook | None = None,
        reveal: MatchHook = reveal_in_file_manager,
    ):
        self.request = request
        self.on_start = on_start
        self.on_progress = on_progress
        self.on_match = on_match
        self.reveal = reveal
        self._logger = get_logger()

    def run(self) -> ScanResult:
        request = self.request
        request.validate()

        result = ScanResult()
        start = time.perf_counter()
        if request.count_first:
            result.total = count_files(request.root)
        self._call(self.on_start, result)

        workers = request.parallelism
        tasks: queue.Queue = queue.Queue(maxsize=workers * QUEUE_DEPTH)
        outcomes: queue.Queue = queue.Queue(maxsize=workers * QUEUE_DEPTH)

        producer = threading.Thread(
            target=self._produce, args=(tasks, result), name="textscan-walker", daemon=True
        )
        pool = [
            threading.Thread(
                target=self._work, args=(tasks, outcomes), name=f"textscan-worker-{n}", daemon=True
            )
            for n in range(workers)
        ]
        producer.start()
        for t in pool:
            t.start()

        # This thread is the only one that reports; workers just hand back outcomes.
        finished = 0
        while finished < workers:
            item = outcomes.get()
            if item is _DONE:
                finished += 1
                continue
            self._record(item, result)

        producer.join()
        for t in pool:
            t.join()

        result.elapsed = time.perf_counter() - start
        self._logger.info(
            "Scan of %s finished: %d scanned, %d matched, %d errors, %.2fs",
            request.root, result.scanned, result.matched, result.errors, result.elapsed,
        )
        return result

    # ---------- Threads ----------
    def _produce(self, tasks: queue.Queue, result: ScanResult) -> None:
        root = os.fspath(self.request.root)

        def on_error(path: str, _exc: OSError) -> None:
            result.add_inaccessible(path)
            if path == root:
                result.root_unreadable = True

        try:
            for path in walk_files(root, on_error=on_error):
                tasks.put(path)
        except Exception as e:
            log_exception(f"Walk of {root} stopped", e)
        finally:
            for _ in range(self.request.parallelism):
                tasks.put(_DONE)

    def _work(self, tasks: queue.Queue, outcomes: queue.Queue) -> None:
        while True:
            path = tasks.get()
            if path is _DONE:
                outcomes.put(_DONE)
                return
            try:
                outcome = process_file(path, self.request)
            except Exception as e:
                log_exception(f"Error scanning {path}", e)
                outcome = FileOutcome(path, FileStatus.ERROR, str(e))
            outcomes.put(outcome)

    # ---------- Reporting ----------
    def _record(self, outcome: FileOutcome, result: ScanResult) -> None:
        is_new_match = result.record(outcome)
        if outcome.status is FileStatus.ERROR:
            self._logger.warning("Error reading %s: %s", outcome.path, outcome.reason)
        self._call(self.on_progress, outcome, result)
        if is_new_match:
            self._call(self.on_match, outcome.path)
            if self.request.reveal_matches:
                self._call(self.reveal, outcome.path)

    def _call(self, hook, *args) -> None:
        if hook is None:
            return
        try:
            hook(*args)
        except Exception as e:
            log_exception(f"Callback {getattr(hook, '__name__', hook)!r} failed", e)


def run_scan(
    request: ScanRequest,
    on_progress: ProgressHook | None = None,
    on_match: MatchHook | None = None,
    on_start: StartHook | None = None,
    reveal: MatchHook = reveal_in_file_manager,
) -> ScanResult:
    """Scan ``request.root`` and return the finished result.

    Raises ``InvalidRootError`` or ``EmptySearchTermError`` before any work
    starts; every other failure is counted in the result instead.
    """
    return Scanner(
        request, on_progress=on_progress, on_match=on_match, on_start=on_start, reveal=reveal
    ).run()
