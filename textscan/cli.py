"""Console front end: gather options, print progress and the summary."""

import argparse
import os
import sys

from . import __version__
from .errors import ScanError
from .logs import disable_logging, enable_console_logging, enable_file_logging, log_exception
from .models import FileOutcome, ScanRequest, ScanResult, default_parallelism
from .scanner import run_scan

EXIT_OK = 0
EXIT_SCAN_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textscan",
        description="Find UTF-8 text files under a folder that contain a search string.",
    )
    parser.add_argument("root", nargs="?", help="Folder to search (prompted for when omitted).")
    parser.add_argument("term", nargs="?", help="String to search for (prompted for when omitted).")
    case = parser.add_mutually_exclusive_group()
    case.add_argument("-c", "--case-sensitive", dest="case_sensitive", action="store_true", default=None,
                      help="Match letter case exactly.")
    case.add_argument("-i", "--ignore-case", dest="case_sensitive", action="store_false",
                      help="Ignore letter case (default).")
    parser.add_argument("--count", dest="count_first", action="store_true", default=None,
                        help="Count files before scanning so progress shows a total.")
    parser.add_argument("--reveal", dest="reveal", action="store_true", default=None,
                        help="Open the file manager on every matching file.")
    parser.add_argument("-j", "--jobs", type=int, default=default_parallelism(),
                        help="Number of files scanned in parallel (default: CPU count).")
    parser.add_argument("--join-chunks", action="store_true",
                        help="Accept multi-byte characters split across 1 KB read boundaries.")
    parser.add_argument("--no-prompt", action="store_true", help="Never ask questions; use defaults.")
    parser.add_argument("--wait", action="store_true", help="Wait for Enter before exiting.")
    parser.add_argument("--log-file", help="Also write log records to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug log lines.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ---------- Prompts ----------
def ask(question: str, default: str = "") -> str:
    hint = f" [{default}]" if default else ""
    answer = input(f"{question}{hint}: ").strip()
    return answer or default


def ask_yes_no(question: str, default: bool = False) -> bool:
    answer = ask(f"{question} (yes/no)", "yes" if default else "no")
    return answer.lower().startswith("y")


def resolve_request(args: argparse.Namespace, interactive: bool) -> ScanRequest:
    root = args.root
    term = args.term
    case_sensitive = args.case_sensitive
    count_first = args.count_first
    reveal = args.reveal

    if interactive:
        if root is None:
            root = ask("Enter the folder to search", os.getcwd())
        if term is None:
            term = ask("Enter the string to search for")
        if count_first is None:
            count_first = ask_yes_no("Count files before scanning?")
        if case_sensitive is None:
            case_sensitive = ask_yes_no("Case-sensitive search?")
        if reveal is None:
            reveal = ask_yes_no("Open file location when found?")

    return ScanRequest(
        root=(root or os.getcwd()).strip().strip('"'),
        search_term=term or "",
        case_sensitive=bool(case_sensitive),
        count_first=bool(count_first),
        reveal_matches=bool(reveal),
        parallelism=args.jobs,
        join_chunks=args.join_chunks,
    )


# ---------- Output ----------
def print_start(result: ScanResult) -> None:
    if result.total is not None:
        print(f"Total files to scan: {result.total}")
    else:
        print("Skipping file count. Scanning directly...")


def print_progress(outcome: FileOutcome, result: ScanResult) -> None:
    if result.total is not None:
        counter = f"{result.scanned}/{result.total}"
    else:
        counter = str(result.scanned)
    print(f"Scanned {counter}: {outcome.path} | Status: {outcome.label}", flush=True)


def print_summary(result: ScanResult) -> None:
    print()
    print(f"Total files scanned: {result.scanned}")
    print(f"Total files found: {result.matched}")
    if result.errors:
        print(f"Errors: {result.errors}")
    if result.inaccessible:
        print(f"Inaccessible folders: {len(result.inaccessible)}")
        for path in result.inaccessible:
            print(f"  {path}")
    print(f"Elapsed: {result.elapsed:.2f}s")

    if result.matches:
        print("\nFound files:")
        for path in result.matched_paths():
            print(path)
    else:
        print("\nNo files found containing the search term.")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    enable_console_logging(verbose=args.verbose)
    try:
        if args.log_file:
            try:
                enable_file_logging(args.log_file)
            except OSError as e:
                print(f"Logging Error: {e}", file=sys.stderr)

        interactive = not args.no_prompt and sys.stdin.isatty()
        try:
            request = resolve_request(args, interactive)
        except EOFError:
            print("\nNo input.", file=sys.stderr)
            return EXIT_USAGE
        except KeyboardInterrupt:
            print("\n[INTERRUPTED] Scan stopped.", file=sys.stderr)
            return EXIT_SCAN_FAILED

        try:
            result = run_scan(request, on_progress=print_progress, on_start=print_start)
        except ScanError as e:
            print(str(e), file=sys.stderr)
            return EXIT_USAGE
        except KeyboardInterrupt:
            print("\n[INTERRUPTED] Scan stopped.", file=sys.stderr)
            return EXIT_SCAN_FAILED

        print_summary(result)
        if result.root_unreadable:
            print(f"Cannot read folder: {request.root}", file=sys.stderr)
            return EXIT_SCAN_FAILED

        if args.wait and interactive:
            try:
                input("Press Enter to exit...")
            except (EOFError, KeyboardInterrupt):
                pass
        return EXIT_OK
    except Exception as e:
        log_exception("Unexpected failure", e)
        return EXIT_SCAN_FAILED
    finally:
        disable_logging()
