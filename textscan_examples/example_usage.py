"""Example: scanning a folder from code instead of the console.

Run with: python textscan_examples/example_usage.py [folder] [string]
"""
import sys

from textscan import ScanRequest, is_utf8_file, run_scan


def main():
    root = sys.argv[1] if len(sys.argv) > 1 else "."
    term = sys.argv[2] if len(sys.argv) > 2 else "TODO"
    print(__file__, "is text:", is_utf8_file(__file__))

    result = run_scan(ScanRequest(root=root, search_term=term, parallelism=4))
    print(f"Scanned {result.scanned} files, {result.matched} contain {term!r}")
    for path in result.matched_paths():
        print(" ", path)


if __name__ == '__main__':
    main()
