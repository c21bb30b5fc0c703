#!/usr/bin/env python
"""Print the tokens, and the parsed tree or its errors, of one nccl document."""

import argparse
import logging
from pathlib import Path

from ncclpy.diagnostics import ScanError
from ncclpy.lexer import dump_tokens, scan
from ncclpy.pipeline import parse_text, read_source


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    text = read_source(args.path)

    try:
        dump_tokens(scan(text))
    except ScanError as exc:
        print(f"scan failed: {exc}")
        return 1

    result = parse_text(text, source_path=str(args.path))
    if result.tree is None:
        for diagnostic in result.diagnostics:
            print(diagnostic)
        return 1

    print()
    result.tree.pretty_print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
