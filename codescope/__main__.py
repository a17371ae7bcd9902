#!/usr/bin/env python3
"""
Terminal runner for the analyzer.

Usage:
    python -m codescope path/to/snippet.cpp
    cat snippet.py | python -m codescope -
"""
import argparse
import json
import sys

from . import analyze


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="codescope", description="Heuristic code analysis")
    parser.add_argument("file", help="Source file to analyze, or '-' for stdin")
    parser.add_argument("--tokens", action="store_true", help="Include the token list")
    args = parser.parse_args(argv)

    if args.file == "-":
        code = sys.stdin.read()
    else:
        with open(args.file, encoding="utf-8") as fh:
            code = fh.read()

    if not code:
        print("ERROR: No code provided", file=sys.stderr)
        return 1

    result = analyze(code)
    exclude = None if args.tokens else {"tokens"}
    print(json.dumps(result.model_dump(mode="json", exclude=exclude), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
