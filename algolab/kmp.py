"""Knuth-Morris-Pratt search that collects match positions from a text file."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from typing import Optional, Sequence, Union

DEFAULT_PATH = "hidden_code.txt"
DEFAULT_PATTERN = "h2xr30"


def prefix_table(pattern: str) -> list[int]:
    """Return the failure table: longest proper prefix that is also a suffix."""
    table = [0] * len(pattern)
    j = 0
    for i, ch in enumerate(pattern[1:], start=1):
        while j > 0 and ch != pattern[j]:
            j = table[j - 1]
        if ch == pattern[j]:
            j += 1
        table[i] = j
    return table


def find_pattern(
    pattern: str, line: str, table: Optional[Sequence[int]] = None
) -> list[int]:
    """Return the start indices of every (possibly overlapping) match in ``line``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    if table is None:
        table = prefix_table(pattern)
    positions = []
    state = 0
    for i, ch in enumerate(line):
        while state > 0 and ch != pattern[state]:
            state = table[state - 1]
        if ch == pattern[state]:
            state += 1
        if state == len(pattern):
            state = table[state - 1]
            positions.append(i - len(pattern) + 1)
    return positions


def find_in_file(path: Union[str, PathLike], pattern: str) -> str:
    """Concatenate the match positions of every line of ``path`` into one code."""
    table = prefix_table(pattern)
    parts = []
    with open(path, encoding="utf-8", newline="") as handle:
        for raw in handle:
            line = raw[:-1] if raw.endswith("\n") else raw
            parts.extend(str(pos) for pos in find_pattern(pattern, line, table))
    return "".join(parts)


def main(argv: Optional[list[str]] = None) -> int:
    """Print the code hidden in a file as the positions of a pattern."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--pattern", default=DEFAULT_PATTERN)
    args = parser.parse_args(argv)
    try:
        code = find_in_file(args.path, args.pattern)
    except OSError:
        print("Error not open file", file=sys.stderr)
        return 1
    print(code)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())