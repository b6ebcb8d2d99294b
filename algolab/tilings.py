"""Count alternating two-state combinations of length n with memoised recurrences."""

from __future__ import annotations

import sys
from typing import Optional


def count_combinations(n: int) -> int:
    """Return the number of combinations that can be formed for ``n``.

    Two sequences are tracked, each built from the other's two previous
    values; the answer is their sum at ``n``. ``n == 0`` yields 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    # (first, second) at n-2 and n-1
    older = (0, 0)
    previous = (0, 0)
    for i in range(1, n + 1):
        if i <= 2:
            current = (1, 1)
        else:
            current = (previous[1] + older[1], previous[0] + older[0])
        older, previous = previous, current
    return previous[0] + previous[1]


def main(argv: Optional[list[str]] = None) -> int:
    """Read n from standard input and print the number of combinations."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    try:
        n = int(tokens[0])
    except ValueError:
        return 0
    try:
        result = count_combinations(n)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())