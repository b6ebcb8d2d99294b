"""Register user names, generating numbered variants for repeated requests."""

from __future__ import annotations

import sys
from typing import Optional


class UserSystem:
    """Tracks how many times each user name has been requested."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def count(self, name: str) -> int:
        """Return how many times ``name`` has been requested, or 0."""
        return self._counts.get(name, 0)

    def insert(self, name: str) -> str:
        """Register ``name``; return "OK" if new, otherwise the generated name."""
        seen = self.count(name)
        if seen == 0:
            self._counts[name] = 1
            return "OK"
        seen += 1
        self._counts[name] = seen
        generated = f"{name}{seen - 1}"
        self._counts[generated] = 1
        return generated


def main(argv: Optional[list[str]] = None) -> int:
    """Read a count and that many names from standard input; print each result."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    try:
        total = int(tokens[0])
    except ValueError:
        return 0
    system = UserSystem()
    results = [system.insert(name) for name in tokens[1 : 1 + max(total, 0)]]
    for result in results:
        print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())