"""Name registration and game-winner bookkeeping."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import accumulate


class Registration:
    """Hands out unique user names, suffixing repeats with a counter."""

    def __init__(self) -> None:
        self._seen: Counter[str] = Counter()

    def register(self, name: str) -> str:
        """Register ``name`` and return ``OK`` or the name it was given instead."""
        self._seen[name] += 1
        count = self._seen[name]
        return "OK" if count == 1 else f"{name}{count - 1}"


def winner(rounds: Iterable[tuple[str, int]]) -> str:
    """Return the winner of a game given its ``(name, score)`` rounds.

    Among the players with the highest final score, the one who first
    reached at least that score wins.
    """
    rounds = list(rounds)
    if not rounds:
        raise ValueError("no rounds were played")
    final: Counter[str] = Counter()
    for name, score in rounds:
        final[name] += score
    best = max(final.values())
    running: Counter[str] = Counter()
    for name, score in rounds:
        running[name] += score
        if running[name] >= best and final[name] == best:
            return name
    raise ValueError("no winner could be determined")