"""Command line entry point that solves puzzles read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from cfsolve.numbers import can_split_watermelon, flagstones_needed
from cfsolve.registry import Registration, winner


class _Tokens:
    """Whitespace separated tokens of the input, consumed in order."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("input ended too early") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def count(self) -> int:
        n = self.integer()
        if n < 0:
            raise ValueError("count must not be negative")
        return n


def _watermelon(tokens: _Tokens) -> Iterable[str]:
    yield "YES" if can_split_watermelon(tokens.integer()) else "NO"


def _theatre_square(tokens: _Tokens) -> Iterable[str]:
    n, m, a = tokens.integer(), tokens.integer(), tokens.integer()
    yield str(flagstones_needed(n, m, a))


def _registration(tokens: _Tokens) -> Iterable[str]:
    names = [tokens.word() for _ in range(tokens.count())]
    registry = Registration()
    return [registry.register(name) for name in names]


def _winner(tokens: _Tokens) -> Iterable[str]:
    rounds = [(tokens.word(), tokens.integer()) for _ in range(tokens.count())]
    yield winner(rounds)


_COMMANDS: dict[str, tuple[Callable[[_Tokens], Iterable[str]], str]] = {
    "watermelon": (_watermelon, "can a watermelon split into two even parts"),
    "theatre-square": (_theatre_square, "flagstones covering a rectangle"),
    "registration": (_registration, "hand out unique user names"),
    "winner": (_winner, "find the winner of a scored game"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfsolve",
        description="Solve a puzzle whose input is read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen puzzle on standard input and print its answer."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        lines = list(handler(_Tokens(sys.stdin.read())))
    except ValueError as error:
        parser.error(str(error))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())