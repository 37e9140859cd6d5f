from __future__ import annotations

from advent.core.models import ChallengeError
from advent.core.registry import Registry


MOVES = {
    "^": (0, 1),
    "v": (0, -1),
    "<": (-1, 0),
    ">": (1, 0),
}


def _parse(text: str) -> list[tuple[int, int]]:
    moves = []
    for c in text.strip():
        if c not in MOVES:
            raise ChallengeError(f"bad input {c}")
        moves.append(MOVES[c])
    return moves


def _visit(moves: list[tuple[int, int]], santas: int) -> int:
    positions = [(0, 0)] * santas
    houses = {(0, 0)}
    for i, (dx, dy) in enumerate(moves):
        x, y = positions[i % santas]
        positions[i % santas] = (x + dx, y + dy)
        houses.add(positions[i % santas])
    return len(houses)


def day03_1(text: str) -> int:
    return _visit(_parse(text), santas=1)


def day03_2(text: str) -> int:
    return _visit(_parse(text), santas=2)


def register(registry: Registry) -> None:
    registry.add(2015, 3, 1, day03_1, fixtures=[(">", 2), ("^>v<", 4), ("^v^v^v^v^v", 2)])
    registry.add(2015, 3, 2, day03_2, fixtures=[("^v", 3), ("^>v<", 3), ("^v^v^v^v^v", 11)])
