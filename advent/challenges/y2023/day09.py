from __future__ import annotations

from advent.core.models import ChallengeError
from advent.core.registry import Registry


def _histories(text: str) -> list[list[int]]:
    histories = []
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            histories.append([int(v) for v in line.split()])
        except ValueError:
            raise ChallengeError(f"malformed history: {line}") from None
    return histories


def predict_next(values: list[int]) -> int:
    if all(v == 0 for v in values):
        return 0
    diffs = [b - a for a, b in zip(values, values[1:])]
    return values[-1] + predict_next(diffs)


def day09_1(text: str) -> int:
    return sum(predict_next(h) for h in _histories(text))


def day09_2(text: str) -> int:
    return sum(predict_next(h[::-1]) for h in _histories(text))


HISTORIES = "0 3 6 9 12 15\n1 3 6 10 15 21\n10 13 16 21 30 45"


def register(registry: Registry) -> None:
    registry.add(
        2023, 9, 1, day09_1,
        fixtures=[
            ("0 3 6 9 12 15", 18),
            ("1 3 6 10 15 21", 28),
            ("10 13 16 21 30 45", 68),
            (HISTORIES, 114),
        ],
    )
    registry.add(2023, 9, 2, day09_2, fixtures=[("10 13 16 21 30 45", 5), (HISTORIES, 2)])
