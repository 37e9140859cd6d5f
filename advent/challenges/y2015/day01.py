from __future__ import annotations

from advent.core.models import ChallengeError
from advent.core.registry import Registry


def _steps(text: str):
    for c in text.strip():
        if c == "(":
            yield 1
        elif c == ")":
            yield -1
        else:
            raise ChallengeError(f"unrecognized command {c}")


def day01_1(text: str) -> int:
    return sum(_steps(text))


def day01_2(text: str) -> int:
    floor = 0
    for i, step in enumerate(_steps(text), start=1):
        floor += step
        if floor == -1:
            return i
    raise ChallengeError("Never got to floor -1")


def register(registry: Registry) -> None:
    registry.add(
        2015, 1, 1, day01_1,
        fixtures=[
            ("(())", 0),
            ("()()", 0),
            ("(((", 3),
            ("(()(()(", 3),
            ("))(((((", 3),
        ],
    )
    registry.add(2015, 1, 2, day01_2, fixtures=[(")", 1), ("()())", 5)])
