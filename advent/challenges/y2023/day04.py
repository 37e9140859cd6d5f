from __future__ import annotations

from advent.core.models import ChallengeError
from advent.core.registry import Registry


def _numbers(text: str, line: str) -> list[int]:
    try:
        return [int(v) for v in text.split()]
    except ValueError:
        raise ChallengeError(f"Malformed list: {line}") from None


def _matches(line: str) -> int:
    _, sep, body = line.partition(":")
    winners, bar, numbers = body.partition("|")
    if not sep or not bar:
        raise ChallengeError(f"Malformed line: {line}")
    return len(set(_numbers(winners, line)) & set(_numbers(numbers, line)))


def _cards(text: str) -> list[int]:
    return [_matches(line) for line in text.splitlines() if line.strip()]


def day04_1(text: str) -> int:
    return sum(2 ** (n - 1) for n in _cards(text) if n)


def day04_2(text: str) -> int:
    matches = _cards(text)
    counts = [1] * len(matches)
    for i, n in enumerate(matches):
        for j in range(i + 1, min(i + 1 + n, len(matches))):
            counts[j] += counts[i]
    return sum(counts)


CARDS = """\
Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""


def register(registry: Registry) -> None:
    registry.add(
        2023, 4, 1, day04_1,
        fixtures=[(line, score) for line, score in zip(CARDS.splitlines(), [8, 2, 2, 1, 0, 0])],
    )
    registry.add(2023, 4, 2, day04_2, fixtures=[(CARDS, 30)])
