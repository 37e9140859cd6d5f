from __future__ import annotations

from typing import Callable

from advent.core.registry import Registry


VOWELS = "aeiou"
NAUGHTY_PAIRS = {"ab", "cd", "pq", "xy"}


def _total_nice(text: str, is_nice: Callable[[str], bool]) -> int:
    return sum(1 for line in text.splitlines() if line.strip() and is_nice(line.strip()))


def is_nice_01(word: str) -> bool:
    if sum(1 for c in word if c in VOWELS) < 3:
        return False
    pairs = [a + b for a, b in zip(word, word[1:])]
    if not any(p[0] == p[1] for p in pairs):
        return False
    return not any(p in NAUGHTY_PAIRS for p in pairs)


def is_nice_02(word: str) -> bool:
    first_seen: dict[str, int] = {}
    has_repeat_pair = False
    for i in range(len(word) - 1):
        pair = word[i:i + 2]
        if pair in first_seen and i - first_seen[pair] >= 2:
            has_repeat_pair = True
            break
        first_seen.setdefault(pair, i)
    if not has_repeat_pair:
        return False
    return any(word[i] == word[i + 2] for i in range(len(word) - 2))


def day05_1(text: str) -> int:
    return _total_nice(text, is_nice_01)


def day05_2(text: str) -> int:
    return _total_nice(text, is_nice_02)


def register(registry: Registry) -> None:
    registry.add(
        2015, 5, 1, day05_1,
        fixtures=[
            ("ugknbfddgicrmopn", 1),
            ("aaa", 1),
            ("jchzalrnumimnmhp", 0),
            ("haegwjzuvuyypxyu", 0),
            ("dvszwmarrgswjxmb", 0),
        ],
    )
    registry.add(
        2015, 5, 2, day05_2,
        fixtures=[
            ("qjhvhtzxzqqjkmpb", 1),
            ("xxyxx", 1),
            ("uurcxstgmygtbstg", 0),
            ("ieodomkazucvgmuy", 0),
        ],
        disabled=True,
    )
