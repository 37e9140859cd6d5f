from __future__ import annotations

import re

from advent.core.models import ChallengeError
from advent.core.registry import Registry


SPELLED = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_WORD = "|".join(SPELLED)
# lookahead so overlapping names like "eightwo" yield both numbers
FIRST_RE = re.compile(rf"(?=({_WORD}|\d))")
LAST_RE = re.compile(rf".*({_WORD}|\d)")


def _to_digit(token: str) -> int:
    if token in SPELLED:
        return SPELLED[token]
    return int(token)


def _digits_only(line: str) -> int:
    digits = [c for c in line if c.isdigit()]
    if not digits:
        raise ChallengeError(f"{line} has no digits")
    return int(digits[0] + digits[-1])


def _with_spelled(line: str) -> int:
    first = FIRST_RE.search(line)
    last = LAST_RE.match(line)
    if first is None or last is None:
        raise ChallengeError(f"No number found in {line}")
    return _to_digit(first.group(1)) * 10 + _to_digit(last.group(1))


def day01_1(text: str) -> int:
    return sum(_digits_only(line) for line in text.splitlines() if line.strip())


def day01_2(text: str) -> int:
    return sum(_with_spelled(line) for line in text.splitlines() if line.strip())


def register(registry: Registry) -> None:
    registry.add(
        2023, 1, 1, day01_1,
        fixtures=[
            ("1abc2", 12),
            ("pqr3stu8vwx", 38),
            ("a1b2c3d4e5f", 15),
            ("treb7uchet", 77),
            ("1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet", 142),
        ],
    )
    registry.add(
        2023, 1, 2, day01_2,
        fixtures=[
            ("two1nine", 29),
            ("eightwothree", 83),
            ("abcone2threexyz", 13),
            ("xtwone3four", 24),
            ("4nineeightseven2", 42),
            ("zoneight234", 14),
            ("7pqrstsixteen", 76),
        ],
    )
