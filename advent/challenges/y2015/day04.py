from __future__ import annotations

import hashlib

from advent.core.models import ChallengeError
from advent.core.registry import Registry


MAX_LOOPS = 9_999_999


def find_prefix(text: str, prefix: str) -> int:
    key = text.strip().encode("utf-8")
    for i in range(MAX_LOOPS):
        digest = hashlib.md5(key + str(i).encode("ascii")).hexdigest()
        if digest.startswith(prefix):
            return i
    raise ChallengeError(f"Exceeded max hash loops of {MAX_LOOPS}")


def day04_1(text: str) -> int:
    return find_prefix(text, "00000")


def day04_2(text: str) -> int:
    return find_prefix(text, "000000")


def register(registry: Registry) -> None:
    registry.add(2015, 4, 1, day04_1, fixtures=[("abcdef", 609043), ("pqrstuv", 1048970)])
    registry.add(2015, 4, 2, day04_2)
