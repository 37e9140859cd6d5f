from __future__ import annotations

from advent.core.models import ChallengeError


def digit_sum(text: str) -> int:
    total = 0
    for c in text:
        if not c.isdigit():
            raise ChallengeError(f"not a digit: {c}")
        total += int(c)
    return total


class CallCounter:
    def __init__(self, result: int = 0):
        self.calls: list[str] = []
        self.result = result

    def __call__(self, text: str) -> int:
        self.calls.append(text)
        return self.result
