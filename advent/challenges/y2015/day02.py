from __future__ import annotations

from advent.core.models import ChallengeError
from advent.core.registry import Registry


def _parse(text: str) -> list[tuple[int, int, int]]:
    boxes = []
    for line in text.splitlines():
        if not line.strip():
            continue
        try:
            l, w, h = (int(v) for v in line.strip().split("x"))
        except ValueError:
            raise ChallengeError(f"malformed box: {line}") from None
        boxes.append((l, w, h))
    return boxes


def day02_1(text: str) -> int:
    total = 0
    for l, w, h in _parse(text):
        total += 2 * l * w + 2 * w * h + 2 * h * l
        total += min(l * w, w * h, h * l)
    return total


def day02_2(text: str) -> int:
    total = 0
    for l, w, h in _parse(text):
        total += 2 * min(l + w, w + h, h + l)
        total += l * w * h
    return total


def register(registry: Registry) -> None:
    registry.add(2015, 2, 1, day02_1, fixtures=[("2x3x4", 58), ("1x1x10", 43)])
    registry.add(2015, 2, 2, day02_2, fixtures=[("2x3x4", 34), ("1x1x10", 14)])
