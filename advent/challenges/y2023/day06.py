from __future__ import annotations

from math import prod

from advent.core.models import ChallengeError
from advent.core.registry import Registry


def _field(line: str, name: str) -> str:
    prefix = f"{name}:"
    if not line.startswith(prefix):
        raise ChallengeError(f"expected {prefix} line, got: {line}")
    return line[len(prefix):]


def _split_lines(text: str) -> tuple[str, str]:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) != 2:
        raise ChallengeError(f"expected Time and Distance lines, got {len(lines)} lines")
    return _field(lines[0], "Time"), _field(lines[1], "Distance")


def ways_to_win(time: int, distance: int) -> int:
    """Count hold times h in [0, time] with h * (time - h) > distance."""
    half = time // 2
    if half * (time - half) <= distance:
        return 0
    # h * (time - h) increases on [0, half]; find the first winning hold
    lo, hi = 0, half
    while lo < hi:
        mid = (lo + hi) // 2
        if mid * (time - mid) > distance:
            hi = mid
        else:
            lo = mid + 1
    return time - 2 * lo + 1


def day06_1(text: str) -> int:
    times, distances = _split_lines(text)
    try:
        races = list(zip((int(v) for v in times.split()), (int(v) for v in distances.split())))
    except ValueError as e:
        raise ChallengeError(f"malformed race list: {e}") from None
    return prod(ways_to_win(t, d) for t, d in races)


def day06_2(text: str) -> int:
    times, distances = _split_lines(text)
    try:
        time, distance = int("".join(times.split())), int("".join(distances.split()))
    except ValueError as e:
        raise ChallengeError(f"malformed race: {e}") from None
    return ways_to_win(time, distance)


RACES = "Time:      7  15   30\nDistance:  9  40  200"


def register(registry: Registry) -> None:
    registry.add(
        2023, 6, 1, day06_1,
        fixtures=[
            ("Time: 7\nDistance: 9", 4),
            ("Time: 15\nDistance: 40", 8),
            ("Time: 30\nDistance: 200", 9),
            (RACES, 288),
        ],
    )
    registry.add(2023, 6, 2, day06_2, fixtures=[(RACES, 71503)])
