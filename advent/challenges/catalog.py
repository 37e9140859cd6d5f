from __future__ import annotations


# Every bundled challenge module exposes register(registry).
CHALLENGE_MODULES: list[str] = [
    "advent.challenges.y2015.day01",
    "advent.challenges.y2015.day02",
    "advent.challenges.y2015.day03",
    "advent.challenges.y2015.day04",
    "advent.challenges.y2015.day05",
    "advent.challenges.y2023.day01",
    "advent.challenges.y2023.day02",
    "advent.challenges.y2023.day04",
    "advent.challenges.y2023.day06",
    "advent.challenges.y2023.day09",
]
