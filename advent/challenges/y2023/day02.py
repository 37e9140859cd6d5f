from __future__ import annotations

from dataclasses import dataclass

from advent.core.models import ChallengeError
from advent.core.registry import Registry


LIMITS = {"red": 12, "green": 13, "blue": 14}


@dataclass(frozen=True)
class Turn:
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def parse(cls, text: str) -> "Turn":
        counts: dict[str, int] = {}
        for pull in text.split(", "):
            number, _, color = pull.strip().partition(" ")
            if color not in LIMITS or not number.isdigit():
                raise ChallengeError(f"malformed turn: {text}")
            counts[color] = int(number)
        return cls(**counts)

    def is_possible(self) -> bool:
        return self.red <= LIMITS["red"] and self.green <= LIMITS["green"] and self.blue <= LIMITS["blue"]

    def power(self) -> int:
        return self.red * self.green * self.blue


@dataclass(frozen=True)
class Game:
    id: int
    turns: list[Turn]

    @classmethod
    def parse(cls, line: str) -> "Game":
        head, sep, rest = line.partition(": ")
        if not sep or not head.startswith("Game "):
            raise ChallengeError(f"malformed line: {line}")
        try:
            game_id = int(head[len("Game "):])
        except ValueError:
            raise ChallengeError(f"malformed line: {line}") from None
        return cls(id=game_id, turns=[Turn.parse(t) for t in rest.split("; ")])

    def is_possible(self) -> bool:
        return all(t.is_possible() for t in self.turns)

    def min_cubes(self) -> Turn:
        return Turn(
            red=max(t.red for t in self.turns),
            green=max(t.green for t in self.turns),
            blue=max(t.blue for t in self.turns),
        )


def _games(text: str) -> list[Game]:
    return [Game.parse(line) for line in text.splitlines() if line.strip()]


def day02_1(text: str) -> int:
    return sum(g.id for g in _games(text) if g.is_possible())


def day02_2(text: str) -> int:
    return sum(g.min_cubes().power() for g in _games(text))


GAME_1 = "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green"
GAME_2 = "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue"
GAME_3 = "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red"
GAME_4 = "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red"
GAME_5 = "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"
ALL_GAMES = "\n".join([GAME_1, GAME_2, GAME_3, GAME_4, GAME_5])


def register(registry: Registry) -> None:
    registry.add(
        2023, 2, 1, day02_1,
        fixtures=[(GAME_1, 1), (GAME_2, 2), (GAME_3, 0), (GAME_4, 0), (GAME_5, 5), (ALL_GAMES, 8)],
    )
    registry.add(
        2023, 2, 2, day02_2,
        fixtures=[(GAME_1, 48), (GAME_2, 12), (GAME_3, 1560), (GAME_4, 630), (GAME_5, 36), (ALL_GAMES, 2286)],
    )
