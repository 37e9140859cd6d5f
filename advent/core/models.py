from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, NamedTuple, Union


EntryPoint = Callable[[str], int]


class ChallengeError(ValueError):
    """Raised by a challenge when its input cannot be solved."""


class Identity(NamedTuple):
    year: int
    day: int
    part: int

    @property
    def label(self) -> str:
        return f"{self.year} :: Day {self.day:02d} :: Part {self.part}"


@dataclass(frozen=True)
class Fixture:
    input: str
    expected: int


@dataclass(frozen=True)
class ChallengeRecord:
    identity: Identity
    entry_point: EntryPoint = field(compare=False)
    fixtures: tuple[Fixture, ...] = ()
    disabled: bool = False

    @property
    def label(self) -> str:
        return self.identity.label

    def run(self, text: str) -> int:
        result = self.entry_point(text)
        # bool is an int subclass but never a valid answer
        if isinstance(result, bool) or not isinstance(result, int):
            raise TypeError(f"entry point returned {type(result).__name__}, expected int")
        return result


@dataclass(frozen=True)
class Matched:
    pass


@dataclass(frozen=True)
class Mismatched:
    input: str
    expected: int
    actual: int


@dataclass(frozen=True)
class Faulted:
    error: str


Outcome = Union[Matched, Mismatched, Faulted]


@dataclass(frozen=True)
class VerificationReport:
    identity: Identity
    skipped: bool = False
    outcomes: tuple[Outcome, ...] = ()

    @property
    def label(self) -> str:
        return self.identity.label

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if isinstance(o, Matched))

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def all_passed(self) -> bool:
        return self.passed == self.total

    @property
    def failures(self) -> list[tuple[int, Outcome]]:
        return [(i, o) for i, o in enumerate(self.outcomes) if not isinstance(o, Matched)]


@dataclass(frozen=True)
class ExecutionOutcome:
    identity: Identity
    elapsed: float | None = None
    value: int | None = None
    error: str | None = None
    skipped: bool = False

    @property
    def label(self) -> str:
        return self.identity.label

    @property
    def ok(self) -> bool:
        return not self.skipped and self.error is None


def describe_error(exc: BaseException) -> str:
    message = str(exc)
    if not message:
        return type(exc).__name__
    if isinstance(exc, ChallengeError):
        return message
    return f"{type(exc).__name__}: {message}"
