from __future__ import annotations

from typing import Sequence

from advent.core.models import (
    ChallengeRecord,
    Faulted,
    Fixture,
    Matched,
    Mismatched,
    Outcome,
    VerificationReport,
    describe_error,
)
from advent.core.pool import parallel_map


def check_fixture(record: ChallengeRecord, fixture: Fixture) -> Outcome:
    try:
        actual = record.run(fixture.input)
    except Exception as e:
        return Faulted(error=describe_error(e))
    if actual == fixture.expected:
        return Matched()
    return Mismatched(input=fixture.input, expected=fixture.expected, actual=actual)


def verify(record: ChallengeRecord) -> VerificationReport:
    if record.disabled:
        return VerificationReport(identity=record.identity, skipped=True)
    outcomes = tuple(check_fixture(record, fixture) for fixture in record.fixtures)
    return VerificationReport(identity=record.identity, outcomes=outcomes)


def verify_all(records: Sequence[ChallengeRecord], workers: int | None = None) -> list[VerificationReport]:
    return parallel_map(verify, records, workers)
