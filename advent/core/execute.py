from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Sequence

from advent.core.config import DEFAULT_INPUT_PATTERN
from advent.core.models import ChallengeRecord, ExecutionOutcome, Identity, describe_error
from advent.core.pool import parallel_map


InputResolver = Callable[[Identity], str]

log = logging.getLogger(__name__)


class InputResolutionError(OSError):
    def __init__(self, identity: Identity, path: Path, reason: str):
        super().__init__(f"Could not read input for {identity.label} from {path}: {reason}")
        self.identity = identity
        self.path = path


class FileInputResolver:
    def __init__(self, base_dir: str | Path, pattern: str = DEFAULT_INPUT_PATTERN):
        self.base_dir = Path(base_dir)
        self.pattern = pattern

    def path_for(self, identity: Identity) -> Path:
        return self.base_dir / self.pattern.format(**identity._asdict())

    def __call__(self, identity: Identity) -> str:
        path = self.path_for(identity)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise InputResolutionError(identity, path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise InputResolutionError(identity, path, str(e)) from e


def execute(record: ChallengeRecord, resolve: InputResolver) -> ExecutionOutcome:
    if record.disabled:
        return ExecutionOutcome(identity=record.identity, skipped=True)

    text = resolve(record.identity)

    start = time.perf_counter()
    try:
        value = record.run(text)
    except Exception as e:
        elapsed = time.perf_counter() - start
        log.debug("%s faulted after %.6fs", record.label, elapsed)
        return ExecutionOutcome(identity=record.identity, elapsed=elapsed, error=describe_error(e))
    elapsed = time.perf_counter() - start

    log.debug("%s finished in %.6fs", record.label, elapsed)
    return ExecutionOutcome(identity=record.identity, elapsed=elapsed, value=value)


def execute_all(
    records: Sequence[ChallengeRecord],
    resolve: InputResolver,
    workers: int | None = None,
    include_skipped: bool = True,
) -> list[ExecutionOutcome]:
    # An InputResolutionError from any record aborts the whole batch.
    outcomes = parallel_map(lambda record: execute(record, resolve), records, workers)
    if include_skipped:
        return outcomes
    return [o for o in outcomes if not o.skipped]
