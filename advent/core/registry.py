from __future__ import annotations

import logging
from importlib import import_module, util as import_util
from pathlib import Path
from typing import Callable, Iterable, Sequence

from advent.core.config import ChallengeSpec
from advent.core.models import ChallengeRecord, EntryPoint, Fixture, Identity


log = logging.getLogger(__name__)


class DuplicateIdentity(ValueError):
    def __init__(self, identity: Identity):
        super().__init__(f"Duplicate definition of: {identity.label}")
        self.identity = identity


class Registry:
    """Write-once collection of challenge records.

    Modules append records while the registry is open; ``collect_all`` freezes
    it into a sorted tuple that is safe to share between worker threads.
    """

    def __init__(self) -> None:
        self._pending: list[ChallengeRecord] = []
        self._frozen: tuple[ChallengeRecord, ...] | None = None

    @property
    def frozen(self) -> bool:
        return self._frozen is not None

    def submit(self, record: ChallengeRecord) -> ChallengeRecord:
        if self._frozen is not None:
            raise RuntimeError(f"Registry is frozen, cannot register {record.label}")
        for name, value in record.identity._asdict().items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative int, got {value!r}")
        self._pending.append(record)
        return record

    def add(
        self,
        year: int,
        day: int,
        part: int,
        entry_point: EntryPoint,
        fixtures: Iterable[tuple[str, int]] = (),
        disabled: bool = False,
    ) -> ChallengeRecord:
        record = ChallengeRecord(
            identity=Identity(year, day, part),
            entry_point=entry_point,
            fixtures=tuple(Fixture(text, expected) for text, expected in fixtures),
            disabled=disabled,
        )
        return self.submit(record)

    def collect_all(self) -> tuple[ChallengeRecord, ...]:
        if self._frozen is not None:
            return self._frozen

        seen: dict[Identity, ChallengeRecord] = {}
        for record in self._pending:
            if record.identity in seen:
                raise DuplicateIdentity(record.identity)
            seen[record.identity] = record

        self._frozen = tuple(sorted(seen.values(), key=lambda r: r.identity))
        self._pending = []
        log.debug("Collected %d challenges", len(self._frozen))
        return self._frozen


def filter_records(
    records: Sequence[ChallengeRecord], predicate: Callable[[Identity], bool]
) -> list[ChallengeRecord]:
    return [r for r in records if predicate(r.identity)]


def select(
    records: Sequence[ChallengeRecord],
    year: int | None = None,
    day: int | None = None,
    part: int | None = None,
) -> list[ChallengeRecord]:
    def matches(identity: Identity) -> bool:
        if year is not None and identity.year != year:
            return False
        if day is not None and identity.day != day:
            return False
        if part is not None and identity.part != part:
            return False
        return True

    return filter_records(records, matches)


def _load_module_from_file(module_name: str, file_path: Path):
    spec = import_util.spec_from_file_location(module_name, file_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load challenge module from {file_path}")
    module = import_util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _register_module(module, registry: Registry, origin: str) -> None:
    register = getattr(module, "register", None)
    if register is None:
        raise AttributeError(f"Function 'register' not found in {origin}")
    register(registry)
    log.debug("Registered challenges from %s", origin)


def load_challenges(
    module_names: Iterable[str], extra: Iterable[ChallengeSpec] = ()
) -> Registry:
    registry = Registry()
    for name in module_names:
        _register_module(import_module(name), registry, name)

    for spec in extra:
        if not spec.enabled:
            continue
        file_path = Path(spec.path)
        if not file_path.exists():
            raise FileNotFoundError(f"Challenge file not found: {file_path}")
        module = _load_module_from_file(f"advent.challenges.extra.{spec.id}", file_path)
        _register_module(module, registry, str(file_path))

    return registry
