from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import yaml


DEFAULT_CONFIG_NAME = "advent.yaml"
CONFIG_ENV_VAR = "ADVENT_CONFIG"
DEFAULT_INPUT_PATTERN = "{year}/{day:02}.txt"

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChallengeSpec:
    id: str
    path: str
    enabled: bool


@dataclass(frozen=True)
class HarnessConfig:
    inputs_dir: str
    input_pattern: str = DEFAULT_INPUT_PATTERN
    workers: int = 0
    challenges: list[ChallengeSpec] = field(default_factory=list)
    source: str | None = None


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def resolve_config_path(config_path: str | None) -> Path | None:
    if config_path:
        return Path(config_path)

    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / DEFAULT_CONFIG_NAME
        if candidate.exists():
            return candidate

    return None


def default_config() -> HarnessConfig:
    return HarnessConfig(inputs_dir=str((Path.cwd() / "inputs").resolve()))


def _resolve_relative(base: Path, value: str) -> str:
    if Path(value).is_absolute():
        return value
    return str((base / value).resolve())


def load_master_config(path: str | Path) -> HarnessConfig:
    master_path = Path(path).resolve()
    raw = load_yaml(master_path)

    inputs = raw.get("inputs", {}) or {}
    inputs_dir = _resolve_relative(master_path.parent, str(inputs.get("dir", "./inputs")))
    pattern = str(inputs.get("pattern", DEFAULT_INPUT_PATTERN))

    workers = int(raw.get("workers", 0) or 0)
    if workers < 0:
        raise ValueError(f"workers must be >= 0, got {workers}")

    challenges: list[ChallengeSpec] = []
    for item in raw.get("challenges", []) or []:
        challenges.append(
            ChallengeSpec(
                id=str(item["id"]),
                path=_resolve_relative(master_path.parent, str(item["path"])),
                enabled=bool(item.get("enabled", True)),
            )
        )

    return HarnessConfig(
        inputs_dir=inputs_dir,
        input_pattern=pattern,
        workers=workers,
        challenges=challenges,
        source=str(master_path),
    )


def load_config(config_path: str | None = None) -> HarnessConfig:
    """Load the harness config, falling back to defaults when none is found.

    An explicitly named file (argument or ADVENT_CONFIG) must exist.
    """
    path = resolve_config_path(config_path)
    if path is None:
        log.debug("No %s found, using defaults", DEFAULT_CONFIG_NAME)
        return default_config()
    cfg = load_master_config(path)
    log.debug("Loaded config from %s", cfg.source)
    return cfg
