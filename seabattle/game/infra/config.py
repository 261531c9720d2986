"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (".env", ".env.local")


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Runtime settings resolved from the environment."""

    player_one: str = "Player 1"
    player_two: str = "Player 2"
    log_level: str = "WARNING"
    log_format: str = "text"
    log_dir: Path | None = None


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> list[str]:
    """Apply ``KEY=VALUE`` lines from ``path`` to the process environment.

    Shell-style ``export KEY=VALUE`` lines are accepted. Returns the names that
    were written; a missing file writes nothing.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return []

    applied: list[str] = []
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        entry = _parse_env_line(raw_line)
        if entry is None:
            continue
        key, value = entry
        if override_existing or key not in os.environ:
            os.environ[key] = value
            applied.append(key)
    return applied


def _parse_env_line(raw_line: str) -> tuple[str, str] | None:
    line = raw_line.strip()
    if line.startswith("export "):
        line = line[len("export ") :].lstrip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        value = value[1:-1]
    return key, value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load ``.env`` then ``.env.local``; later files win."""
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def load_settings() -> GameSettings:
    """Build settings from ``SEABATTLE_*`` and generic logging variables."""
    level_name = _non_empty("SEABATTLE_LOG_LEVEL", _non_empty("LOG_LEVEL", "WARNING"))
    log_dir = os.getenv("SEABATTLE_LOG_DIR", "").strip()
    return GameSettings(
        player_one=_non_empty("SEABATTLE_PLAYER_ONE", "Player 1"),
        player_two=_non_empty("SEABATTLE_PLAYER_TWO", "Player 2"),
        log_level=level_name.upper(),
        log_format=_non_empty("LOG_FORMAT", "text").lower(),
        log_dir=Path(log_dir) if log_dir else None,
    )


def _non_empty(var_name: str, default: str) -> str:
    return os.getenv(var_name, "").strip() or default
