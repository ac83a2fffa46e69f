"""Showcase configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MODELS: tuple[str, ...] = ("basketball", "hoop", "spaceshuttle")
DEFAULT_STAR_COUNT = 100


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load split env files with optional local overrides.

    Later files win. Default order: .env.engine, .env.engine.local, .env.app,
    .env.app.local.
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (".env.engine", ".env.engine.local", ".env.app", ".env.app.local")
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then the project root."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    # Fallback for IDE run configs with a different working directory.
    project_root = Path(__file__).resolve().parents[1]
    return project_root / path


@dataclass(frozen=True, slots=True)
class ShowcaseConfig:
    """Scene content settings."""

    models: tuple[str, ...] = DEFAULT_MODELS
    star_count: int = DEFAULT_STAR_COUNT
    seed: int | None = None


def _csv(name: str) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return ()
    values = [part.strip() for part in raw.split(",")]
    return tuple(value for value in values if value)


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def load_showcase_config() -> ShowcaseConfig:
    """Load scene content settings from env vars."""
    models = _csv("SHOWCASE_MODELS") or DEFAULT_MODELS
    star_count = _optional_int("SHOWCASE_STAR_COUNT")
    return ShowcaseConfig(
        # Duplicates would be rejected by the loader; keep first occurrence.
        models=tuple(dict.fromkeys(models)),
        star_count=DEFAULT_STAR_COUNT if star_count is None else max(0, star_count),
        seed=_optional_int("SHOWCASE_SEED"),
    )
