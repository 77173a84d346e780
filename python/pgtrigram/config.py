"""Runtime settings read from ``PGTRIGRAM_*`` environment variables.

Settings are read once, when a backend is first selected. Call
:func:`pgtrigram.reset_backend` after changing the environment to pick up
new values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from pgtrigram._utils import ensure_unit_interval, normalize_backend, normalize_executor
from pgtrigram.enums import Backend, Executor
from pgtrigram.exceptions import ConfigurationError, ValidationError

ENV_PREFIX = "PGTRIGRAM_"

DEFAULT_PARALLEL_THRESHOLD = 250
DEFAULT_SIMILARITY_THRESHOLD = 0.3


@dataclass(frozen=True)
class Settings:
    """Immutable engine settings.

    Attributes:
        backend: Requested backend; AUTO is resolved at selection time.
        parallel_threshold: Minimum number of items before the parallel
            engine uses its worker pool.
        max_workers: Pool size for the parallel engine, None for the
            executor's default.
        executor: Pool kind for the parallel engine.
        similarity_threshold: Default cut-off for ``is_similar``.
    """

    backend: Backend = Backend.AUTO
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD
    max_workers: Optional[int] = None
    executor: Executor = Executor.THREAD
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD

    def with_overrides(self, **changes) -> "Settings":
        return replace(self, **changes)


def _get(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_int(raw: str, name: str, minimum: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be >= {minimum}, got {value}")
    return value


def _parse_unit_float(raw: str, name: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None
    try:
        return ensure_unit_interval(value, ENV_PREFIX + name)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read from, defaults to ``os.environ``.

    Raises:
        ConfigurationError: If any variable is set to a malformed value.

    Example:
        >>> load_settings({"PGTRIGRAM_BACKEND": "portable"}).backend
        <Backend.PORTABLE: 'portable'>
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    raw = _get(env, "BACKEND")
    if raw is not None:
        settings = settings.with_overrides(backend=normalize_backend(raw))

    raw = _get(env, "PARALLEL_THRESHOLD")
    if raw is not None:
        settings = settings.with_overrides(
            parallel_threshold=_parse_int(raw, "PARALLEL_THRESHOLD", minimum=1)
        )

    raw = _get(env, "MAX_WORKERS")
    if raw is not None:
        settings = settings.with_overrides(max_workers=_parse_int(raw, "MAX_WORKERS", minimum=1))

    raw = _get(env, "EXECUTOR")
    if raw is not None:
        settings = settings.with_overrides(executor=normalize_executor(raw))

    raw = _get(env, "SIMILARITY_THRESHOLD")
    if raw is not None:
        settings = settings.with_overrides(
            similarity_threshold=_parse_unit_float(raw, "SIMILARITY_THRESHOLD")
        )

    return settings


__all__ = ["Settings", "load_settings", "DEFAULT_PARALLEL_THRESHOLD", "DEFAULT_SIMILARITY_THRESHOLD"]
