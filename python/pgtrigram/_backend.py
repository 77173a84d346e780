"""Backend selection.

The engine used by the top-level functions is chosen once, on first use,
from ``PGTRIGRAM_BACKEND`` (see :mod:`pgtrigram.config`). The choice is
ordinary control flow: every backend implements the same operations with
the same results, so nothing falls back per call.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pgtrigram._utils import ensure_unit_interval, normalize_backend
from pgtrigram.config import Settings, load_settings
from pgtrigram.engine import Engine, ParallelEngine, PortableEngine
from pgtrigram.enums import Backend

logger = logging.getLogger(__name__)


class _BackendState:
    """Encapsulates backend state to avoid global variables."""

    settings: Optional[Settings] = None
    engine: Optional[Engine] = None
    owns_engine: bool = False
    limit: Optional[float] = None


_state = _BackendState()


def available_backends() -> list[Backend]:
    """Backends that can run in this process."""
    return [Backend.PORTABLE, Backend.PARALLEL]


def _resolve(backend: Backend) -> Backend:
    if backend is not Backend.AUTO:
        return backend
    if (os.cpu_count() or 1) > 1:
        return Backend.PARALLEL
    return Backend.PORTABLE


def _settings() -> Settings:
    if _state.settings is None:
        _state.settings = load_settings()
    return _state.settings


def build_engine(backend: Union[str, Backend], settings: Optional[Settings] = None) -> Engine:
    """Create an engine for backend using settings (or the current ones)."""
    settings = settings or _settings()
    resolved = _resolve(normalize_backend(backend))
    if resolved is Backend.PARALLEL:
        return ParallelEngine(
            parallel_threshold=settings.parallel_threshold,
            max_workers=settings.max_workers,
            executor=settings.executor,
        )
    return PortableEngine()


def select_backend() -> Engine:
    """Select the process-wide engine from the environment settings."""
    settings = _settings()
    engine = build_engine(settings.backend, settings)
    logger.info("Using %s trigram backend (requested %s)", engine.backend.value, settings.backend.value)
    return engine


def _replace_engine(engine: Optional[Engine], owned: bool) -> None:
    previous, previous_owned = _state.engine, _state.owns_engine
    _state.engine, _state.owns_engine = engine, owned
    if previous_owned and previous is not None and previous is not engine:
        previous.close(wait=False)


def get_engine() -> Engine:
    """Return the process-wide engine, selecting it on first call."""
    if _state.engine is None:
        _state.engine = select_backend()
        _state.owns_engine = True
    return _state.engine


def current_backend() -> Backend:
    """Backend of the engine the top-level functions dispatch to."""
    return get_engine().backend


def use_backend(backend: Union[str, Backend, Engine]) -> Engine:
    """Switch the process-wide engine at runtime.

    An engine built here from a name is closed when it is replaced. An
    Engine instance passed in stays owned by the caller.

    Args:
        backend: A backend name, a Backend enum, or a ready Engine instance.

    Returns:
        The engine now in use.

    Example:
        >>> import pgtrigram as pt
        >>> pt.use_backend("portable")
        PortableEngine()
    """
    owned = not isinstance(backend, Engine)
    engine = build_engine(backend) if owned else backend
    logger.info("Switching trigram backend to %s", engine.backend.value)
    _replace_engine(engine, owned)
    return engine


def reset_backend() -> None:
    """Forget the selected engine and settings; the next call re-reads the environment."""
    _state.settings = None
    _replace_engine(None, False)
    _state.limit = None


def show_limit() -> float:
    """Current default threshold used by ``is_similar``."""
    if _state.limit is None:
        _state.limit = _settings().similarity_threshold
    return _state.limit


def set_limit(limit: float) -> float:
    """Set the default ``is_similar`` threshold and return it.

    Raises:
        ValidationError: If limit is not between 0 and 1.
    """
    _state.limit = ensure_unit_interval(limit, "limit")
    return _state.limit


__all__ = [
    "available_backends",
    "build_engine",
    "current_backend",
    "get_engine",
    "reset_backend",
    "select_backend",
    "set_limit",
    "show_limit",
    "use_backend",
]
