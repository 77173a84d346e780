"""Internal utilities for pgtrigram."""

from __future__ import annotations

import math
from typing import Iterable, Type, TypeVar, Union

from pgtrigram.enums import Backend, Executor
from pgtrigram.exceptions import ConfigurationError, ValidationError

E = TypeVar("E", Backend, Executor)


def _coerce_enum(value: Union[str, E], enum_cls: Type[E], what: str) -> E:
    if isinstance(value, enum_cls):
        return value

    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown {what}: '{value}'. "
                f"Valid options: {sorted(member.value for member in enum_cls)}"
            ) from None

    raise TypeError(f"{what} must be str or {enum_cls.__name__} enum, got {type(value).__name__}")


def normalize_backend(backend: Union[str, Backend]) -> Backend:
    """Convert a backend name to the Backend enum.

    Raises:
        ConfigurationError: If the name is not recognized.
        TypeError: If backend is not a string or Backend enum.

    Example:
        >>> normalize_backend("Parallel")
        <Backend.PARALLEL: 'parallel'>
    """
    return _coerce_enum(backend, Backend, "backend")


def normalize_executor(executor: Union[str, Executor]) -> Executor:
    """Convert an executor name to the Executor enum."""
    return _coerce_enum(executor, Executor, "executor")


def ensure_text(value: object, name: str = "text") -> str:
    """Return value unchanged if it is a str, else raise TypeError."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


def ensure_texts(values: Iterable[object], name: str = "haystacks") -> list[str]:
    """Materialize an iterable of strings into a list, checking every item."""
    if isinstance(values, str):
        raise TypeError(f"{name} must be a sequence of str, not a single str")
    items = list(values)
    for i, value in enumerate(items):
        if not isinstance(value, str):
            raise TypeError(f"{name}[{i}] must be str, got {type(value).__name__}")
    return items


def ensure_threshold(value: object, name: str = "min_threshold") -> float:
    """Coerce a threshold to float. Any real number is accepted, including NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


def ensure_unit_interval(value: object, name: str) -> float:
    """Coerce to float and require 0.0 <= value <= 1.0."""
    number = ensure_threshold(value, name)
    if math.isnan(number) or not 0.0 <= number <= 1.0:
        raise ValidationError(f"{name} must be between 0 and 1, got {value!r}")
    return number


__all__ = [
    "normalize_backend",
    "normalize_executor",
    "ensure_text",
    "ensure_texts",
    "ensure_threshold",
    "ensure_unit_interval",
]
