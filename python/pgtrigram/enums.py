"""Enums for the pgtrigram API."""

from enum import Enum


class Backend(str, Enum):
    """Engine backends.

    String values are accepted anywhere a Backend is expected.

    Example:
        >>> import pgtrigram as pt
        >>> pt.use_backend(pt.Backend.PORTABLE)
    """

    PORTABLE = "portable"
    """Reference engine, sequential and dependency-free"""

    PARALLEL = "parallel"
    """Fans large batches out to a worker pool, results in input order"""

    AUTO = "auto"
    """PARALLEL when more than one CPU is available, otherwise PORTABLE"""


class Executor(str, Enum):
    """Worker pool kinds used by the parallel backend."""

    THREAD = "thread"
    """concurrent.futures.ThreadPoolExecutor"""

    PROCESS = "process"
    """concurrent.futures.ProcessPoolExecutor"""


__all__ = ["Backend", "Executor"]
