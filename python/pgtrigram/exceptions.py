"""Exception types raised by pgtrigram."""


class TrigramError(Exception):
    """Base class for all pgtrigram errors."""


class EmptyHaystacksError(TrigramError, ValueError):
    """Raised by ``best_match`` when there are no haystacks to rank.

    This is an expected condition ("no candidates"), not a crash. Callers
    usually catch it and treat it as "no match found".
    """

    def __init__(self, message: str = "haystacks must not be empty"):
        super().__init__(message)


class ValidationError(TrigramError, ValueError):
    """Raised when a parameter is outside its accepted range."""


class ConfigurationError(TrigramError, ValueError):
    """Raised for malformed settings or unknown backend names."""


__all__ = ["TrigramError", "EmptyHaystacksError", "ValidationError", "ConfigurationError"]
