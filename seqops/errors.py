"""error types raised by seqops, plus the argument checks that raise them"""

from typing import Any


class SeqOpsError(Exception):
    """base class for every error seqops raises on its own"""
    pass


class InvalidArgumentError(SeqOpsError, ValueError):
    """a numeric argument is outside its allowed range (e.g. a negative limit)"""
    pass


class NullArgumentError(SeqOpsError, TypeError):
    """None was passed where a value is required"""
    pass


class AbsentValueError(SeqOpsError, LookupError):
    """a value was demanded from an absent optional"""

    def __init__(self, message: str = "no value present"):
        super().__init__(message)


def require_not_none(value: Any, name: str) -> Any:
    if value is None:
        raise NullArgumentError(f"{name} must not be None")
    return value


def require_callable(func: Any, name: str) -> Any:
    require_not_none(func, name)
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")
    return func


def require_non_negative(count: int, name: str) -> int:
    if count < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {count}")
    return count
