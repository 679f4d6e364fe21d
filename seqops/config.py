from dataclasses import dataclass, asdict, fields, replace
from typing import Any, Dict

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class Settings:
    """library-wide defaults"""
    # every line written by to.lines() ends with this, on every platform
    line_terminator: str = "\n"
    join_delimiter: str = ", "
    log_level: str = "WARNING"


_settings = Settings()


def get_settings() -> Settings:
    return _settings


def configure(**overrides: Any) -> Settings:
    """replace selected settings, returning the new settings object"""
    global _settings
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise InvalidArgumentError(f"unknown settings: {', '.join(sorted(unknown))}")
    _settings = replace(_settings, **overrides)
    return _settings


def reset() -> Settings:
    """restore the defaults"""
    global _settings
    _settings = Settings()
    return _settings


def as_dict() -> Dict[str, Any]:
    return asdict(_settings)
