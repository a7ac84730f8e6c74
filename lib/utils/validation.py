"""Validation helpers."""
from lib.contracts.errors import ConfigError


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)
