"""Typed view over ``backend.yaml``.

The security policy and the server settings are read once at startup and
frozen into a :class:`SecurityConfig`.  The value is handed to the gate and
the HTTP layer explicitly; nothing in the package keeps it in a global.
"""

from __future__ import annotations

import os
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from lib.contracts.errors import ConfigError
from lib.utils.validation import ensure

from .yaml_loader import load_yaml


DEFAULT_CONFIG_PATH = "config/backend.yaml"
DEFAULT_PERMIT_PATHS: Tuple[str, ...] = ("/health", "/api/hello")
DEFAULT_USER_NAME = "user"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class SecurityConfig:
    """Immutable security policy and server settings.

    Attributes
    ----------
    permit_paths:
        Paths reachable without credentials.  Matching is exact.
    user_name, user_password:
        The single in-memory user accepted on protected paths.
    password_generated:
        ``True`` when no password was configured and one was generated.
    """

    permit_paths: Tuple[str, ...] = DEFAULT_PERMIT_PATHS
    user_name: str = DEFAULT_USER_NAME
    user_password: str = ""
    password_generated: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for p in self.permit_paths:
            ensure(isinstance(p, str) and p.startswith("/"), f"permit path must start with '/': {p!r}")
        ensure(bool(self.user_name), "security user name must not be empty")
        ensure(1 <= self.port <= 65535, f"port out of range: {self.port}")


def _resolve_path(path: Union[str, Path, None], env: Mapping[str, str]) -> Optional[Path]:
    explicit = path or env.get("BACKEND_CONFIG")
    if explicit:
        p = Path(explicit)
        if not p.exists():
            raise ConfigError(f"config file not found: {p}")
        return p
    default = Path(DEFAULT_CONFIG_PATH)
    return default if default.exists() else None


def _parse_port(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"invalid port: {value!r}") from None


def load_security_config(
    path: Union[str, Path, None] = None,
    env: Optional[Mapping[str, str]] = None,
) -> SecurityConfig:
    """Build a :class:`SecurityConfig` from defaults, YAML and environment.

    Parameters
    ----------
    path:
        YAML file to read.  Falls back to ``$BACKEND_CONFIG`` and then to
        ``config/backend.yaml`` when it exists.
    env:
        Mapping used for overrides, ``os.environ`` by default.
    """

    env = os.environ if env is None else env
    raw: Dict[str, Any] = {}
    cfg_path = _resolve_path(path, env)
    if cfg_path is not None:
        raw = load_yaml(cfg_path)

    server = raw.get("server", {}) or {}
    security = raw.get("security", {}) or {}
    user = security.get("user", {}) or {}
    logging_cfg = raw.get("logging", {}) or {}

    permit = security.get("permit_paths", list(DEFAULT_PERMIT_PATHS))
    ensure(isinstance(permit, list), "security.permit_paths must be a list")

    name = env.get("BACKEND_SECURITY_USER_NAME") or user.get("name") or DEFAULT_USER_NAME
    password = env.get("BACKEND_SECURITY_USER_PASSWORD") or user.get("password") or ""
    generated = not password
    if generated:
        password = secrets.token_hex(16)

    return SecurityConfig(
        permit_paths=tuple(permit),
        user_name=str(name),
        user_password=str(password),
        password_generated=generated,
        host=str(env.get("BACKEND_HOST") or server.get("host") or DEFAULT_HOST),
        port=_parse_port(env.get("BACKEND_PORT") or server.get("port") or DEFAULT_PORT),
        log_level=str(env.get("BACKEND_LOG_LEVEL") or logging_cfg.get("level") or "INFO"),
    )


__all__ = ["SecurityConfig", "load_security_config", "DEFAULT_PERMIT_PATHS"]
