"""Authorization gate.

Every request passes through :class:`AuthorizationGate` before it is routed.
The policy is static: a handful of exact paths are open to
anyone, everything else needs the configured user's credentials.  A failed
check is an outright denial rather than a login challenge.

CSRF protection is not part of this policy and the request method is never
inspected here.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from lib.config.security_loader import SecurityConfig
from lib.contracts.access import Credentials, Decision
from lib.contracts.errors import AuthorizationDenied


@dataclass(frozen=True)
class AuthorizationGate:
    """Stateless allow-list check bound to an immutable config.

    A config with an empty password accepts no credentials at all.
    """

    config: SecurityConfig
    _permit: FrozenSet[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_permit", frozenset(self.config.permit_paths))

    def evaluate(self, path: str) -> Decision:
        """Return ``PERMIT`` iff ``path`` is exactly on the allow-list."""

        return Decision.PERMIT if path in self._permit else Decision.REQUIRE_AUTH

    def _valid(self, credentials: Optional[Credentials]) -> bool:
        if credentials is None or not self.config.user_password:
            return False
        # Both comparisons always run.
        user_ok = secrets.compare_digest(
            credentials.username.encode("utf-8"), self.config.user_name.encode("utf-8")
        )
        pass_ok = secrets.compare_digest(
            credentials.password.encode("utf-8"), self.config.user_password.encode("utf-8")
        )
        return user_ok and pass_ok

    def authorize(self, path: str, credentials: Optional[Credentials] = None) -> Decision:
        """Evaluate ``path`` and enforce authentication when required.

        Raises :class:`AuthorizationDenied` when the path is protected and
        ``credentials`` are missing or do not match the configured user.
        """

        decision = self.evaluate(path)
        if decision is Decision.REQUIRE_AUTH and not self._valid(credentials):
            raise AuthorizationDenied(path)
        return decision


__all__ = ["AuthorizationGate"]
