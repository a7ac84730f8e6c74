"""Error types shared by the backend services."""


class BackendError(Exception):
    """Base class for all errors raised by the backend."""


class ConfigError(BackendError):
    """Invalid security or server configuration detected at startup."""


class DuplicateRouteError(BackendError):
    """Two handlers were registered for the same method and path."""


class AuthorizationDenied(BackendError):
    """A protected path was requested without valid credentials.

    The HTTP layer turns this into a terminal ``403`` response.  There is no
    challenge and no retry.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"access denied: {path}")
        self.path = path
