"""Access decision contracts used by the authorization gate."""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Decision(str, Enum):
    """Outcome of evaluating a request path against the allow-list."""

    PERMIT = "permit"
    REQUIRE_AUTH = "require_auth"


class Credentials(BaseModel):
    """Username and password presented with a request."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str
