"""Route table and handlers for the backend service.

Routes are declared in one explicit table instead of being discovered from
decorators.  :func:`build_route_table` is called once at startup; the
resulting :class:`RouteTable` is read-only and is what the HTTP layer
registers with FastAPI.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping, Optional, Tuple

from lib.contracts.errors import DuplicateRouteError


HEALTH_BODY = "OK"
HELLO_BODY = "Hello from Backend!"

Handler = Callable[[], str]
RouteKey = Tuple[str, str]


def health() -> str:
    """Liveness check."""

    return HEALTH_BODY


def hello() -> str:
    return HELLO_BODY


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    handler: Handler
    name: str


class RouteTable:
    """Ordered, read-only mapping of ``(method, path)`` to :class:`Route`."""

    def __init__(self, routes: Iterable[Route]) -> None:
        table = {}
        for route in routes:
            key = (route.method.upper(), route.path)
            if key in table:
                raise DuplicateRouteError(f"route already registered: {key[0]} {key[1]}")
            table[key] = route
        self._routes: Mapping[RouteKey, Route] = MappingProxyType(table)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def resolve(self, method: str, path: str) -> Optional[Handler]:
        route = self._routes.get((method.upper(), path))
        return route.handler if route else None


def build_route_table() -> RouteTable:
    """Return the routing table served by the backend."""

    return RouteTable(
        [
            Route("GET", "/health", health, "health"),
            Route("GET", "/api/hello", hello, "hello"),
        ]
    )


__all__ = ["Route", "RouteTable", "build_route_table", "health", "hello", "HEALTH_BODY", "HELLO_BODY"]
