import pytest

from apps.backend import HEALTH_BODY, HELLO_BODY, Route, RouteTable, build_route_table, health, hello
from lib.contracts.errors import DuplicateRouteError


def test_default_table_resolves_both_routes():
    table = build_route_table()
    assert len(table) == 2
    assert table.resolve("GET", "/health") is health
    assert table.resolve("get", "/api/hello") is hello


def test_unknown_routes_resolve_to_none():
    table = build_route_table()
    assert table.resolve("GET", "/nonexistent") is None
    assert table.resolve("POST", "/health") is None


def test_table_preserves_declaration_order():
    assert [r.path for r in build_route_table()] == ["/health", "/api/hello"]


def test_duplicate_route_rejected():
    with pytest.raises(DuplicateRouteError):
        RouteTable([Route("GET", "/x", health, "a"), Route("get", "/x", hello, "b")])


def test_handlers_return_fixed_bodies():
    assert health() == HEALTH_BODY == "OK"
    assert hello() == HELLO_BODY == "Hello from Backend!"
