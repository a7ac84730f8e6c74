import base64

from lib.utils.helpers import parse_basic_auth


def _basic(raw: str) -> str:
    return "Basic " + base64.b64encode(raw.encode("utf-8")).decode("ascii")


def test_parses_username_and_password():
    creds = parse_basic_auth(_basic("test:test"))
    assert creds is not None
    assert (creds.username, creds.password) == ("test", "test")


def test_password_may_contain_colon():
    creds = parse_basic_auth(_basic("user:a:b"))
    assert creds.password == "a:b"


def test_scheme_is_case_insensitive():
    assert parse_basic_auth(_basic("u:p").replace("Basic", "bAsIc")) is not None


def test_rejects_bad_headers():
    assert parse_basic_auth(None) is None
    assert parse_basic_auth("") is None
    assert parse_basic_auth("Bearer token") is None
    assert parse_basic_auth("Basic !!!not-base64") is None
    assert parse_basic_auth(_basic("no-colon")) is None
