"""Basic Credentials — parsing the Authorization header without touching any store."""

import base64

import pytest

from warehouse_api.core.credentials import BasicCredentials, parse_basic_authorization


def _encode(raw: bytes) -> str:
    return "Basic " + base64.b64encode(raw).decode()


def test_parses_username_and_password():
    assert parse_basic_authorization(_encode(b"warehouse:s3cret")) == BasicCredentials(
        "warehouse", "s3cret",
    )


def test_only_first_colon_separates():
    creds = parse_basic_authorization(_encode(b"auditor:p:ss:word"))
    assert creds.username == "auditor"
    assert creds.password == "p:ss:word"


def test_empty_password_is_allowed():
    creds = parse_basic_authorization(_encode(b"user:"))
    assert creds == BasicCredentials("user", "")


def test_scheme_is_case_insensitive():
    token = base64.b64encode(b"a:b").decode()
    assert parse_basic_authorization(f"BASIC {token}") == BasicCredentials("a", "b")


def test_utf8_credentials():
    creds = parse_basic_authorization(_encode("josé:ñ".encode()))
    assert creds == BasicCredentials("josé", "ñ")


@pytest.mark.parametrize("header", [
    None,
    "",
    "Basic",
    "Basic    ",
    "Bearer dG9rZW4=",
    "Basic not base64!",
    "Basic " + base64.b64encode(b"missing-separator").decode(),
    "Basic " + base64.b64encode(b"\xc3\x28:pw").decode(),
])
def test_malformed_headers_yield_none(header):
    assert parse_basic_authorization(header) is None


def test_repr_masks_password():
    assert "s3cret" not in repr(BasicCredentials("warehouse", "s3cret"))
