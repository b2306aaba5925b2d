"""Authentication gate — every catalog request needs valid Basic credentials.

Invariants:
    - Rejection is 401 with an empty body and a Basic challenge header
    - Rejected requests never open a DB session (hermetic)
    - Passwords may contain ':'; only the first one separates username
    - Health probes bypass the gate
"""

import base64

import pytest

CHALLENGE = 'Basic realm="BeverageWarehouse", charset="UTF-8"'


def _assert_challenged(res) -> None:
    assert res.status_code == 401
    assert res.content == b""
    assert res.headers["www-authenticate"] == CHALLENGE


async def test_missing_header_is_challenged(anonymous_client, db_calls):
    res = await anonymous_client.get("/api/categories")
    _assert_challenged(res)
    assert db_calls == []


@pytest.mark.parametrize("header", [
    "Bearer abc.def.ghi",
    "Basic",
    "Basic !!!not-base64!!!",
    "Basic " + base64.b64encode(b"no-colon-here").decode(),
    "Basic " + base64.b64encode(b"\xff\xfe:x").decode(),
])
async def test_malformed_header_is_challenged(anonymous_client, db_calls, header):
    res = await anonymous_client.get(
        "/api/products", headers={"Authorization": header},
    )
    _assert_challenged(res)
    assert db_calls == []


async def test_wrong_password_is_challenged(anonymous_client, db_calls, make_basic_header):
    res = await anonymous_client.get(
        "/api/orders", headers=make_basic_header("warehouse", "wrong"),
    )
    _assert_challenged(res)
    assert db_calls == []


async def test_unknown_user_is_challenged(anonymous_client, make_basic_header):
    res = await anonymous_client.get(
        "/api/orders", headers=make_basic_header("mallory", "s3cret"),
    )
    _assert_challenged(res)


async def test_writes_are_gated_before_body_validation(anonymous_client, db_calls):
    res = await anonymous_client.post("/api/categories", json={})
    _assert_challenged(res)
    assert db_calls == []


async def test_unknown_route_is_gated(anonymous_client):
    res = await anonymous_client.get("/api/nowhere")
    _assert_challenged(res)


async def test_valid_credentials_reach_the_route(client, db_calls):
    res = await client.get("/api/categories")
    assert res.status_code == 200
    assert db_calls == ["get_db"]


async def test_password_containing_colons(anonymous_client, make_basic_header):
    res = await anonymous_client.get(
        "/api/categories", headers=make_basic_header("auditor", "p:ss:word"),
    )
    assert res.status_code == 200


async def test_scheme_is_case_insensitive(anonymous_client):
    token = base64.b64encode(b"warehouse:s3cret").decode()
    res = await anonymous_client.get(
        "/api/categories", headers={"Authorization": f"bAsIc {token}"},
    )
    assert res.status_code == 200


async def test_health_probe_is_exempt(anonymous_client):
    res = await anonymous_client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
