"""Auth API: credential issuance, logout and token lifetime."""

import pytest

from lovenest.errors import RequestError
from lovenest.models.user import AuthResponse

from conftest import PARTNER, USER


@pytest.mark.asyncio
async def test_login_stores_returned_token(client, server, store):
    server.on("POST", "/auth/login", body={"user": USER, "token": "T1"})

    result = await client.auth.login("a@b.com", "pw")

    assert isinstance(result, AuthResponse)
    assert result.token == "T1"
    assert result.user.display_name == "Alice"
    assert store.get() == "T1"
    assert server.last_json() == {"email": "a@b.com", "password": "pw"}
    await client.close()


@pytest.mark.asyncio
async def test_register_sends_camel_case_and_stores_token(client, server, store):
    server.on("POST", "/auth/register", status=201, body={"user": USER, "token": "T9"})

    await client.auth.register("a@b.com", "pw", "Alice", birthday="1995-05-05")

    assert server.last_json() == {
        "email": "a@b.com", "password": "pw", "displayName": "Alice", "birthday": "1995-05-05",
    }
    assert store.get() == "T9"
    await client.close()


@pytest.mark.asyncio
async def test_failed_login_leaves_store_untouched(client, server, store):
    store.set("OLD")
    server.on("POST", "/auth/login", status=401, body={"message": "Invalid credentials"})

    with pytest.raises(RequestError, match="Invalid credentials"):
        await client.auth.login("a@b.com", "wrong")

    assert store.get() == "OLD"
    await client.close()


@pytest.mark.asyncio
async def test_get_me_401_keeps_token(client, server, store):
    store.set("T1")
    server.on("GET", "/auth/me", status=401, body={"message": "invalid token"})

    with pytest.raises(RequestError) as exc:
        await client.auth.get_me()

    assert exc.value.message == "invalid token"
    assert store.get() == "T1"
    await client.close()


@pytest.mark.asyncio
async def test_get_me_network_failure_keeps_token(client, server, store):
    store.set("T1")
    server.offline("GET", "/auth/me")

    with pytest.raises(RequestError):
        await client.auth.get_me()

    assert store.get() == "T1"
    assert store.clears == 0
    await client.close()


@pytest.mark.asyncio
async def test_get_me_parses_partner(client, server, store):
    store.set("T1")
    server.on("GET", "/auth/me", body={"user": {**USER, "coupleId": {"_id": "c1", "coupleName": "A&B"}},
                                       "partner": PARTNER})

    me = await client.auth.get_me()

    assert me.partner.display_name == "Bob"
    assert me.user.couple.couple_name == "A&B"
    await client.close()


@pytest.mark.asyncio
async def test_malformed_auth_payload_is_a_request_error(client, server):
    server.on("GET", "/auth/me", body={"unexpected": True})

    with pytest.raises(RequestError) as exc:
        await client.auth.get_me()

    assert exc.value.code == "invalid_response"
    await client.close()


@pytest.mark.asyncio
async def test_logout_clears_token_once(client, server, store):
    store.set("T1")
    server.on("POST", "/auth/logout", body={"message": "Logged out"})

    await client.auth.logout()

    assert server.last.headers["Authorization"] == "Bearer T1"
    assert store.get() is None
    assert store.clears == 1
    await client.close()


@pytest.mark.asyncio
async def test_logout_offline_still_clears_token(client, server, store):
    store.set("T1")
    server.offline("POST", "/auth/logout")

    with pytest.raises(RequestError) as exc:
        await client.auth.logout()

    assert exc.value.code == "network_error"
    assert store.get() is None
    assert store.clears == 1
    await client.close()


@pytest.mark.asyncio
async def test_logout_server_error_still_clears_token(client, server, store):
    store.set("T1")
    server.on("POST", "/auth/logout", status=500, body={"message": "oops"})

    with pytest.raises(RequestError, match="oops"):
        await client.auth.logout()

    assert store.get() is None
    assert store.clears == 1
    await client.close()


@pytest.mark.asyncio
async def test_invite_flow(client, server, store):
    store.set("T1")
    server.on("POST", "/auth/invite", body={"emailSent": False, "inviteUrl": "https://nest/invite/abc"})
    server.on("GET", "/auth/invite/abc", body={"inviter": USER})
    server.on("POST", "/auth/accept-invite/abc", status=201, body={"user": PARTNER | {"email": "b@b.com"},
                                                                    "token": "T2"})

    sent = await client.auth.send_invite("b@b.com")
    assert not sent.email_sent
    assert sent.invite_url == "https://nest/invite/abc"

    info = await client.auth.validate_invite("abc")
    assert info.inviter.display_name == "Alice"

    await client.auth.accept_invite("abc", "b@b.com", "pw", "Bob", nickname="B")
    assert server.last_json() == {"email": "b@b.com", "password": "pw", "displayName": "Bob", "nickname": "B"}
    assert store.get() == "T2"
    await client.close()


@pytest.mark.asyncio
async def test_profile_and_couple_updates(client, server):
    server.on("PUT", "/auth/update", body={"user": USER})
    server.on("PUT", "/auth/couple", body={"couple": {}})

    await client.auth.update_profile(display_name="Ali", nickname=None)
    assert server.last_json() == {"displayName": "Ali"}

    await client.auth.update_couple(couple_name="A&B", partner2_nickname="Bobby")
    assert server.last_json() == {"coupleName": "A&B", "partner2Nickname": "Bobby"}
    await client.close()
