from datetime import timedelta

import pyotp
import pytest
from httpx import AsyncClient

ROOT_EMAIL = "root@sentinel.example.com"


@pytest.mark.asyncio
async def test_enroll_confirm_and_login_with_totp(client: AsyncClient, clock, admin_headers):
    enroll = await client.post("/two-factor/enroll", headers=admin_headers)
    assert enroll.status_code == 200
    secret = enroll.json()["secret"]
    assert enroll.json()["provisioning_uri"].startswith("otpauth://totp/")

    status = await client.get("/two-factor/status", headers=admin_headers)
    assert status.json()["enabled"] is False
    assert status.json()["enrollment_pending"] is True

    confirm = await client.post(
        "/two-factor/confirm",
        json={"token": pyotp.TOTP(secret).at(clock.now())},
        headers=admin_headers,
    )
    assert confirm.status_code == 200
    assert confirm.json()["enabled"] is True

    login = await client.post("/auth/login", json={
        "email": ROOT_EMAIL,
        "password": "RootPass123!",
        "client_os": "Windows",
    })
    assert login.status_code == 200
    assert login.json()["outcome"] == "two_factor_required"
    assert login.json()["session"] is None
    account_id = login.json()["account_id"]

    accepted = {pyotp.TOTP(secret).at(clock.now() + timedelta(seconds=s)) for s in (-30, 0, 30)}
    wrong_token = next(t for t in ("000000", "111111", "222222", "333333") if t not in accepted)

    wrong = await client.post("/auth/2fa/verify", json={
        "account_id": account_id,
        "token": wrong_token,
        "client_os": "Windows",
    })
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "TWO_FACTOR_INVALID"

    clock.advance(seconds=30)
    verified = await client.post("/auth/2fa/verify", json={
        "account_id": account_id,
        "token": pyotp.TOTP(secret).at(clock.now()),
        "client_os": "Windows",
    })
    assert verified.status_code == 200
    assert verified.json()["outcome"] == "authenticated"
    assert verified.json()["session"]["account"]["two_factor_enabled"] is True


@pytest.mark.asyncio
async def test_confirm_after_expiry(client: AsyncClient, clock, admin_headers):
    secret = (await client.post("/two-factor/enroll", headers=admin_headers)).json()["secret"]

    clock.advance(minutes=10)
    response = await client.post(
        "/two-factor/confirm",
        json={"token": pyotp.TOTP(secret).at(clock.now())},
        headers=admin_headers,
    )

    assert response.status_code == 410
    assert response.json()["error"]["code"] == "ENROLLMENT_EXPIRED"

    again = await client.post("/two-factor/confirm", json={"token": "123456"}, headers=admin_headers)
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ENROLLMENT_MISSING"


@pytest.mark.asyncio
async def test_user_cannot_enroll(client: AsyncClient, add_account, login):
    await add_account()
    token = (await login()).json()["session"]["access_token"]

    response = await client.post(
        "/two-factor/enroll", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_disable(client: AsyncClient, clock, admin_headers):
    secret = (await client.post("/two-factor/enroll", headers=admin_headers)).json()["secret"]
    await client.post(
        "/two-factor/confirm",
        json={"token": pyotp.TOTP(secret).at(clock.now())},
        headers=admin_headers,
    )

    response = await client.delete("/two-factor", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["enabled"] is False
    status = await client.get("/two-factor/status", headers=admin_headers)
    assert status.json() == {
        "enabled": False,
        "enrollment_pending": False,
        "enrollment_expires_at": None,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("token", ["12ab", "1234567", ""])
async def test_malformed_token_is_an_audited_failure(
    client: AsyncClient, clock, admin_headers, token
):
    secret = (await client.post("/two-factor/enroll", headers=admin_headers)).json()["secret"]
    await client.post(
        "/two-factor/confirm",
        json={"token": pyotp.TOTP(secret).at(clock.now())},
        headers=admin_headers,
    )
    login = await client.post("/auth/login", json={
        "email": ROOT_EMAIL,
        "password": "RootPass123!",
        "client_os": "Windows",
    })

    response = await client.post("/auth/2fa/verify", json={
        "account_id": login.json()["account_id"],
        "token": token,
        "client_os": "Windows",
    })

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "TWO_FACTOR_INVALID"
    events = (await client.get("/audit/events", headers=admin_headers)).json()["events"]
    assert any(e["action"] == "login_fail_2fa_token" for e in events)


@pytest.mark.asyncio
async def test_malformed_confirm_token_is_audited(client: AsyncClient, admin_headers):
    await client.post("/two-factor/enroll", headers=admin_headers)

    response = await client.post(
        "/two-factor/confirm", json={"token": "12"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
    events = (await client.get("/audit/events", headers=admin_headers)).json()["events"]
    assert any(e["action"] == "admin_2fa_confirm_failed" for e in events)
