import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_events_paginate_without_gaps(
    client: AsyncClient, add_account, login, admin_headers
):
    await add_account()
    await login(password="wrong")
    await login()

    first_page = await client.get("/audit/events?limit=2", headers=admin_headers)
    assert first_page.status_code == 200
    page = first_page.json()
    assert len(page["events"]) == 2
    assert page["next_cursor"] is not None

    ids = []
    actions = []
    cursor = None
    while True:
        params = {"limit": 2, "cursor": cursor} if cursor else {"limit": 2}
        data = (await client.get("/audit/events", params=params, headers=admin_headers)).json()
        ids.extend(e["id"] for e in data["events"])
        actions.extend(e["action"] for e in data["events"])
        cursor = data["next_cursor"]
        if cursor is None:
            break

    assert "admin_user_created" in actions
    assert "user_added" in actions
    assert "login_fail_password" in actions
    assert "login_success_user" in actions
    assert len(ids) == len(set(ids))


@pytest.mark.asyncio
async def test_failed_login_is_audited_with_client_os(
    client: AsyncClient, add_account, login, admin_headers
):
    await add_account()
    await login(password="wrong", client_os="Windows 10")

    events = (await client.get("/audit/events", headers=admin_headers)).json()["events"]
    failure = next(e for e in events if e["action"] == "login_fail_password")

    assert failure["actor_label"] == "alice@example.com"
    assert failure["details"]["client_os"] == "Windows 10"
    assert failure["details"]["attempts"] == 1


@pytest.mark.asyncio
async def test_daily_activity(client: AsyncClient, admin_headers):
    response = await client.get("/audit/daily-activity?days=3", headers=admin_headers)

    assert response.status_code == 200
    days = response.json()["days"]
    assert [d["date"] for d in days] == ["2025-03-08", "2025-03-09", "2025-03-10"]
    assert days[0]["activities"] == 0
    assert days[-1]["activities"] >= 2


@pytest.mark.asyncio
async def test_summary(client: AsyncClient, clock, add_account, admin_headers):
    await add_account()
    clock.advance(minutes=1)

    response = await client.get("/audit/summary", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["accounts"] == 2
    assert data["pending_requests"] == 0
    assert data["recent_activity"] >= 3


@pytest.mark.asyncio
async def test_audit_requires_admin(client: AsyncClient, add_account, login):
    await add_account()
    token = (await login()).json()["session"]["access_token"]

    response = await client.get("/audit/events", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403
