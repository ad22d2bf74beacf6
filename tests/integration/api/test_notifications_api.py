import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_notifications_feed(client: AsyncClient, add_account, login, admin_headers):
    await add_account()
    await login(password="wrong")
    await login(password="wrong")

    feed = await client.get("/notifications", headers=admin_headers)
    assert feed.status_code == 200
    data = feed.json()
    assert data["unread"] == len(data["notifications"])
    assert data["unread"] >= 2

    first = data["notifications"][0]
    read = await client.post(f"/notifications/{first['id']}/read", headers=admin_headers)
    assert read.status_code == 200
    assert read.json()["is_read"] is True

    read_all = await client.post("/notifications/read-all", headers=admin_headers)
    assert read_all.status_code == 200
    assert read_all.json()["marked_read"] == data["unread"] - 1

    after = (await client.get("/notifications", headers=admin_headers)).json()
    assert after["unread"] == 0

    events = (await client.get("/audit/events", headers=admin_headers)).json()["events"]
    marked = next(e for e in events if e["action"] == "admin_notifications_marked_read")
    assert marked["details"] == {"count": data["unread"] - 1}


@pytest.mark.asyncio
async def test_acknowledge_unknown_notification(client: AsyncClient, admin_headers):
    response = await client.post(
        "/notifications/00000000-0000-0000-0000-000000000000/read", headers=admin_headers
    )

    assert response.status_code == 404
