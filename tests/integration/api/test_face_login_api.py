import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_face_login_picks_closest_account(client: AsyncClient, add_account):
    await add_account(face_embedding=[0.1, 0.2, 0.3])
    await add_account(email="bob@example.com", name="Bob", face_embedding=[0.9, 0.9, 0.9])

    response = await client.post("/auth/face-login", json={
        "embedding": [0.12, 0.21, 0.29],
        "client_os": "Android 14",
    })

    assert response.status_code == 200
    assert response.json()["session"]["account"]["email"] == "alice@example.com"


@pytest.mark.asyncio
async def test_face_login_without_close_match(client: AsyncClient, add_account):
    await add_account(face_embedding=[0.1, 0.2, 0.3])

    response = await client.post("/auth/face-login", json={
        "embedding": [5.0, 5.0, 5.0],
        "client_os": "Windows",
    })

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_face_login_respects_os_policy(client: AsyncClient, add_account):
    await add_account(face_embedding=[0.1, 0.2, 0.3])

    response = await client.post("/auth/face-login", json={
        "embedding": [0.1, 0.2, 0.3],
        "client_os": "macOS",
    })

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "OS_NOT_ALLOWED"
