import pytest
from httpx import AsyncClient
from sqlmodel import select

from auth_core.domain.entities import Session


@pytest.mark.asyncio
async def test_logout_revokes_session(client: AsyncClient, db_session, register_user):
    registered = await register_user()

    response = await client.post(
        "/auth/logout", json={"refresh_token": registered["refresh_token"]}
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}

    session = (await db_session.exec(select(Session))).one()
    assert session.revoked is True

    refreshed = await client.post(
        "/auth/refresh", json={"refresh_token": registered["refresh_token"]}
    )
    assert refreshed.status_code == 401


@pytest.mark.asyncio
async def test_logout_twice(client: AsyncClient, register_user):
    registered = await register_user()
    payload = {"refresh_token": registered["refresh_token"]}

    first = await client.post("/auth/logout", json=payload)
    second = await client.post("/auth/logout", json=payload)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json() == {"success": True}


@pytest.mark.asyncio
async def test_logout_unknown_token(client: AsyncClient):
    response = await client.post("/auth/logout", json={"refresh_token": "never-issued"})

    assert response.status_code == 200
    assert response.json() == {"success": True}
