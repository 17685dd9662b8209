"""Tests for the login stub."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from user_api.routers import users


@pytest.mark.asyncio
async def test_login_returns_fixed_payload(client: AsyncClient) -> None:
    response = await client.post("/users/login", json={"username": "alice", "password": "secret"})
    assert response.status_code == 200
    assert response.json() == {"message": "Login successful", "authenticated": False}


@pytest.mark.asyncio
async def test_login_does_not_check_credentials(client: AsyncClient, alice: dict) -> None:
    """Wrong credentials for a real user still get the stub response."""
    response = await client.post("/users/login", json={"username": "alice", "password": "wrong"})
    assert response.status_code == 200
    assert response.json()["authenticated"] is False


@pytest.mark.asyncio
async def test_login_accepts_missing_body(client: AsyncClient) -> None:
    response = await client.post("/users/login")
    assert response.status_code == 200
    assert "userData" not in response.json()


@pytest.mark.asyncio
async def test_login_echoes_user_data_attached_upstream() -> None:
    """User data placed on the request by earlier middleware is returned as userData."""
    app = FastAPI()

    @app.middleware("http")
    async def attach_user_data(request: Request, call_next):
        request.state.user_data = {"username": "alice"}
        return await call_next(request)

    app.include_router(users.router)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.post("/users/login", json={})

    assert response.status_code == 200
    assert response.json() == {
        "message": "Login successful",
        "authenticated": False,
        "userData": {"username": "alice"},
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"json": {"username": 123, "password": 5}},
        {"json": ["x"]},
        {"json": "hello"},
        {"data": {"username": "alice"}},
        {"content": b"{not json", "headers": {"Content-Type": "application/json"}},
    ],
)
async def test_login_accepts_any_body_shape(client: AsyncClient, body: dict) -> None:
    response = await client.post("/users/login", **body)
    assert response.status_code == 200
    assert response.json() == {"message": "Login successful", "authenticated": False}
