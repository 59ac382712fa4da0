"""
tests.conftest

Shared fixtures: an app bound to a throwaway SQLite file, an httpx client driving it
in-process, and small helpers for GraphQL calls and account setup.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from podcast_api.api.app import create_app
from podcast_api.settings import Settings

TOKEN_HEADER = "X-JWT"
PASSWORD = "1234"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'podcasts.db'}",
        jwt_secret="test-secret",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def session(app: FastAPI) -> AsyncIterator[AsyncSession]:
    async with app.state.sessionmaker() as s:
        yield s


class GraphQLClient:
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def execute(self, query: str, *, token: str | None = None) -> dict[str, Any]:
        headers = {TOKEN_HEADER: token} if token else {}
        r = await self._http.post("/graphql", json={"query": query}, headers=headers)
        assert r.status_code == 200, r.text
        return r.json()


@pytest_asyncio.fixture
async def gql(app: FastAPI) -> AsyncIterator[GraphQLClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield GraphQLClient(http)


@pytest.fixture
def signup(gql: GraphQLClient) -> Callable[..., Awaitable[str]]:
    """Create an account and return a session token for it."""

    async def _signup(email: str, role: str = "Host", password: str = PASSWORD) -> str:
        body = await gql.execute(
            f"""
            mutation {{
              createAccount(input: {{email: "{email}", password: "{password}", role: {role}}}) {{
                ok
                error
              }}
            }}
            """
        )
        assert body["data"]["createAccount"] == {"ok": True, "error": None}

        body = await gql.execute(
            f"""
            mutation {{
              login(input: {{email: "{email}", password: "{password}"}}) {{
                ok
                token
              }}
            }}
            """
        )
        assert body["data"]["login"]["ok"] is True
        return body["data"]["login"]["token"]

    return _signup


@pytest_asyncio.fixture
async def host_token(signup) -> str:
    return await signup("host@podcasts.test")
