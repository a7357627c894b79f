"""Shared test fixtures for the Investor Profiler API test suite."""

import uuid
from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt

from app.auth.dependencies import get_current_user
from app.core.config import settings
from app.core.database import get_db
from app.main import app
from app.schemas.auth import CurrentUser

SAMPLE_USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")

SAMPLE_CURRENT_USER = CurrentUser(user_id=SAMPLE_USER_ID, email="test@example.com")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


def make_fake_db(existing=None) -> AsyncMock:
    """AsyncSession stand-in: SELECTs return `existing`, refresh stamps id/timestamps."""
    db = AsyncMock()
    db.add = MagicMock()

    result = MagicMock()
    result.scalar_one_or_none.return_value = existing
    db.execute.return_value = result

    async def _refresh(obj):
        now = datetime.now(timezone.utc)
        obj.id = obj.id or uuid.uuid4()
        obj.created_at = obj.created_at or now
        obj.updated_at = now

    db.refresh.side_effect = _refresh
    return db


@pytest.fixture
def fake_db() -> AsyncMock:
    return make_fake_db()


@pytest.fixture
async def authed_client(fake_db: AsyncMock) -> AsyncGenerator[AsyncClient]:
    """Client with auth bypassed and the DB session replaced by `fake_db`."""
    app.dependency_overrides[get_current_user] = lambda: SAMPLE_CURRENT_USER
    app.dependency_overrides[get_db] = lambda: fake_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.pop(get_current_user, None)
    app.dependency_overrides.pop(get_db, None)


def make_token(
    sub: str = str(SAMPLE_USER_ID),
    email: str = "test@example.com",
    expires_in: int = 3600,
    secret: str | None = None,
    audience: str | None = None,
) -> str:
    claims = {
        "sub": sub,
        "email": email,
        "aud": audience or settings.AUTH_JWT_AUDIENCE,
        "exp": int((datetime.now(timezone.utc) + timedelta(seconds=expires_in)).timestamp()),
    }
    return jwt.encode(claims, secret or settings.AUTH_JWT_SECRET, algorithm="HS256")

