import time
from typing import Any

import jwt
import pytest
from starlette.requests import Request

from trainor.utils import auth as auth_utils
from trainor.utils import db
from tests.test_data import USER_EMAIL, USER_ID

JWT_SECRET = "super-secret-jwt-signing-key-for-tests"


@pytest.fixture
def jwt_secret(monkeypatch) -> str:
    monkeypatch.setattr(auth_utils.settings, "SUPABASE_JWT_SECRET", JWT_SECRET)
    return JWT_SECRET


@pytest.fixture
def make_token():
    """
    Build a Supabase-style HS256 access token.
    Usage:
        token = make_token(exp_offset=-10)
    """

    def _make(
        *,
        secret: str = JWT_SECRET,
        exp_offset: int = 3600,
        **claims: Any,
    ) -> str:
        payload = {
            "sub": USER_ID,
            "email": USER_EMAIL,
            "aud": "authenticated",
            "role": "authenticated",
            "exp": int(time.time()) + exp_offset,
        }
        payload.update(claims)
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def make_request():
    """
    Minimal Starlette request with the given headers and cookies.
    """

    def _make(headers: dict | None = None, cookies: dict | None = None) -> Request:
        raw_headers = [
            (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
        ]
        if cookies:
            cookie = "; ".join(f"{k}={v}" for k, v in cookies.items())
            raw_headers.append((b"cookie", cookie.encode()))
        return Request({"type": "http", "headers": raw_headers})

    return _make


@pytest.fixture
def supabase_credentials(monkeypatch):
    monkeypatch.setattr(db.settings, "SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setattr(db.settings, "SUPABASE_ANON_KEY", "anon-key")
    return "https://abc.supabase.co", "anon-key"


class FakePostgrest:
    def __init__(self):
        self.tokens: list[str] = []

    def auth(self, token):
        self.tokens.append(token)


class FakeCreatedClient:
    def __init__(self, url, key, options):
        self.url = url
        self.key = key
        self.options = options
        self.postgrest = FakePostgrest()


@pytest.fixture
def fake_acreate_client(monkeypatch):
    """
    Replace acreate_client in utils.db; returns the list of created clients.
    """
    created: list[FakeCreatedClient] = []

    async def _acreate(url, key, options=None):
        client = FakeCreatedClient(url, key, options)
        created.append(client)
        return client

    monkeypatch.setattr(db, "acreate_client", _acreate)
    return created
