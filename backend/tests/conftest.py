import os

# Must be set before notevault.core.config is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ["DATABASE_TYPE"] = "memory"
os.environ["AI_PROVIDER"] = "mock"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Callable, Dict, List, Optional, Union

import pytest
from fastapi.testclient import TestClient

from notevault.core.auth import create_session_token
from notevault.gateway.rate_limit import limiter
from notevault.main import app
from notevault.repositories import PageRepository
from notevault.routers import dependencies
from notevault.services.ai_service import AIService
from notevault.services.database import MemoryAdapter
from notevault.services.providers.base import AIProvider


class ScriptedProvider(AIProvider):
    """Provider double: answers from a script and records every call."""

    def __init__(self, reply: Union[str, None, Exception, Callable] = "ok"):
        self.reply = reply
        self.calls: List[Dict] = []

    def complete(self, messages, max_tokens, temperature) -> Optional[str]:
        self.calls.append({
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        if isinstance(self.reply, Exception):
            raise self.reply
        if callable(self.reply):
            return self.reply(messages)
        return self.reply


@pytest.fixture
def db():
    return MemoryAdapter()


@pytest.fixture
def repo(db):
    return PageRepository(db)


@pytest.fixture
def provider():
    return ScriptedProvider()


@pytest.fixture
def ai_service(provider):
    return AIService(provider)


@pytest.fixture
def client(db, ai_service):
    dependencies.configure_services(database=db, ai=ai_service)
    limiter.reset()
    yield TestClient(app)
    dependencies.db_service = None
    dependencies.ai_service = None


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {create_session_token('user-1', name='Ada')}"}


@pytest.fixture
def other_headers():
    return {"Authorization": f"Bearer {create_session_token('user-2')}"}


@pytest.fixture
def make_page(client, auth_headers):
    """Create a page through the API and return its JSON."""

    def _make(title: str = "Notes", headers: Optional[Dict] = None) -> Dict:
        response = client.post("/api/pages", json={"title": title}, headers=headers or auth_headers)
        assert response.status_code == 201
        return response.json()["data"]

    return _make
