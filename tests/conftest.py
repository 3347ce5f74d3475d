import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from main import create_app
from services.interview_ai import InterviewAI
from services.review_cache import ReviewCache
from services.store import SampleDataStore

API_KEY = "test-api-key"


class StubCompletions:
    """Stands in for AsyncOpenAI().chat.completions"""

    def __init__(self):
        self.reply = ""
        self.error = None
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class StubAIClient:
    def __init__(self):
        self.completions = StubCompletions()
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self):
        return self.completions.calls

    def reply_with(self, reply):
        self.completions.reply = reply if isinstance(reply, str) else json.dumps(reply)

    def fail_with(self, error):
        self.completions.error = error


class FakeClock:
    def __init__(self, start_ms=1_700_000_000_000):
        self.now = start_ms

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def settings():
    return Settings(
        api_key=API_KEY,
        openai_key="sk-test",
        rate_limit_max=1000,
        environment="development",
    )


@pytest.fixture
def ai_client():
    return StubAIClient()


@pytest.fixture
def ai_service(settings, ai_client):
    return InterviewAI(settings.openai_key, model=settings.openai_model, client=ai_client)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return SampleDataStore()


@pytest.fixture
def review_cache(clock):
    return ReviewCache(clock=clock)


@pytest.fixture
def app(settings, store, review_cache, ai_service):
    return create_app(settings=settings, store=store, cache=review_cache, ai_service=ai_service)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"X-API-Key": API_KEY}
