import httpx
import pytest
from fastapi.testclient import TestClient

from shared.database import make_engine, make_session_factory
from career_recommender.config import Settings
from career_recommender.main import create_app

from helpers import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", profile_sync_enabled=False)


@pytest.fixture
def session_factory():
    engine = make_engine("sqlite://")
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def profile_level():
    return 20


@pytest.fixture
def profile_transport(profile_level):
    def handler(request):
        if request.method == "GET":
            return httpx.Response(200, json={"user_id": request.url.path.rsplit("/", 1)[-1], "level": profile_level})
        return httpx.Response(200, json={"ok": True})

    return httpx.MockTransport(handler)


@pytest.fixture
def client(settings, session_factory, profile_transport):
    app = create_app(settings=settings, SessionLocal=session_factory, transport=profile_transport)
    with TestClient(app) as c:
        yield c
