# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from voiceform.main import app
from voiceform.store import InMemorySessionStore, get_store
from voiceform.i18n import TableTranslator
from voiceform.normalizers import get_default_normalizer
from voiceform.wizard import SessionWizard


# --- Fresh session map per test ---
@pytest.fixture
def store():
    return InMemorySessionStore(ttl_seconds=3600)


# --- Override FastAPI's store dependency to use our test store ---
@pytest.fixture(autouse=True)
def override_get_store(store):
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def translator():
    return TableTranslator({
        "hi": {"What is your full name?": "आपका पूरा नाम क्या है?"},
    })


@pytest.fixture
def wizard(store, translator):
    return SessionWizard(store, get_default_normalizer(), translator)
