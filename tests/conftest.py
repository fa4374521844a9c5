import pytest
import requests

from wordchain_app import create_app, db
from wordchain_app.config import Config
from wordchain_app.core.identity import UserContext
from wordchain_app.modules.vocabulary.repositories import InMemoryVocabularyRepository


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    VOCAB_STORAGE_BACKEND = 'sqlalchemy'
    LOG_TO_FILE = False


DEVICE_ID = 'device-test-1'


class FakeResponse:
    def __init__(self, text='', status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)


class FakeSession:
    """Stands in for requests.Session; returns a canned response or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.max_redirects = None

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def http_app():
    """App with no context pushed, so every request gets its own ``g``."""
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(http_app):
    return http_app.test_client()


@pytest.fixture
def device_headers():
    return {'X-Device-Id': DEVICE_ID, 'X-User-Name': 'Tester'}


@pytest.fixture
def user():
    return UserContext(user_id=DEVICE_ID, display_name='Tester')


@pytest.fixture
def other_user():
    return UserContext(user_id='device-test-2')


@pytest.fixture
def memory_repository():
    return InMemoryVocabularyRepository()


@pytest.fixture
def fake_session_factory():
    return FakeSession


@pytest.fixture
def fake_response_factory():
    return FakeResponse
