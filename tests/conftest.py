import pytest

from todos_service.app import create_app
from todos_service.config import Settings
from todos_service.services.todos_service import TodoStore


@pytest.fixture
def store():
    return TodoStore()


@pytest.fixture
def settings():
    return Settings(cors_origins=("*",), api_prefix="/api")


@pytest.fixture
def app(settings, store):
    app = create_app(settings=settings, store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
