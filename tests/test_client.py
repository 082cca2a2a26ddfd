import pytest
import requests

from todos_service.client import TodosClient

BASE_URL = "http://testserver/api"


class FlaskResponse:
    def __init__(self, res):
        self.status_code = res.status_code
        self.ok = res.status_code < 400
        self._res = res

    def json(self):
        return self._res.get_json()


class FlaskSession:
    """Manda los requests del cliente a la app de Flask en memoria"""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, timeout=None, json=None):
        self.calls.append((method, url, timeout))
        path = url[len("http://testserver"):]
        return FlaskResponse(self.client.open(path, method=method, json=json))


class BrokenSession:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def api(client):
    return TodosClient(BASE_URL, session=FlaskSession(client))


def test_full_cycle(api):
    assert api.load_todos() == []

    todo = api.add_todo("buy milk")
    assert todo["text"] == "buy milk"
    assert api.load_todos() == [todo]

    assert api.toggle_todo(todo["id"])["completed"] is True
    assert api.delete_todo(todo["id"]) is True
    assert api.load_todos() == []


def test_add_trims_and_skips_blank(api):
    assert api.add_todo("   ") is None
    assert api.add_todo("  a  ")["text"] == "a"
    assert len(api.load_todos()) == 1


def test_missing_todo_reports_failure(api):
    assert api.toggle_todo(12345) is None
    assert api.delete_todo(12345) is False


def test_passes_timeout(client):
    session = FlaskSession(client)
    TodosClient(BASE_URL + "/", session=session, timeout=5).load_todos()
    assert session.calls == [("GET", BASE_URL + "/todos", 5)]


def test_network_errors_are_swallowed(caplog):
    api = TodosClient(BASE_URL, session=BrokenSession())
    assert api.load_todos() == []
    assert api.add_todo("x") is None
    assert api.toggle_todo(1) is None
    assert api.delete_todo(1) is False
    assert "connection refused" in caplog.text
