"""
Cliente HTTP del servicio de todos.
Hace las mismas llamadas que el frontend: cargar, agregar, marcar y borrar.
Los errores de red se registran en el log y no se propagan.
"""
import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"


class TodosClient:
    def __init__(self, base_url=DEFAULT_BASE_URL, session=None, timeout=2):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, todo_id=None):
        if todo_id is None:
            return f"{self.base_url}/todos"
        return f"{self.base_url}/todos/{todo_id}"

    def _send(self, method, url, **kwargs):
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Error en %s %s: %s", method, url, e)
            return None
        if not resp.ok:
            logger.warning("%s %s respondió %s", method, url, resp.status_code)
            return None
        return resp

    def load_todos(self):
        resp = self._send("GET", self._url())
        return resp.json() if resp is not None else []

    def add_todo(self, text):
        text = (text or "").strip()
        if not text:
            return None
        resp = self._send("POST", self._url(), json={"text": text})
        return resp.json() if resp is not None else None

    def toggle_todo(self, todo_id):
        resp = self._send("PUT", self._url(todo_id))
        return resp.json() if resp is not None else None

    def delete_todo(self, todo_id):
        return self._send("DELETE", self._url(todo_id)) is not None
