"""
Servicio de todos - colección en memoria compartida por los controllers
(la app crea una sola instancia y la inyecta en el blueprint)
"""
from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


class TodoNotFound(LookupError):
    """No existe un todo con ese id"""

    def __init__(self, todo_id: int):
        super().__init__(f"Todo {todo_id} no encontrado")
        self.todo_id = todo_id


@dataclass(frozen=True)
class Todo:
    id: int
    text: str
    completed: bool = False

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "completed": self.completed}


class TodoStore:
    """
    Lista ordenada de todos en memoria.

    Todas las operaciones toman el mismo lock, así que desde afuera se ven
    serializadas aunque Flask atienda requests en varios threads.
    Los ids salen de un contador y nunca se reutilizan.
    """

    def __init__(self, start_id: int = 1):
        self._todos: list[Todo] = []
        self._ids = itertools.count(start_id)
        self._lock = threading.Lock()

    def _index_of(self, todo_id: int) -> int:
        for i, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return i
        raise TodoNotFound(todo_id)

    def get_todos(self) -> list[Todo]:
        """Devuelve todos los todos en orden de creación"""
        with self._lock:
            return list(self._todos)

    def count_todos(self) -> int:
        with self._lock:
            return len(self._todos)

    def create_todo(self, text: str) -> Todo:
        """Agrega un todo nuevo al final de la lista"""
        with self._lock:
            todo = Todo(id=next(self._ids), text=text)
            self._todos.append(todo)
        logger.debug("Todo creado id=%s", todo.id)
        return todo

    def toggle_todo(self, todo_id: int) -> Todo:
        """Invierte 'completed' manteniendo la posición del todo"""
        with self._lock:
            i = self._index_of(todo_id)
            updated = replace(self._todos[i], completed=not self._todos[i].completed)
            self._todos[i] = updated
        logger.debug("Todo %s completed=%s", todo_id, updated.completed)
        return updated

    def delete_todo(self, todo_id: int) -> None:
        with self._lock:
            del self._todos[self._index_of(todo_id)]
        logger.debug("Todo %s eliminado", todo_id)
