"""
Blueprint de todos
"""
from flask import Blueprint, current_app, jsonify, request

from todos_service.services.todos_service import TodoNotFound

todos_bp = Blueprint('todos', __name__)

STORE_KEY = "todo_store"


def get_store():
    return current_app.extensions[STORE_KEY]


def not_found():
    return jsonify({"error": "Todo no encontrado"}), 404


@todos_bp.route("/todos", methods=["GET"])
def get_todos():
    todos = get_store().get_todos()
    return jsonify([t.to_dict() for t in todos]), 200


@todos_bp.route("/todos", methods=["POST"])
def create_todo():
    data = request.get_json()

    # Chequear el campo requerido
    if not isinstance(data, dict) or "text" not in data:
        return jsonify({"error": "El campo 'text' es obligatorio"}), 400
    # Se acepta cualquier string, incluso vacío
    if not isinstance(data["text"], str):
        return jsonify({"error": "El campo 'text' debe ser un string"}), 400

    todo = get_store().create_todo(data["text"])
    current_app.logger.info("Todo creado: id=%s", todo.id)
    return jsonify(todo.to_dict()), 201


# PUT siempre invierte 'completed', no lee el body
@todos_bp.route("/todos/<int:todo_id>", methods=["PUT"])
def toggle_todo(todo_id):
    try:
        todo = get_store().toggle_todo(todo_id)
    except TodoNotFound:
        return not_found()
    current_app.logger.info("Todo %s completed=%s", todo.id, todo.completed)
    return jsonify(todo.to_dict()), 200


@todos_bp.route("/todos/<int:todo_id>", methods=["DELETE"])
def delete_todo(todo_id):
    try:
        get_store().delete_todo(todo_id)
    except TodoNotFound:
        return not_found()
    current_app.logger.info("Todo eliminado: id=%s", todo_id)
    return "", 204
