"""
Blueprint de salud
"""
from flask import Blueprint, jsonify

from todos_service.controllers.todos_controller import get_store

health_bp = Blueprint('health', __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    """Endpoint de salud del servicio"""
    return jsonify({
        "status": "ok",
        "service": "todos",
        "total": get_store().count_todos(),
    }), 200
