"""
Manejo de errores compartido.
Todas las respuestas de error salen como JSON {"error": "..."}
"""
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


def handle_http_error(e):
    """404 de rutas, 405, JSON mal formado (400), content-type inválido (415), etc."""
    return jsonify({"error": e.description or e.name}), e.code


def handle_unexpected_error(e):
    current_app.logger.exception("Error no manejado: %s", e)
    return jsonify({"error": "Error interno del servidor"}), 500


def register_error_handlers(app):
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
