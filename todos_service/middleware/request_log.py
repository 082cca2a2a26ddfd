"""
Log de acceso: una línea por request
"""
import logging

from flask import request

logger = logging.getLogger("todos_service.access")


def log_response(response):
    logger.info("%s %s -> %s", request.method, request.path, response.status_code)
    return response


def register_request_log(app):
    app.after_request(log_response)
