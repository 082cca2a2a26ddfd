"""
Aplicación principal del servicio de todos
Registra los blueprints, CORS, manejo de errores y log de requests
"""
import logging

from flask import Flask
from flask_cors import CORS

from todos_service.config import Settings
from todos_service.controllers.health_controller import health_bp
from todos_service.controllers.todos_controller import STORE_KEY, todos_bp
from todos_service.middleware.errors import register_error_handlers
from todos_service.middleware.request_log import register_request_log
from todos_service.services.todos_service import TodoStore

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level="INFO"):
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def create_app(settings=None, store=None):
    settings = settings or Settings.from_env()

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    # Una sola colección por proceso, compartida por todos los requests
    app.extensions[STORE_KEY] = store if store is not None else TodoStore()

    origins = list(settings.cors_origins)
    CORS(app, origins=origins, send_wildcard=origins == ["*"])

    # Registrar blueprints
    app.register_blueprint(todos_bp, url_prefix=settings.api_prefix or None)
    app.register_blueprint(health_bp)

    register_error_handlers(app)
    register_request_log(app)
    return app


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = create_app(settings)
    app.logger.info("Server running at http://%s:%s", settings.host, settings.port)
    app.logger.info("Environment: %s", settings.env)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
