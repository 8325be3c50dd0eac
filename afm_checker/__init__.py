# afm_checker/__init__.py
# Створення Flask-додатку, реєстрація транспорту GSIS, blueprint'ів і CLI.

from flask import Flask
from .extensions import init_gsis
from .config import Config
from .routes.api import api_bp
from .cli import afm_cli
from .utils.logging import get_logger


def create_app(config_object: type[Config] = Config, transport=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    get_logger(app.config.get("LOG_LEVEL"))

    init_gsis(app, transport)

    app.register_blueprint(api_bp, url_prefix="/api")
    app.cli.add_command(afm_cli)

    @app.route("/health")
    def health():
        return {"status": "ok"}

    return app
