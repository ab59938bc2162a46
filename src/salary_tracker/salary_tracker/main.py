from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container
from .core.exceptions import NotFoundError, StorageError, ValidationError
from .records.controller import register as register_records
from .settings.controller import register as register_settings

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.errorhandler(StorageError)
    def handle_storage(e: StorageError):
        logger.error("Storage failure: %s", e)
        return jsonify({"success": False, "message": "Saving failed"}), 500


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    data_file = str(getattr(settings, "DATA_FILE"))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s data_file=%s", settings_module, data_file)

    container = build_container(data_file=data_file)
    app.extensions["salary_tracker"] = container

    register_error_handlers(app)
    register_records(app, container)
    register_settings(app, container)

    return app
