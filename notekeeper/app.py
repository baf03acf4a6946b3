# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask

from notekeeper.container import Container
from notekeeper.shared.config import AppConfig, load_config
from notekeeper.shared.errors import register_error_handler
from notekeeper.shared.logging import logger, setup_logging
from notekeeper.shared.middleware import configure_request_logging


def create_app(config: AppConfig | None = None, *, configure_logging: bool = True) -> Flask:
    config = config or load_config()
    if configure_logging:
        setup_logging(
            config.log_level, log_file=config.log_file, debug_mode=config.debug_logging
        )

    container = Container(config)
    container.database.create_all()

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions["notekeeper"] = container

    register_error_handler(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    app.register_blueprint(container.accounts_controller.as_blueprint())
    app.register_blueprint(container.notes_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("Cache-Control", "no-store")
        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


