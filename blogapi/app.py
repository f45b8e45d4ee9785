# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os

from flask import Flask, current_app
from flask_cors import CORS

from blogapi.container import Container
from blogapi.shared.config import AppConfig, load_config
from blogapi.shared.logging import logger, setup_logging
from blogapi.shared.middleware.error_handler import configure_error_handling
from blogapi.shared.middleware.request_logger import configure_request_logging

_CONTAINER_KEY = "blogapi.container"


def get_container() -> Container:
    return current_app.extensions[_CONTAINER_KEY]


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, debug_mode=config.debug_logging, log_file=config.log_file)

    container = Container(config)
    container.database.create_all()

    app = Flask(__name__)
    app.extensions[_CONTAINER_KEY] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(
        app,
        debug_mode=config.debug_logging,
        metrics_enabled=config.observability.metrics_enabled,
    )

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    app = create_app()
    port = int(os.environ.get("PORT", "8080"))
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
