# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from zimcommon.infrastructure.container import Container
from zimcommon.shared.config import AppConfig, load_config
from zimcommon.shared.logging import logger, setup_logging
from zimcommon.shared.middleware.error_handler import configure_error_handling
from zimcommon.shared.middleware.request_logger import configure_request_logging

MAX_CONTENT_LENGTH = 1024 * 1024


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or (container.config if container else load_config())
    setup_logging(debug_mode=config.debug_logging)

    container = container or Container(config)
    # Fails start-up when JWT_SECRET is missing.
    container.session_tokens
    container.database.init_db()

    app = Flask(__name__)
    app.config.update(MAX_CONTENT_LENGTH=MAX_CONTENT_LENGTH)
    app.extensions["zimcommon.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    origins = config.security.allowed_origins
    cors_kwargs: dict[str, object] = {"resources": {r"/api/*": {"origins": origins}}}
    if "*" in origins:
        # flask-cors 6 echoes the request origin unless told otherwise.
        cors_kwargs["send_wildcard"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.schools_controller.as_blueprint())
    app.register_blueprint(container.chat_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(
        f"Flask app initialized: env={config.app_env} "
        f"ai_configured={bool(config.ai.api_key)} database={config.database.url.split(':', 1)[0]}"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server running on port {config.port}")
    app.run(host="0.0.0.0", port=config.port, debug=False)


if __name__ == "__main__":
    main()
