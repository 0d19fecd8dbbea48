# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from storefront.container import Container
from storefront.interfaces.http.routes import register_routes
from storefront.shared.config import load_config
from storefront.shared.logging import logger, setup_logging
from storefront.shared.middleware.error_handler import configure_error_handling
from storefront.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or Container()
    config = container.config
    setup_logging(
        level="DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
        json_logs=config.is_production(),
        service=config.observability.service_name,
    )

    app = Flask(__name__)
    app.extensions["container"] = container
    app.json.sort_keys = False

    configure_error_handling(app, config)
    configure_request_logging(app, config)

    CORS(app, resources={r"/*": {"origins": config.security.allowed_origins}})
    register_routes(app, container)

    logger.info(
        f"Flask app initialized (env={config.app_env}, "
        f"products={container.product_store.count()}, carts={container.cart_store.count()})"
    )
    return app


if __name__ == "__main__":
    create_app(Container(load_config())).run(host="0.0.0.0", port=5000, threaded=True)
