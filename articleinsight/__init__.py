# articleinsight/__init__.py
from __future__ import annotations

import os
from quart import Quart
from quart_schema import QuartSchema

from .config import get_config
from .utils.logger import get_logger
from .extensions import init_extensions, shutdown_extensions
from .routes.main import main_bp
from .routes.analysis import analysis_bp


async def create_app(config_object: object | None = None) -> Quart:
    """Application factory for the ArticleInsight Quart app.

    Args:
        config_object: Optional explicit configuration class.  If not
            provided, the value of the ``APP_ENV`` environment variable
            is used to determine which configuration class to load via
            :func:`get_config`.  See :mod:`articleinsight.config` for details.

    Returns:
        A fully configured :class:`quart.Quart` application instance.
    """

    app = Quart(__name__)

    QuartSchema(app)

    env = os.environ.get("APP_ENV", "default")
    if config_object:
        app.config.from_object(config_object)
    else:
        app.config.from_object(get_config(env))

    # app context: LOG_* dari app.config ikut berlaku untuk logger ini
    async with app.app_context():
        logger = get_logger("quart.app")
    logger.info(f"Starting ArticleInsight app in {app.config['ENV']} mode")

    await init_extensions(app)
    logger.info("Extensions initialized successfully")

    @app.after_serving
    async def _cleanup():
        await shutdown_extensions(app)
        logger.info("Extensions shutdown successfully")

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(analysis_bp, url_prefix="/api")
    logger.info("Blueprints registered")

    return app
