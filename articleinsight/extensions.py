# articleinsight/extensions.py
from __future__ import annotations

from quart import Quart

from .config import ServiceConfigs
from .utils.logger import get_logger
from .services.analysis.service import AnalysisService


async def init_extensions(app: Quart) -> None:
    """Initialise shared services and attach them to the app.

    This should be called once when the application starts.  The
    resulting objects are stored on ``app.extensions`` for later use.
    """

    logger = get_logger(__name__)

    # Load service configuration from environment (via pydantic)
    service_configs = ServiceConfigs()
    app.extensions["service_configs"] = service_configs

    analysis_service = AnalysisService.from_configs(
        service_configs, delays_ms=app.config.get("ANALYSIS_DELAYS_MS")
    )
    app.extensions["analysis_service"] = analysis_service
    logger.info(
        "AnalysisService initialised (delays_ms=%s, seeded=%s)",
        analysis_service.delays_ms,
        service_configs.random_seed is not None,
    )


async def shutdown_extensions(app: Quart) -> None:
    """Release shared services on application shutdown."""
    logger = get_logger(__name__)
    app.extensions.pop("analysis_service", None)
    logger.info("AnalysisService released")
