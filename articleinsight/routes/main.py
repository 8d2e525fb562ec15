# articleinsight/routes/main.py
from __future__ import annotations

from quart import Blueprint, current_app, jsonify

from articleinsight.utils.helper import local_now_iso
from articleinsight.utils.logger import get_logger


logger = get_logger(__name__)
main_bp = Blueprint("main", __name__)


@main_bp.get("/")
async def index() -> any:  # type: ignore
    """Service info with links to the analysis endpoints."""
    return jsonify(
        {
            "service": "ArticleInsight",
            "env": current_app.config.get("ENV"),
            "endpoints": [
                "POST /api/analysis",
                "POST /api/analysis/report",
                "GET /api/keywords",
                "GET /api/trends?keyword=...",
            ],
        }
    )


@main_bp.get("/health")
async def health():
    ready = "analysis_service" in current_app.extensions
    return jsonify({"status": "ok" if ready else "degraded", "time": local_now_iso()}), (
        200 if ready else 503
    )
