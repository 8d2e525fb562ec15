"""
API blueprint exposing the market analysis endpoints.

Each endpoint takes a keyword, calls the shared
:class:`~articleinsight.services.analysis.service.AnalysisService`
stored on ``app.extensions`` and returns JSON (or Markdown for the
report).  The blueprint is mounted under the ``/api`` prefix in the
application factory.
"""

from __future__ import annotations

from quart import Blueprint, Response, current_app, jsonify, request
from quart_schema import RequestSchemaValidationError, validate_request

from articleinsight.models.schemas import AnalysisRequest
from articleinsight.services.analysis.errors import AnalysisError
from articleinsight.services.analysis.keyword_data import known_keywords
from articleinsight.services.analysis.report import export_to_markdown
from articleinsight.services.analysis.service import AnalysisService
from articleinsight.utils.helper import local_now, response_error_toast
from articleinsight.utils.logger import get_logger


analysis_bp = Blueprint("analysis", __name__)
logger = get_logger(__name__)


def _service() -> AnalysisService:
    return current_app.extensions["analysis_service"]


@analysis_bp.errorhandler(RequestSchemaValidationError)
async def handle_validation_error(error: RequestSchemaValidationError):
    logger.warning("[api] invalid payload: %s", error.validation_error)
    return response_error_toast(
        status="error", message="keyword is required", http_status=400
    )


@analysis_bp.errorhandler(AnalysisError)
async def handle_analysis_error(error: AnalysisError):
    return response_error_toast(status="error", message=error.message, http_status=500)


@analysis_bp.post("/analysis")
@validate_request(AnalysisRequest)
async def api_analysis(data: AnalysisRequest):
    """Run a comprehensive analysis for a keyword."""
    result = await _service().perform_comprehensive_analysis(data.keyword)
    return jsonify(result.model_dump(mode="json", by_alias=True))


@analysis_bp.post("/analysis/report")
@validate_request(AnalysisRequest)
async def api_analysis_report(data: AnalysisRequest) -> Response:
    """Run the analysis and render it as a Markdown report."""
    result = await _service().perform_comprehensive_analysis(data.keyword)
    tz = current_app.extensions["service_configs"].report_timezone
    body = export_to_markdown(data.keyword, result, now=local_now(tz))
    return Response(body, content_type="text/markdown; charset=utf-8")


@analysis_bp.get("/keywords")
async def api_keywords():
    """List keywords answered from the static table."""
    return jsonify({"keywords": list(known_keywords())})


@analysis_bp.get("/trends")
async def api_trends():
    """Search trend snapshot for ``?keyword=``."""
    keyword = (request.args.get("keyword") or "").strip()
    if not keyword:
        return response_error_toast(
            status="error", message="keyword is required", http_status=400
        )
    trends = await _service().search_keyword_trends(keyword)
    return jsonify(trends.model_dump(mode="json", by_alias=True))
