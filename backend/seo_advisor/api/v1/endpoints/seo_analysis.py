"""SEO Analysis API endpoints.

Provides draft article analysis for the editor:
- POST /api/v1/seo/analyze - Analyze a single draft
- POST /api/v1/seo/analyze/batch - Analyze multiple drafts

Error Logging Requirements:
- Log all incoming requests with method, path, request_id
- Log response status and timing for every request
- Return structured error responses: {"error": str, "code": str, "request_id": str}
- Log 4xx errors at WARNING, 5xx at ERROR
"""

import time

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from seo_advisor.core.logging import get_logger
from seo_advisor.schemas.seo_analysis import (
    SeoAnalysisBatchRequest,
    SeoAnalysisBatchResponse,
    SeoAnalysisRequest,
    SeoAnalysisResponse,
)
from seo_advisor.services.seo_analysis import (
    AnalysisInput,
    AnalysisResult,
    SeoAnalysisService,
    SeoAnalysisValidationError,
    get_seo_analysis_service,
)

logger = get_logger(__name__)

router = APIRouter()


def _get_request_id(request: Request) -> str:
    """Get request_id from request state."""
    return getattr(request.state, "request_id", "unknown")


def _convert_request_to_input(data: SeoAnalysisRequest) -> AnalysisInput:
    """Convert API request to service input."""
    return AnalysisInput(
        title=data.title,
        lead=data.lead,
        body_markup=data.body_html,
        content_id=data.content_id,
    )


def _convert_result_to_response(
    result: AnalysisResult,
    content_id: str | None,
    duration_ms: float | None = None,
) -> SeoAnalysisResponse:
    """Convert service result to API response schema."""
    return SeoAnalysisResponse.model_validate({
        **result.to_dict(),
        "content_id": content_id,
        "duration_ms": round(duration_ms, 2) if duration_ms is not None else None,
    })


@router.post(
    "/analyze",
    response_model=SeoAnalysisResponse,
    summary="Analyze a draft",
    description="Score a draft's title, lead and body against on-page SEO heuristics.",
)
async def analyze_draft(
    request: Request,
    data: SeoAnalysisRequest,
    service: SeoAnalysisService = Depends(get_seo_analysis_service),
) -> SeoAnalysisResponse:
    """Analyze a single draft.

    Always succeeds for well-formed JSON: empty or malformed text is scored,
    not rejected.
    """
    request_id = _get_request_id(request)
    start_time = time.monotonic()

    logger.debug(
        "SEO analysis request",
        extra={
            "request_id": request_id,
            "title_length": len(data.title),
            "lead_length": len(data.lead),
            "body_html_length": len(data.body_html),
            "content_id": data.content_id,
        },
    )

    result = service.analyze(_convert_request_to_input(data))
    duration_ms = (time.monotonic() - start_time) * 1000

    logger.info(
        "SEO analysis complete",
        extra={
            "request_id": request_id,
            "content_id": data.content_id,
            "score": result.score,
            "grade": result.grade.value,
            "duration_ms": round(duration_ms, 2),
        },
    )

    return _convert_result_to_response(result, data.content_id, duration_ms)


@router.post(
    "/analyze/batch",
    response_model=SeoAnalysisBatchResponse,
    summary="Analyze drafts in batch",
    description="Analyze multiple drafts; results keep the request order.",
    responses={
        400: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Validation error for inputs: Batch size 60 exceeds maximum of 50",
                        "code": "VALIDATION_ERROR",
                        "request_id": "<request_id>",
                    }
                }
            },
        },
    },
)
async def analyze_draft_batch(
    request: Request,
    data: SeoAnalysisBatchRequest,
    service: SeoAnalysisService = Depends(get_seo_analysis_service),
) -> SeoAnalysisBatchResponse | JSONResponse:
    """Analyze multiple drafts and report the average score."""
    request_id = _get_request_id(request)
    start_time = time.monotonic()

    logger.debug(
        "SEO analysis batch request",
        extra={"request_id": request_id, "item_count": len(data.items)},
    )

    try:
        results = service.analyze_batch(
            [_convert_request_to_input(item) for item in data.items]
        )
    except SeoAnalysisValidationError as e:
        logger.warning(
            "SEO analysis validation error",
            extra={
                "request_id": request_id,
                "field": e.field_name,
                "value": str(e.value)[:100],
                "error_message": str(e),
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": str(e),
                "code": "VALIDATION_ERROR",
                "request_id": request_id,
            },
        )

    duration_ms = (time.monotonic() - start_time) * 1000
    average_score = sum(r.score for r in results) / len(results) if results else 0.0

    logger.info(
        "SEO analysis batch complete",
        extra={
            "request_id": request_id,
            "total_items": len(results),
            "average_score": round(average_score, 2),
            "duration_ms": round(duration_ms, 2),
        },
    )

    return SeoAnalysisBatchResponse(
        results=[
            _convert_result_to_response(result, item.content_id)
            for item, result in zip(data.items, results, strict=True)
        ],
        total_items=len(results),
        average_score=round(average_score, 2),
        duration_ms=round(duration_ms, 2),
    )
