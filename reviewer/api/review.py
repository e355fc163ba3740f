"""
POST /api/review
================
Thin HTTP shell around the analysis engine.

Validates presence of `code` and `language` (the engine never does), runs
analyze_code(), and returns the Report under a `review` key using the
camelCase wire names the front-end expects.
"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from reviewer.core.config import MAX_CODE_LENGTH
from reviewer.models.report import Report
from reviewer.services.orchestrator import analyze_code

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Review"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------
class ReviewRequest(BaseModel):
    code: Optional[str] = None
    language: Optional[str] = None


class ReviewResponse(BaseModel):
    review: Report


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------
@router.post("/review", response_model=ReviewResponse)
async def review_code(request: ReviewRequest):
    """Analyse one block of source text and return its quality report."""
    if not request.code:
        raise HTTPException(status_code=400, detail="Code is required")
    if not request.language:
        raise HTTPException(status_code=400, detail="Programming language is required")
    if len(request.code) > MAX_CODE_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Code must be at most {MAX_CODE_LENGTH} characters",
        )

    logger.info(f"[API] Review request: language={request.language}, {len(request.code)} chars")

    try:
        report = analyze_code(request.code, request.language)
    except Exception as exc:
        logger.error(f"[API] Review failed: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to review code")

    return ReviewResponse(review=report)
