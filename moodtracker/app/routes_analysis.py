# moodtracker/app/routes_analysis.py
from __future__ import annotations
import logging
from typing import Any, Dict, List, Literal, Optional, Union
from fastapi import APIRouter
from pydantic import BaseModel, Field
from moodtracker.services.analysis_service import analyze_context, analyze_journal
from moodtracker.exceptions import EntryDataError, AnalysisError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/analyze")

# ---------------------------
# Request schemas
# ---------------------------

class ThemeAnalysisRequest(BaseModel):
    entries: List[Dict[str, Any]] = Field(..., description="Journal entries (camelCase export format)")
    strategy: Optional[Literal["catalog", "frequency"]] = Field(
        None,
        description="Theme strategy (None: server default)",
    )
    time_range: Literal["day", "week", "month", "all"] = Field("all", description="Entries to include")


class ContextAnalysisRequest(BaseModel):
    entries: List[Dict[str, Any]]
    time_range: Literal["day", "week", "month", "all"] = "all"

# ---------------------------
# Response schemas
# ---------------------------

class ThemeAnalysisResult(BaseModel):
    result: Dict[str, Any]
    charts: Dict[str, Any]
    summary: str
    entry_count: int
    min_entries: int
    sufficient_entries: bool


class ContextAnalysisResult(BaseModel):
    summary: Dict[str, Any]
    entry_count: int
    min_entries: int
    sufficient_entries: bool


class ThemeAnalysisResponse(BaseModel):
    status: Literal["ok"] = "ok"
    result: ThemeAnalysisResult


class ContextAnalysisResponse(BaseModel):
    status: Literal["ok"] = "ok"
    result: ContextAnalysisResult


class AnalyzeErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error_type: str
    message: str


def _error_response(e: Exception) -> AnalyzeErrorResponse:
    if isinstance(e, EntryDataError):
        logger.warning("Entry data error: %s", e)
        return AnalyzeErrorResponse(error_type="entry_data_error", message=str(e))

    if isinstance(e, AnalysisError):
        logger.error("Analysis error: %s", e)
        return AnalyzeErrorResponse(error_type="analysis_error", message=str(e))

    logger.exception("Unexpected internal error")
    return AnalyzeErrorResponse(
        error_type="internal_error",
        message="Internal server error. Please try again later.",
    )

# ---------------------------
# Routes
# ---------------------------

@router.post(
    "/themes",
    response_model=Union[ThemeAnalysisResponse, AnalyzeErrorResponse],
)
async def analyze_themes_route(req: ThemeAnalysisRequest):
    """
    Thematic analysis API.

    - input: entries + optional strategy / time range
    - output: theme statistics, chart series, insight text, entry-count gate
    """
    try:
        out = analyze_journal(
            req.entries,
            strategy=req.strategy,
            time_range=req.time_range,
        )
        return ThemeAnalysisResponse(result=out)

    except Exception as e:
        return _error_response(e)


@router.post(
    "/context",
    response_model=Union[ContextAnalysisResponse, AnalyzeErrorResponse],
)
async def analyze_context_route(req: ContextAnalysisRequest):
    """Location context analysis API."""
    try:
        out = analyze_context(req.entries, time_range=req.time_range)
        return ContextAnalysisResponse(result=out)

    except Exception as e:
        return _error_response(e)
