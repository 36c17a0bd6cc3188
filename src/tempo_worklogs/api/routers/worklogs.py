"""
Worklogs Router - Tempo worklog retrieval
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...config import Config, get_config
from ...errors import describe_upstream_error
from ...service import WorklogService
from ...validation import QueryValidationError, validate_date_range
from ...worklogs import summarize
from ..models.schemas import ErrorResponse, WorklogQuery, WorklogsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(status_code: int, error: str, message: str, **extra) -> JSONResponse:
    """JSON error body with a stable error label"""
    body = ErrorResponse(error=error, message=message, **extra)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get(
    "",
    response_model=WorklogsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_worklogs(
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD"),
    output_format: Optional[str] = Query(None, alias="format", description="'flat' returns the worklog array only"),
    config: Config = Depends(get_config),
):
    """Get Tempo worklogs for a date range"""
    try:
        start_date, end_date = validate_date_range(start_date, end_date)
    except QueryValidationError as e:
        return JSONResponse(status_code=400, content=e.to_dict())

    if not config.is_configured():
        return error_response(500, "Configuration error", "TEMPO_API_TOKEN is not configured")

    try:
        service = WorklogService.from_config(config)
        records = service.get_worklogs(start_date, end_date)
    except Exception as e:
        logger.exception(f"Error fetching worklogs: {e}")
        status_code, message, details = describe_upstream_error(e)
        return error_response(
            status_code, "Failed to retrieve worklogs", message, details=details
        )

    # Flat format: array only, for ETL copy activities
    if output_format == "flat":
        return JSONResponse(
            content=[record.model_dump(mode="json", by_alias=True) for record in records]
        )

    response = WorklogsResponse(
        query=WorklogQuery(start_date=start_date, end_date=end_date),
        summary=summarize(records),
        worklogs=records,
    )
    return JSONResponse(content=response.model_dump(mode="json", by_alias=True))
