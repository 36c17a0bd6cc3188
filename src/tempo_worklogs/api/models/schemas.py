"""
Pydantic schemas for the Tempo Worklogs API
"""

from pydantic import BaseModel, ConfigDict

from ...models import CamelModel, WorklogRecord, WorklogSummary


# ============================================================
# Worklog Schemas
# ============================================================

class WorklogQuery(CamelModel):
    """Requested date range"""
    start_date: str
    end_date: str


class WorklogsResponse(CamelModel):
    """Worklogs with query echo and summary"""
    success: bool = True
    query: WorklogQuery
    summary: WorklogSummary
    worklogs: list[WorklogRecord]


# ============================================================
# Error Schemas
# ============================================================

class ErrorResponse(BaseModel):
    """Error body; extra keys (example, provided, details) are kept"""
    model_config = ConfigDict(extra="allow")

    error: str
    message: str
