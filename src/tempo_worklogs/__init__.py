"""Tempo Worklogs - Aggregate Tempo worklogs enriched with Jira issue keys."""

__version__ = "1.0.0"

from .config import Config
from .models import WorklogRecord, WorklogSummary
from .service import WorklogService
from .tempo_api import JiraClient, TempoClient, PaginationLimitExceeded
from .worklogs import normalize_worklogs, summarize

__all__ = [
    "Config",
    "WorklogRecord",
    "WorklogSummary",
    "WorklogService",
    "JiraClient",
    "TempoClient",
    "PaginationLimitExceeded",
    "normalize_worklogs",
    "summarize",
]
