"""
Worklog data models

Fields are snake_case in Python and serialized in camelCase.
"""

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


Identifier = Union[int, str, None]


class CamelModel(BaseModel):
    """Base model with camelCase aliases"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@dataclass(frozen=True)
class IssueDetails:
    """Issue key and summary from a Jira lookup"""
    key: Optional[str]
    summary: Optional[str]


class WorklogAuthor(CamelModel):
    """Worklog author"""
    account_id: Optional[str] = None
    display_name: str = "Unknown"


class WorklogRecord(CamelModel):
    """Normalized worklog"""
    id: Identifier = None
    issue_key: str = "N/A"
    issue_id: Identifier = None
    issue_summary: Optional[str] = None
    date: Optional[str] = None
    start_time: Optional[str] = None
    time_spent_seconds: int = 0
    time_spent_hours: str = "0.00"
    description: str = ""
    author: WorklogAuthor = Field(default_factory=WorklogAuthor)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class WorklogSummary(CamelModel):
    """Aggregate totals"""
    total_worklogs: int
    total_hours: float
    total_seconds: int
