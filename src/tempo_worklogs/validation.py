"""Query parameter validation for worklog requests"""

import re
from datetime import datetime
from typing import Optional


DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
EXAMPLE_QUERY = "/api/worklogs?startDate=2026-01-01&endDate=2026-01-31"


class QueryValidationError(ValueError):
    """Invalid worklog query; carries the error label and extra body fields"""

    def __init__(self, error: str, message: str, **extra):
        super().__init__(message)
        self.error = error
        self.message = message
        self.extra = extra

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message, **self.extra}


def _parse_date(value: str) -> Optional[datetime]:
    if not DATE_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return None


def validate_date_range(start_date: Optional[str], end_date: Optional[str]) -> tuple[str, str]:
    """
    Validate a startDate/endDate pair.

    Both must be present, YYYY-MM-DD calendar dates, with start <= end.

    Returns:
        (start_date, end_date)

    Raises:
        QueryValidationError
    """
    if not start_date or not end_date:
        raise QueryValidationError(
            "Missing required parameters",
            "Both startDate and endDate query parameters are required (format: YYYY-MM-DD)",
            example=EXAMPLE_QUERY,
        )

    start = _parse_date(start_date)
    end = _parse_date(end_date)
    if start is None or end is None:
        raise QueryValidationError(
            "Invalid date format",
            "Dates must be in YYYY-MM-DD format",
            provided={"startDate": start_date, "endDate": end_date},
        )

    if start > end:
        raise QueryValidationError(
            "Invalid date range",
            "startDate must be before or equal to endDate",
        )

    return start_date, end_date
