"""Upstream error description for failed worklog requests"""

from typing import Any, Optional

import requests


def _response_body(response: Optional[requests.Response]) -> Any:
    if response is None:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _upstream_message(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    if body.get("message"):
        return str(body["message"])
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        return errors[0].get("message")
    return None


def describe_upstream_error(exc: Exception) -> tuple[int, str, Any]:
    """
    Status code, message and details for an exception raised by the pipeline.

    Uses the upstream HTTP response when the exception carries one,
    otherwise 500 with the exception text.
    """
    response = getattr(exc, "response", None)
    if not isinstance(response, requests.Response):
        return 500, str(exc), None

    body = _response_body(response)
    message = _upstream_message(body) or str(exc)
    return response.status_code or 500, message, body
