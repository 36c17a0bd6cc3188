"""
Tempo & Jira API clients

Supports:
- Tempo Cloud REST API v4 (Bearer token)
- Jira Cloud Basic Auth (email + API token)
- Jira Server PAT (Personal Access Token)
"""

import base64
import logging
from typing import Optional

import requests

from .config import DEFAULT_MAX_PAGES, DEFAULT_TIMEOUT, TEMPO_API_BASE_URL

logger = logging.getLogger(__name__)

# Tempo page size
PAGE_SIZE = 50


class PaginationLimitExceeded(RuntimeError):
    """Raised when Tempo keeps reporting a next page beyond the page cap"""

    def __init__(self, max_pages: int):
        super().__init__(f"Tempo pagination exceeded {max_pages} pages")
        self.max_pages = max_pages


class TempoClient:
    """Tempo REST API client"""

    def __init__(self, api_token: str, base_url: str = TEMPO_API_BASE_URL,
                 timeout: int = DEFAULT_TIMEOUT, max_pages: int = DEFAULT_MAX_PAGES):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_pages = max_pages
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

    def get_worklogs(self, date_from: str, date_to: str) -> list[dict]:
        """
        Fetch every worklog in an inclusive date range.

        Pages through /worklogs with a fixed page size until Tempo stops
        reporting a next page. Any HTTP or transport error propagates.

        Args:
            date_from: Start date (YYYY-MM-DD)
            date_to: End date (YYYY-MM-DD)

        Returns:
            Raw worklog dicts in upstream order
        """
        url = f"{self.base_url}/worklogs"
        worklogs: list[dict] = []
        offset = 0
        pages = 0
        has_more = True

        while has_more:
            if pages >= self.max_pages:
                raise PaginationLimitExceeded(self.max_pages)

            params = {
                "from": date_from,
                "to": date_to,
                "offset": offset,
                "limit": PAGE_SIZE
            }
            resp = self.session.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json() or {}
            pages += 1

            results = data.get("results") or []
            metadata = data.get("metadata") or {}
            worklogs.extend(results)

            has_more = bool(metadata.get("next"))
            if has_more and not results:
                logger.warning(
                    f"Tempo reported a next page after an empty page at offset {offset}; stopping"
                )
                has_more = False
            offset += PAGE_SIZE

        logger.info(f"Fetched {len(worklogs)} worklogs from Tempo in {pages} page(s)")
        return worklogs


class JiraClient:
    """Jira REST API client"""

    def __init__(self, base_url: str, token: str, email: Optional[str] = None,
                 auth_type: str = "pat", timeout: int = DEFAULT_TIMEOUT):
        """
        Args:
            base_url: Jira URL (e.g., https://example.atlassian.net)
            token: PAT or API Token
            email: Email (Cloud Basic Auth only)
            auth_type: "pat" (Server) or "basic" (Cloud)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

        if auth_type == "pat":
            self.session.headers.update({
                "Authorization": f"Bearer {token}",
            })
        else:
            auth_string = base64.b64encode(f"{email}:{token}".encode()).decode()
            self.session.headers.update({
                "Authorization": f"Basic {auth_string}",
            })

        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

    def search_issues(self, issue_ids: list) -> list[dict]:
        """
        Look up key and summary for a set of issue ids in one JQL query.

        Args:
            issue_ids: Issue ids (numeric or string)

        Returns:
            Issue dicts as returned by /rest/api/3/search/jql
        """
        if not issue_ids:
            return []

        jql = f"id in ({','.join(str(i) for i in issue_ids)})"
        payload = {
            "jql": jql,
            "fields": ["key", "summary"],
            "maxResults": len(issue_ids)
        }

        resp = self.session.post(
            f"{self.base_url}/rest/api/3/search/jql",
            json=payload,
            timeout=self.timeout
        )
        resp.raise_for_status()
        return resp.json()["issues"]
