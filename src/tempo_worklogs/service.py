"""Worklog pipeline - fetch from Tempo, enrich from Jira, normalize"""

import logging
from typing import Optional

from .config import Config
from .models import WorklogRecord
from .tempo_api import JiraClient, TempoClient
from .worklogs import build_issue_map, collect_issue_ids, merge_issue_details, normalize_worklogs

logger = logging.getLogger(__name__)


class WorklogService:
    """Per-request worklog retrieval pipeline"""

    def __init__(self, tempo: TempoClient, jira: Optional[JiraClient] = None):
        self.tempo = tempo
        self.jira = jira

    @classmethod
    def from_config(cls, config: Config) -> "WorklogService":
        """Build clients from configuration; Jira only when configured"""
        tempo = TempoClient(
            api_token=config.tempo_api_token,
            base_url=config.tempo_base_url,
            timeout=config.request_timeout,
            max_pages=config.max_pages,
        )
        jira = None
        if config.is_jira_configured():
            jira = JiraClient(
                base_url=config.jira_base_url,
                token=config.jira_api_token,
                email=config.jira_email or None,
                auth_type=config.get_jira_auth_type(),
                timeout=config.request_timeout,
            )
        return cls(tempo, jira)

    def enrich(self, worklogs: list[dict]) -> list[dict]:
        """
        Fill issue key/summary from Jira.

        Best effort: on any lookup failure the worklogs are returned unchanged.
        """
        if self.jira is None or not worklogs:
            return worklogs

        issue_ids = collect_issue_ids(worklogs)
        if not issue_ids:
            return worklogs

        try:
            issue_map = build_issue_map(self.jira.search_issues(issue_ids))
        except Exception as e:
            logger.warning(f"Failed to fetch issue keys from Jira: {e}")
            return worklogs

        logger.info(f"Resolved {len(issue_map)} of {len(issue_ids)} issues from Jira")
        return merge_issue_details(worklogs, issue_map)

    def get_worklogs(self, start_date: str, end_date: str) -> list[WorklogRecord]:
        """Fetch, enrich and normalize worklogs for an inclusive date range"""
        worklogs = self.tempo.get_worklogs(start_date, end_date)
        worklogs = self.enrich(worklogs)
        return normalize_worklogs(worklogs)
