"""Worklog enrichment and normalization - pure functions over raw Tempo worklogs"""

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from .models import IssueDetails, WorklogAuthor, WorklogRecord, WorklogSummary


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _str_or_none(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _seconds(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def format_hours(seconds: int) -> str:
    """Seconds as hours, fixed to two decimals (5400 -> "1.50")"""
    return f"{seconds / 3600:.2f}"


def collect_issue_ids(worklogs: Iterable[dict]) -> list:
    """Distinct non-empty issue ids referenced by the worklogs, first-seen order"""
    seen = set()
    issue_ids = []
    for worklog in worklogs:
        issue_id = _as_dict(worklog.get("issue")).get("id")
        if not issue_id or str(issue_id) in seen:
            continue
        seen.add(str(issue_id))
        issue_ids.append(issue_id)
    return issue_ids


def build_issue_map(issues: Iterable[dict]) -> Mapping[str, IssueDetails]:
    """
    Build a read-only issue id -> IssueDetails map from Jira search results.

    Ids are keyed as strings: Tempo sends numeric ids, Jira returns strings.
    Raises KeyError/TypeError on a malformed issue entry.
    """
    issue_map = {}
    for issue in issues:
        fields = issue.get("fields") or {}
        issue_map[str(issue["id"])] = IssueDetails(
            key=issue.get("key"),
            summary=fields.get("summary"),
        )
    return MappingProxyType(issue_map)


def merge_issue_details(worklogs: Iterable[dict],
                        issue_map: Mapping[str, IssueDetails]) -> list[dict]:
    """
    Return worklogs with issue key/summary filled from issue_map.

    Matched worklogs are shallow copies carrying a copied issue dict; the
    input worklogs are never modified. Unmatched worklogs pass through.
    """
    merged = []
    for worklog in worklogs:
        issue = _as_dict(worklog.get("issue"))
        issue_id = issue.get("id")
        details = issue_map.get(str(issue_id)) if issue_id else None
        if details is None:
            merged.append(worklog)
            continue
        merged.append({
            **worklog,
            "issue": {**issue, "key": details.key, "summary": details.summary},
        })
    return merged


def normalize_worklog(worklog: dict) -> WorklogRecord:
    """Map one raw Tempo worklog to a WorklogRecord; never raises on missing fields"""
    issue = _as_dict(worklog.get("issue"))
    author = _as_dict(worklog.get("author"))
    seconds = _seconds(worklog.get("timeSpentSeconds"))
    worklog_id = worklog.get("tempoWorklogId")
    if worklog_id is None:
        worklog_id = worklog.get("id")

    return WorklogRecord(
        id=worklog_id,
        issue_key=_str_or_none(issue.get("key")) or "N/A",
        issue_id=issue.get("id") or None,
        issue_summary=_str_or_none(issue.get("summary")),
        date=_str_or_none(worklog.get("startDate")),
        start_time=_str_or_none(worklog.get("startTime")),
        time_spent_seconds=seconds,
        time_spent_hours=format_hours(seconds),
        description=_str_or_none(worklog.get("description")) or "",
        author=WorklogAuthor(
            account_id=_str_or_none(author.get("accountId")),
            display_name=_str_or_none(author.get("displayName")) or "Unknown",
        ),
        created_at=_str_or_none(worklog.get("createdAt")),
        updated_at=_str_or_none(worklog.get("updatedAt")),
    )


def normalize_worklogs(worklogs: Iterable[dict]) -> list[WorklogRecord]:
    """Normalize every worklog, preserving order"""
    return [normalize_worklog(worklog) for worklog in worklogs]


def summarize(records: list[WorklogRecord]) -> WorklogSummary:
    """Total count, seconds and hours (rounded to two decimals)"""
    total_seconds = sum(record.time_spent_seconds for record in records)
    return WorklogSummary(
        total_worklogs=len(records),
        total_hours=round(total_seconds / 3600, 2),
        total_seconds=total_seconds,
    )
