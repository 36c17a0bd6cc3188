"""
Configuration loaded from environment variables
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


TEMPO_API_BASE_URL = "https://api.tempo.io/4"
DEFAULT_TIMEOUT = 30
DEFAULT_MAX_PAGES = 1000


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    value = env.get(name, "").strip()
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@dataclass
class Config:
    """Service configuration"""
    tempo_api_token: str = ""
    tempo_base_url: str = TEMPO_API_BASE_URL
    jira_api_token: str = ""              # API Token (Cloud) or PAT (Server)
    jira_email: str = ""                  # Email (Cloud Basic Auth only)
    jira_base_url: str = ""
    request_timeout: int = DEFAULT_TIMEOUT
    max_pages: int = DEFAULT_MAX_PAGES    # upper bound on Tempo page requests

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Config":
        """Load configuration from the process environment"""
        env = os.environ if env is None else env
        return cls(
            tempo_api_token=env.get("TEMPO_API_TOKEN", "").strip(),
            tempo_base_url=env.get("TEMPO_API_BASE_URL", "").strip() or TEMPO_API_BASE_URL,
            jira_api_token=env.get("JIRA_API_TOKEN", "").strip(),
            jira_email=env.get("JIRA_EMAIL", "").strip(),
            jira_base_url=env.get("JIRA_BASE_URL", "").strip(),
            request_timeout=_int_env(env, "TEMPO_REQUEST_TIMEOUT", DEFAULT_TIMEOUT),
            max_pages=_int_env(env, "TEMPO_MAX_PAGES", DEFAULT_MAX_PAGES),
        )

    def is_configured(self) -> bool:
        """Check that the Tempo token is present"""
        return bool(self.tempo_api_token)

    def is_jira_configured(self) -> bool:
        """Check whether issue enrichment can run"""
        return bool(self.jira_api_token and self.jira_base_url)

    def get_jira_auth_type(self) -> str:
        """Jira auth type: basic (Cloud, email + token) or pat (Server)"""
        return "basic" if self.jira_email else "pat"


def get_config() -> Config:
    """FastAPI dependency returning the current configuration"""
    return Config.from_env()
