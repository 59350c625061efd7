# hoop_detective/config.py
# settings for the remote player source, read from the environment / .env

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

API_KEY_ENV = "BALLDONTLIE_API_KEY"
API_BASE_ENV = "BALLDONTLIE_API_BASE"
PLACEHOLDER_KEY = "your_api_key_here"

DEFAULT_API_BASE = "https://api.balldontlie.io/v1"
# Some endpoints refuse requests without a browser-like agent
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def _clean_key(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    raw = raw.strip()
    if not raw or raw == PLACEHOLDER_KEY:
        return None
    return raw


@dataclass(frozen=True)
class Config:
    api_base_url: str = DEFAULT_API_BASE
    api_key: Optional[str] = None

    # Paging through /players
    per_page: int = 100
    max_pages: int = 10
    page_delay: float = 1.0

    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()
        return cls(
            api_base_url=os.getenv(API_BASE_ENV, DEFAULT_API_BASE).rstrip("/"),
            api_key=_clean_key(os.getenv(API_KEY_ENV)),
        )
