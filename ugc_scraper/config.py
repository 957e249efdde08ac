"""Client configuration, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

BASE_URL = "https://www.ugcleague.com"
USER_AGENT = "UgcScraper/1.0 (python-requests)"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = BASE_URL
    timeout: float = 30
    user_agent: str = USER_AGENT
    retry_delay: float = 0.5

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build a config from ``UGC_*`` environment variables, falling back to the defaults."""
        return cls(
            base_url=os.getenv("UGC_BASE_URL", BASE_URL).rstrip("/"),
            timeout=float(os.getenv("UGC_TIMEOUT", "30")),
            user_agent=os.getenv("UGC_USER_AGENT", USER_AGENT),
            retry_delay=float(os.getenv("UGC_RETRY_DELAY", "0.5")),
        )
