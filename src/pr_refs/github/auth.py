"""Authentication helpers for GitHub API."""

from __future__ import annotations

import httpx

from ..config import Config
from ..constants import GITHUB_TIMEOUT_S


def get_github_client(config: Config) -> httpx.AsyncClient:
    """Return a configured async GitHub httpx client with the Authorization header set."""
    return httpx.AsyncClient(
        headers={
            "Authorization": f"token {config.github_token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": f"pr-refs/{config.github_username}",
        },
        timeout=GITHUB_TIMEOUT_S,
    )
