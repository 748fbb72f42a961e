"""Configuration loading for pr-refs.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Required variables:
- GITHUB_TOKEN

Optional variables with defaults:
- GITHUB_USERNAME (default: 'pr-refs', used in the User-Agent header)
- GITHUB_API_URL (default: 'https://api.github.com')
- ALLOWED_REPOS (default: '*')
- LOG_LEVEL (default: 'INFO')
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_GITHUB_API_URL, DEFAULT_LOG_LEVEL


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    github_token: str
    github_username: str
    allowed_repos: list[str]
    log_level: str
    api_url: str = DEFAULT_GITHUB_API_URL

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file is loaded if present.  Raises `RuntimeError` if
        required variables are missing.
        """
        load_dotenv()

        github_token = os.getenv("GITHUB_TOKEN")
        if not github_token:
            raise RuntimeError("Missing required environment variables: GITHUB_TOKEN")

        github_username = os.getenv("GITHUB_USERNAME") or "pr-refs"

        # Optional: ALLOWED_REPOS with default
        allowed_repos_str = os.getenv("ALLOWED_REPOS")
        if allowed_repos_str:
            allowed_repos = [repo.strip() for repo in allowed_repos_str.split(",") if repo.strip()]
        else:
            allowed_repos = ["*"]

        api_url = (os.getenv("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL).rstrip("/")

        return cls(
            github_token=github_token,
            github_username=github_username,
            allowed_repos=allowed_repos,
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL),
            api_url=api_url,
        )
