"""Pytest configuration and fixtures for pr-refs tests.

This module provides commit factories and a mocked GitHub client so tests
never reach the real API.

IMPORTANT: Environment variables must be set BEFORE importing pr_refs
modules, as the state module loads configuration at import time.
"""

from __future__ import annotations

import os

# Set environment variables BEFORE any pr_refs imports
os.environ.setdefault("GITHUB_TOKEN", "test-github-token")
os.environ.setdefault("GITHUB_USERNAME", "test-user")
os.environ.setdefault("ALLOWED_REPOS", "test/*,owner/*")

import httpx
import pytest

from pr_refs.config import Config
from pr_refs.git.models import CommitRecord

API = "https://api.github.com"


@pytest.fixture
def config() -> Config:
    return Config(
        github_token="test-github-token",
        github_username="test-user",
        allowed_repos=["owner/*"],
        log_level="INFO",
        api_url=API,
    )


@pytest.fixture
def make_commit():
    """Factory for commit records; only ``sha`` and ``parent_sha`` matter to ordering."""

    def _make(sha: str, parent_sha: str | None) -> CommitRecord:
        return CommitRecord(
            sha=sha,
            parent_sha=parent_sha,
            message=f"commit {sha}",
            tree=f"tree-{sha}",
            author={"name": "Test", "email": "test@test.com", "date": "2024-01-01T00:00:00Z"},
            committer={"name": "Test", "email": "test@test.com", "date": "2024-01-01T00:00:00Z"},
        )

    return _make


@pytest.fixture
def api_commit():
    """Factory for items as returned by ``GET /pulls/{number}/commits``."""

    def _make(sha: str, parents: list[str]) -> dict[str, object]:
        return {
            "sha": sha,
            "parents": [{"sha": p, "url": f"{API}/repos/owner/repo/commits/{p}"} for p in parents],
            "commit": {
                "author": {"name": "Ann", "email": "ann@example.com", "date": "2024-01-01T00:00:00Z"},
                "committer": {"name": "Bob", "email": "bob@example.com", "date": "2024-01-02T00:00:00Z"},
                "message": f"message {sha}",
                "tree": {"sha": f"tree-{sha}", "url": f"{API}/repos/owner/repo/git/trees/tree-{sha}"},
            },
        }

    return _make


@pytest.fixture
def json_response():
    """Build a real ``httpx.Response`` with an optional JSON body."""

    def _make(status_code: int, payload: object = None) -> httpx.Response:
        if payload is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=payload)

    return _make


@pytest.fixture
def mock_github_client(mocker):
    """Patch the GitHub client factory and return an installer.

    Call the installer with either a list of ``httpx.Response`` (returned in
    order) or an async callable ``(method, url, params=None, json=None)``.
    It returns the mocked client so tests can inspect ``client.request``.
    """

    def _install(responses):
        client = mocker.MagicMock()
        client.__aenter__ = mocker.AsyncMock(return_value=client)
        client.__aexit__ = mocker.AsyncMock(return_value=False)
        client.request = mocker.AsyncMock(side_effect=responses)
        mocker.patch("pr_refs.github.api.get_github_client", return_value=client)
        return client

    return _install
