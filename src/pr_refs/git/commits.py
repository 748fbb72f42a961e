"""Fetch a pull request's commits in ancestry order."""

from __future__ import annotations

from ..config import Config
from ..github import api as github_api
from .linearize import linearize
from .models import CommitRecord


async def fetch_commits_details(
    config: Config,
    owner: str,
    repo: str,
    pull_request_number: int,
    *,
    strict: bool = False,
) -> list[CommitRecord]:
    """Return the pull request's commits ordered oldest to newest.

    The head SHA is read from the pull request itself, not from the commit
    listing, since the listing carries no ordering guarantee.
    """
    records: list[CommitRecord] = []
    async for page in github_api.iter_pull_request_commit_pages(config, owner, repo, pull_request_number):
        records.extend(CommitRecord.from_api(item) for item in page)

    pr = await github_api.get_pull_request(config, owner, repo, pull_request_number)
    return linearize(records, pr["head"]["sha"], strict=strict)


async def fetch_commits(
    config: Config,
    owner: str,
    repo: str,
    pull_request_number: int,
    *,
    strict: bool = False,
) -> list[str]:
    """Return the SHAs of the pull request's commits, oldest first."""
    details = await fetch_commits_details(config, owner, repo, pull_request_number, strict=strict)
    return [commit.sha for commit in details]
