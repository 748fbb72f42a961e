"""GitHub REST API wrapper.

Every function here performs exactly one request (the commit page iterator
performs one per page it yields).  Nothing is retried; failures surface as
``GitHubAPIError`` or one of its ref-specific subclasses.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import httpx

from ..config import Config
from ..constants import COMMITS_PER_PAGE
from ..errors import (
    GitHubAPIError,
    NonFastForwardError,
    RefAlreadyExistsError,
    RefNotFoundError,
)
from ..policy.redaction import redact_secrets
from .auth import get_github_client

logger = logging.getLogger(__name__)


def _repo_url(config: Config, owner: str, repo: str, path: str) -> str:
    return f"{config.api_url}/repos/{owner}/{repo}/{path}"


def _error_message(resp: httpx.Response) -> str:
    """Return GitHub's ``message`` field from an error response, or the raw body."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return resp.text


async def _github_request(
    config: Config,
    method: str,
    url: str,
    *,
    params: dict[str, object] | None = None,
    json: dict[str, object] | None = None,
    allow_404: bool = False,
) -> object | None:
    """Perform an HTTP request against the GitHub API.

    This helper wraps ``httpx`` to provide a default timeout, GitHub client
    headers and basic error handling.  If the request returns a non-2xx
    response (other than 404 when ``allow_404=True``), ``GitHubAPIError`` is
    raised carrying the status code and GitHub's error message.

    Requests only go to the configured API base URL.
    """
    if not url.startswith(f"{config.api_url}/"):
        raise ValueError(f"Invalid GitHub API URL: {url}")

    try:
        async with get_github_client(config) as client:
            resp = await client.request(method, url, params=params, json=json)
    except httpx.HTTPError as exc:
        logger.error("GitHub API request failed: %s", redact_secrets(str(exc), [config.github_token]))
        raise GitHubAPIError(f"GitHub API request failed: {exc}") from exc

    if allow_404 and resp.status_code == 404:
        return None

    if 200 <= resp.status_code < 300:
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    message = _error_message(resp)
    logger.error(
        "GitHub API error %s on %s %s: %s",
        resp.status_code,
        method,
        url,
        redact_secrets(message, [config.github_token]),
    )
    raise GitHubAPIError(f"GitHub API error {resp.status_code}: {message}", status_code=resp.status_code)


def _translate_ref_error(exc: GitHubAPIError, ref: str) -> GitHubAPIError:
    """Map a generic API error from a ref endpoint onto the ref error taxonomy.

    GitHub answers 404 for a missing ref on reads, but 422 with a
    "Reference does not exist" message on updates and deletes.
    """
    message = exc.message.lower()
    if exc.status_code == 404 or (exc.status_code == 422 and "does not exist" in message):
        return RefNotFoundError(f"Ref '{ref}' not found", status_code=exc.status_code)
    if exc.status_code == 422 and "already exists" in message:
        return RefAlreadyExistsError(f"Ref '{ref}' already exists", status_code=exc.status_code)
    if exc.status_code == 422 and "fast forward" in message:
        return NonFastForwardError(f"Update of '{ref}' is not a fast-forward", status_code=exc.status_code)
    return exc


async def _ref_request(config: Config, method: str, url: str, ref: str, **kwargs: object) -> object | None:
    try:
        return await _github_request(config, method, url, **kwargs)
    except GitHubAPIError as exc:
        translated = _translate_ref_error(exc, ref)
        if translated is exc:
            raise
        raise translated from exc


async def get_ref(config: Config, owner: str, repo: str, ref: str) -> dict[str, object]:
    """Return the ref object for ``ref`` (e.g. ``heads/main``)."""
    url = _repo_url(config, owner, repo, f"git/ref/{ref}")
    return await _ref_request(config, "GET", url, ref)


async def create_ref(config: Config, owner: str, repo: str, ref: str, sha: str) -> dict[str, object]:
    """Create ``ref``, which must be fully qualified (``refs/heads/...``)."""
    url = _repo_url(config, owner, repo, "git/refs")
    return await _ref_request(config, "POST", url, ref, json={"ref": ref, "sha": sha})


async def update_ref(
    config: Config, owner: str, repo: str, ref: str, sha: str, force: bool
) -> dict[str, object]:
    url = _repo_url(config, owner, repo, f"git/refs/{ref}")
    return await _ref_request(config, "PATCH", url, ref, json={"sha": sha, "force": force})


async def delete_ref(config: Config, owner: str, repo: str, ref: str) -> None:
    url = _repo_url(config, owner, repo, f"git/refs/{ref}")
    await _ref_request(config, "DELETE", url, ref)


async def get_pull_request(config: Config, owner: str, repo: str, pull_request_number: int) -> dict[str, object]:
    """Retrieve pull request metadata (``head.sha`` is what callers need)."""
    url = _repo_url(config, owner, repo, f"pulls/{pull_request_number}")
    return await _github_request(config, "GET", url)


async def iter_pull_request_commit_pages(
    config: Config,
    owner: str,
    repo: str,
    pull_request_number: int,
    per_page: int = COMMITS_PER_PAGE,
) -> AsyncIterator[list[dict[str, object]]]:
    """Yield pages of a pull request's commits, fetching each only when requested.

    Iteration stops after an empty page or a page shorter than ``per_page``.
    The API does not promise any ordering of the items.
    """
    url = _repo_url(config, owner, repo, f"pulls/{pull_request_number}/commits")
    page = 1
    while True:
        params = {"per_page": per_page, "page": page}
        items = await _github_request(config, "GET", url, params=params)
        if not items:
            break
        yield items
        if len(items) < per_page:
            break
        page += 1
