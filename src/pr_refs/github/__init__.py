"""GitHub API integration."""

from .api import (
    create_ref,
    delete_ref,
    get_pull_request,
    get_ref,
    iter_pull_request_commit_pages,
    update_ref,
)
from .auth import get_github_client

__all__ = [
    "get_github_client",
    "get_ref",
    "create_ref",
    "update_ref",
    "delete_ref",
    "get_pull_request",
    "iter_pull_request_commit_pages",
]
