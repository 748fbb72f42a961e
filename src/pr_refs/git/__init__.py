"""Commit ordering and ref lifecycle operations."""

from .commits import fetch_commits, fetch_commits_details
from .linearize import linearize
from .models import CommitRecord
from .refs import (
    TemporaryRef,
    create_ref,
    create_temporary_ref,
    delete_ref,
    fetch_ref_sha,
    generate_unique_ref,
    get_fully_qualified_ref,
    get_head_ref,
    temporary_ref,
    update_ref,
    with_temporary_ref,
)

__all__ = [
    "CommitRecord",
    "linearize",
    "fetch_commits",
    "fetch_commits_details",
    "TemporaryRef",
    "create_ref",
    "create_temporary_ref",
    "delete_ref",
    "fetch_ref_sha",
    "generate_unique_ref",
    "get_fully_qualified_ref",
    "get_head_ref",
    "temporary_ref",
    "update_ref",
    "with_temporary_ref",
]
