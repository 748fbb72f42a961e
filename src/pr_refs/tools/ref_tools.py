"""Ref and pull request commit tool implementations.

Wraps the ref lifecycle operations and commit fetching in JSON-friendly
functions for the MCP server.  Delegates to ``pr_refs.git``, which handles
the GitHub calls.

All tools enforce the repository allowlist - operations are only permitted on
allowed repositories.
"""

from __future__ import annotations

from .. import git
from ..policy.allowlist import repo_allowed
from ..state import CONFIG


def _enforce_repo_allowed(owner: str, repo: str) -> None:
    """Raise PermissionError if owner/repo is not in the allowlist."""
    if not repo_allowed(owner, repo, CONFIG.allowed_repos):
        raise PermissionError(f"Repository '{owner}/{repo}' is not in the allowlist")


async def github_fetch_ref_sha(owner: str, repo: str, ref: str) -> dict[str, object]:
    """Return the commit SHA a branch points at."""
    _enforce_repo_allowed(owner, repo)
    sha = await git.fetch_ref_sha(CONFIG, owner, repo, ref)
    return {"ref": ref, "sha": sha}


async def github_create_ref(owner: str, repo: str, ref: str, sha: str) -> dict[str, object]:
    """Create a branch at ``sha``.  Fails if the branch already exists."""
    _enforce_repo_allowed(owner, repo)
    await git.create_ref(CONFIG, owner, repo, ref, sha)
    return {"ref": ref, "sha": sha, "created": True}


async def github_update_ref(owner: str, repo: str, ref: str, sha: str, force: bool = False) -> dict[str, object]:
    """Move a branch to ``sha``.

    Without ``force`` the move must be a fast-forward.
    """
    _enforce_repo_allowed(owner, repo)
    await git.update_ref(CONFIG, owner, repo, ref, sha, force)
    return {"ref": ref, "sha": sha, "forced": force}


async def github_delete_ref(owner: str, repo: str, ref: str) -> dict[str, object]:
    _enforce_repo_allowed(owner, repo)
    await git.delete_ref(CONFIG, owner, repo, ref)
    return {"ref": ref, "deleted": True}


async def github_list_pr_commits(owner: str, repo: str, pull_request_number: int) -> dict[str, object]:
    """List a pull request's commits oldest first, with author, committer, message and tree."""
    _enforce_repo_allowed(owner, repo)
    commits = await git.fetch_commits_details(CONFIG, owner, repo, pull_request_number)
    return {"commits": [commit.to_dict() for commit in commits]}


async def github_list_pr_commit_shas(owner: str, repo: str, pull_request_number: int) -> dict[str, object]:
    _enforce_repo_allowed(owner, repo)
    shas = await git.fetch_commits(CONFIG, owner, repo, pull_request_number)
    return {"shas": shas}
