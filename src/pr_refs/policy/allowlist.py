"""Allowlist enforcement for repositories.

Tool calls may only touch repositories listed in the `ALLOWED_REPOS`
environment variable.  Entries are `owner/repo` slugs, `owner/*` for every
repository of an owner, or `*` for any repository.
"""

from __future__ import annotations

from collections.abc import Iterable


def repo_allowed(owner: str, repo: str, allowed: Iterable[str]) -> bool:
    """Return ``True`` if ``owner/repo`` is permitted by ``allowed``.

    Matching is case-insensitive, like GitHub's own slug handling.
    """
    owner = owner.lower().strip()
    repo = repo.lower().strip()
    if not owner or not repo:
        return False
    allowed_normalized = {r.lower().strip() for r in allowed}
    if "*" in allowed_normalized or "*/*" in allowed_normalized:
        return True
    if f"{owner}/*" in allowed_normalized:
        return True
    return f"{owner}/{repo}" in allowed_normalized
