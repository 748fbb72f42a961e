"""Exception types raised by pr-refs.

Remote failures derive from ``GitHubAPIError`` (a ``RuntimeError``, matching
what callers of the GitHub wrapper already catch).  Problems with the
commit listing handed to the linearizer derive from ``LinearizationError``.
"""

from __future__ import annotations

from collections.abc import Iterable


class GitHubAPIError(RuntimeError):
    """A GitHub API request failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RefNotFoundError(GitHubAPIError):
    """The named ref does not exist on the remote repository."""


class RefAlreadyExistsError(GitHubAPIError):
    """A ref with the requested name already exists."""


class NonFastForwardError(GitHubAPIError):
    """A non-forced ref update would not be a fast-forward."""


class LinearizationError(ValueError):
    """The commit listing cannot be ordered into a single chain."""


class HeadNotFoundError(LinearizationError):
    def __init__(self, head_sha: str) -> None:
        super().__init__(f"Head commit {head_sha} is not in the commit listing")
        self.head_sha = head_sha


class DuplicateCommitError(LinearizationError):
    def __init__(self, sha: str) -> None:
        super().__init__(f"Commit {sha} appears more than once in the commit listing")
        self.sha = sha


class DisconnectedCommitsError(LinearizationError):
    """Raised in strict mode when commits are unreachable from the head."""

    def __init__(self, shas: Iterable[str]) -> None:
        self.shas = sorted(shas)
        super().__init__(
            f"{len(self.shas)} commit(s) not reachable from head: {', '.join(self.shas)}"
        )
