"""Reconstruct the ancestry order of a pull request's commits.

The pull request commit listing comes back in no guaranteed order.  Given
the head SHA from the pull request itself, the chain is recovered by
walking first-parent links from the head until a parent falls outside
the listing.  This assumes every commit in the pull request sits on one
linear chain (no merges).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import DisconnectedCommitsError, DuplicateCommitError, HeadNotFoundError
from .models import CommitRecord

logger = logging.getLogger(__name__)


def linearize(
    commits: Iterable[CommitRecord],
    head_sha: str,
    *,
    strict: bool = False,
) -> list[CommitRecord]:
    """Return ``commits`` ordered from the root of the chain to ``head_sha``.

    :param commits: the unordered commit records of a pull request
    :param head_sha: SHA of the pull request head commit
    :param strict: raise instead of dropping commits unreachable from the head
    :raises DuplicateCommitError: if two records share a SHA
    :raises HeadNotFoundError: if no record has ``head_sha``
    :raises DisconnectedCommitsError: in strict mode, if any record is unreachable
    :return: a new list; ``result[0]`` is the oldest commit whose parent is
        not in ``commits`` and ``result[-1].sha == head_sha``
    """
    by_sha: dict[str, CommitRecord] = {}
    for commit in commits:
        if commit.sha in by_sha:
            raise DuplicateCommitError(commit.sha)
        by_sha[commit.sha] = commit

    head = by_sha.get(head_sha)
    if head is None:
        raise HeadNotFoundError(head_sha)

    chain = [head]
    placed = {head.sha}
    current = head
    while current.parent_sha in by_sha and current.parent_sha not in placed:
        current = by_sha[current.parent_sha]
        chain.append(current)
        placed.add(current.sha)

    if len(placed) < len(by_sha):
        leftovers = by_sha.keys() - placed
        if strict:
            raise DisconnectedCommitsError(leftovers)
        logger.debug("Dropping %d commit(s) not reachable from head %s", len(leftovers), head_sha)

    chain.reverse()
    return chain
