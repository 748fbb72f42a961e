"""Ref lifecycle operations on a remote GitHub repository.

Each operation forwards to a single GitHub API call and never retries.
Ref names are plain branch names (``feature/x``); the ``heads/`` and
``refs/heads/`` forms GitHub expects are derived here.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import TypeVar

from ..config import Config
from ..errors import RefNotFoundError
from ..github import api as github_api

logger = logging.getLogger(__name__)

T = TypeVar("T")


def generate_unique_ref(ref: str) -> str:
    """Return ``ref`` suffixed with a random UUID, e.g. ``foo-<uuid4>``."""
    return f"{ref}-{uuid.uuid4()}"


def get_head_ref(ref: str) -> str:
    return f"heads/{ref}"


def get_fully_qualified_ref(ref: str) -> str:
    return f"refs/{get_head_ref(ref)}"


async def fetch_ref_sha(config: Config, owner: str, repo: str, ref: str) -> str:
    """Return the commit SHA the branch ``ref`` points at.

    :raises RefNotFoundError: if the branch does not exist
    """
    data = await github_api.get_ref(config, owner, repo, get_head_ref(ref))
    return data["object"]["sha"]


async def create_ref(config: Config, owner: str, repo: str, ref: str, sha: str) -> None:
    """Create branch ``ref`` at ``sha``.

    :raises RefAlreadyExistsError: if the branch already exists
    """
    await github_api.create_ref(config, owner, repo, get_fully_qualified_ref(ref), sha)


async def update_ref(config: Config, owner: str, repo: str, ref: str, sha: str, force: bool) -> None:
    """Move branch ``ref`` to ``sha``.

    With ``force=False`` GitHub rejects moves that are not fast-forwards.

    :raises NonFastForwardError: if ``force`` is false and the move is not a fast-forward
    """
    await github_api.update_ref(config, owner, repo, get_head_ref(ref), sha, force)


async def delete_ref(config: Config, owner: str, repo: str, ref: str) -> None:
    """Delete branch ``ref``.

    :raises RefNotFoundError: if the branch does not exist
    """
    await github_api.delete_ref(config, owner, repo, get_head_ref(ref))


@dataclass
class TemporaryRef:
    """A uniquely named branch whose ``delete`` reaches the remote at most once."""

    config: Config
    owner: str
    repo: str
    name: str
    _deleted: bool = field(default=False, init=False, repr=False)

    async def delete(self) -> None:
        if self._deleted:
            return
        # Marked before the call so a failed delete is not attempted again
        self._deleted = True
        await delete_ref(self.config, self.owner, self.repo, self.name)
        logger.info("Deleted temporary ref %s in %s/%s", self.name, self.owner, self.repo)


def _log_orphaned_cleanup(task: asyncio.Future) -> None:
    """Collect the outcome of a shielded cleanup whose awaiter was cancelled."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Temporary ref cleanup failed after cancellation: %s", exc)


async def _shielded(aw: Awaitable[None]) -> None:
    """Await ``aw`` so that cancelling the caller does not cancel it.

    If the caller is cancelled first, ``aw`` keeps running and its failure
    is logged once it finishes.
    """
    task = asyncio.ensure_future(aw)
    try:
        await asyncio.shield(task)
    except asyncio.CancelledError:
        task.add_done_callback(_log_orphaned_cleanup)
        raise


async def _discard_cancelled_create(handle: TemporaryRef, creating: asyncio.Future) -> None:
    """Remove a temporary ref whose creation was interrupted by cancellation.

    The create request may still land on the remote, so it is awaited
    before the delete is sent.
    """
    try:
        await _shielded(creating)
    except asyncio.CancelledError:
        logger.warning("Temporary ref %s may remain: cancelled again while it was being created", handle.name)
        return
    except Exception as exc:
        logger.debug("Temporary ref %s was never created: %s", handle.name, exc)
        return
    try:
        await _shielded(handle.delete())
    except RefNotFoundError:
        logger.debug("Temporary ref %s already gone", handle.name)
    except asyncio.CancelledError:
        logger.warning("Cleanup of temporary ref %s interrupted by cancellation", handle.name)
    except Exception:
        logger.exception("Failed to delete temporary ref %s after cancelled create", handle.name)


async def create_temporary_ref(config: Config, owner: str, repo: str, ref: str, sha: str) -> TemporaryRef:
    """Create a branch named ``<ref>-<uuid>`` at ``sha`` and return a handle to it.

    If the caller is cancelled while the create request is in flight, the
    request is allowed to finish and the branch is deleted before the
    cancellation propagates.
    """
    handle = TemporaryRef(config=config, owner=owner, repo=repo, name=generate_unique_ref(ref))
    creating = asyncio.ensure_future(create_ref(config, owner, repo, handle.name, sha))
    try:
        await asyncio.shield(creating)
    except asyncio.CancelledError:
        await _discard_cancelled_create(handle, creating)
        raise
    logger.info("Created temporary ref %s at %s in %s/%s", handle.name, sha, owner, repo)
    return handle


@asynccontextmanager
async def temporary_ref(config: Config, owner: str, repo: str, ref: str, sha: str) -> AsyncIterator[str]:
    """Yield the name of a temporary branch at ``sha``, deleting it on exit.

    Cleanup is attempted on every exit path: normal return, an exception in
    the body, and cancellation either during creation or inside the body.
    The delete is shielded; if the caller is cancelled again while it runs,
    the delete finishes in the background and a failure is logged.  When the
    body raises, cleanup problems are logged and the body's exception
    propagates.
    """
    handle = await create_temporary_ref(config, owner, repo, ref, sha)
    try:
        yield handle.name
    except BaseException:
        try:
            await _shielded(handle.delete())
        except asyncio.CancelledError:
            logger.warning("Cleanup of temporary ref %s in %s/%s interrupted by cancellation", handle.name, owner, repo)
        except Exception:
            logger.exception("Failed to delete temporary ref %s in %s/%s", handle.name, owner, repo)
        raise
    await _shielded(handle.delete())


async def with_temporary_ref(
    config: Config,
    owner: str,
    repo: str,
    ref: str,
    sha: str,
    action: Callable[[str], Awaitable[T]],
) -> T:
    """Run ``action`` with the name of a temporary branch created at ``sha``.

    The branch is deleted once ``action`` finishes, whether it returns or raises.
    """
    async with temporary_ref(config, owner, repo, ref, sha) as name:
        return await action(name)
