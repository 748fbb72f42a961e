"""Commit value types."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field


@dataclass
class CommitRecord:
    """One commit of a pull request as reported by the GitHub API.

    ``parent_sha`` is the first parent only; ``None`` when GitHub lists no
    parents.  ``author`` and ``committer`` are GitHub's identity objects
    (``name``, ``email``, ``date``) and are kept exactly as received.
    """

    sha: str
    parent_sha: str | None
    message: str = ""
    tree: str = ""
    author: dict[str, object] = field(default_factory=dict)
    committer: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_api(cls, item: dict[str, object]) -> CommitRecord:
        """Build a record from one item of ``GET /pulls/{number}/commits``."""
        commit = item.get("commit") or {}
        parents = item.get("parents") or []
        return cls(
            sha=item["sha"],
            parent_sha=parents[0]["sha"] if parents else None,
            message=commit.get("message", ""),
            tree=(commit.get("tree") or {}).get("sha", ""),
            author=commit.get("author") or {},
            committer=commit.get("committer") or {},
        )

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
