"""Policy utilities for pr-refs."""

from .allowlist import repo_allowed
from .redaction import redact_secrets

__all__ = [
    "repo_allowed",
    "redact_secrets",
]
