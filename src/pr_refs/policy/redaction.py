"""Secret redaction utilities.

GitHub error bodies and transport exceptions are logged; this module strips
credentials from that text first.  Patterns are limited to token formats so
that commit and tree SHAs in the same messages stay readable.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_TOKEN_PATTERNS = [
    # GitHub personal access, OAuth, app and refresh tokens
    re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}"),
    re.compile(r"github_pat_[A-Za-z0-9_]{20,}"),
    # Authorization header values
    re.compile(r"(?:Bearer|token)\s+[A-Za-z0-9\-\._~\+/]{20,}=*", re.IGNORECASE),
]


def redact_secrets(text: str, secrets: Iterable[str]) -> str:
    """Return ``text`` with ``secrets`` and known token formats replaced by ``<REDACTED>``.

    :param text: arbitrary text that may contain secrets
    :param secrets: explicit secret strings (e.g. the configured token)
    :return: redacted text
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "<REDACTED>")
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub("<REDACTED>", redacted)
    return redacted
