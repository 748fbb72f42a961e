"""Tool module exports for pr-refs.

Each submodule exposes functions the MCP server registers as tools.

Usage:

    from pr_refs.tools import ref_tools
    await ref_tools.github_fetch_ref_sha("owner", "repo", "main")
"""

from . import ref_tools  # noqa: F401

__all__ = ["ref_tools"]
