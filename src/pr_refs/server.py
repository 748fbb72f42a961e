"""MCP stdio server entrypoint for pr-refs.

The server runs over standard input/output using the Model Context Protocol.
It registers tool functions that clients can invoke to read and move refs
and to list a pull request's commits in ancestry order.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .constants import MCP_TRANSPORT
from .state import CONFIG
from .telemetry.logger import get_logger
from .tools import ref_tools


def build_tools_dispatch() -> dict[str, Callable[..., Awaitable[dict[str, Any]]]]:
    """Return a mapping from tool names to callables.

    Each callable is a coroutine function accepting keyword arguments and
    returning a JSON-serializable dictionary.
    """
    return {
        # Refs
        "github_fetch_ref_sha": ref_tools.github_fetch_ref_sha,
        "github_create_ref": ref_tools.github_create_ref,
        "github_update_ref": ref_tools.github_update_ref,
        "github_delete_ref": ref_tools.github_delete_ref,
        # Pull request commits
        "github_list_pr_commits": ref_tools.github_list_pr_commits,
        "github_list_pr_commit_shas": ref_tools.github_list_pr_commit_shas,
    }


def build_server() -> FastMCP:
    mcp = FastMCP("pr-refs")
    for name, func in build_tools_dispatch().items():
        mcp.add_tool(func, name=name)
    return mcp


def main() -> None:
    """Entrypoint for the pr-refs MCP server."""
    # The package logger writes to stderr; stdout is used for MCP protocol
    logger = get_logger("pr_refs", CONFIG.log_level)
    logger.info("Starting pr-refs MCP server")

    mcp = build_server()
    logger.info("Registered %d tools", len(build_tools_dispatch()))

    mcp.run(transport=MCP_TRANSPORT)


if __name__ == "__main__":
    main()
