"""Global constants for pr-refs.

These values serve as defaults for configuration and the GitHub API
wrapper.  Override them through environment variables rather than editing
this module.
"""

import os

# GitHub API
DEFAULT_GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
GITHUB_TIMEOUT_S = float(os.environ.get("GITHUB_TIMEOUT_S", 10.0))
# GitHub caps per_page at 100 for the pull request commits listing
COMMITS_PER_PAGE = int(os.environ.get("COMMITS_PER_PAGE", 100))

# Transport
MCP_TRANSPORT = os.environ.get("MCP_TRANSPORT", "stdio")

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
