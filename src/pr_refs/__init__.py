"""Top‑level package for pr-refs.

This package manages Git references on GitHub-hosted repositories and
reconstructs the ancestry order of a pull request's commits from the
unordered commit listing returned by the GitHub API.  See `DESIGN.md` for
more information.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
