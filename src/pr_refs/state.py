"""Shared state module for pr-refs.

Provides the single configuration instance used by the tool modules.  Tool
modules import ``CONFIG`` from here rather than loading their own.
"""

from __future__ import annotations

from .config import Config

# Single shared configuration loaded once at import time
CONFIG: Config = Config.load_from_env()
