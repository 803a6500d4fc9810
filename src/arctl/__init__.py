"""arctl: build and run agents with MCP server dependencies as container images."""

from __future__ import annotations

__version__ = "0.1.0"
