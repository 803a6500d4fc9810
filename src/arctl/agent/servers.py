"""MCP server inspection: which declared servers need registry resolution."""

from __future__ import annotations

from arctl.agent.models import MCP_TYPE_COMMAND, MCP_TYPE_REGISTRY, AgentManifest, McpServer


def registry_servers(manifest: AgentManifest | None) -> list[McpServer]:
    """Return the servers resolved against a remote registry, in declaration order."""
    if manifest is None or not manifest.mcp_servers:
        return []
    return [s for s in manifest.mcp_servers if s.type == MCP_TYPE_REGISTRY]


def command_servers(manifest: AgentManifest | None) -> list[McpServer]:
    """Return the servers run from a local command (built as sidecar images)."""
    if manifest is None or not manifest.mcp_servers:
        return []
    return [s for s in manifest.mcp_servers if s.type == MCP_TYPE_COMMAND]


def has_registry_servers(manifest: AgentManifest | None) -> bool:
    """Whether any declared MCP server has the ``registry`` type tag."""
    if manifest is None or not manifest.mcp_servers:
        return False
    return any(s.type == MCP_TYPE_REGISTRY for s in manifest.mcp_servers)
