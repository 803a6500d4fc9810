"""Agent precondition checks: project dir, images, MCP servers, credentials."""

from arctl.agent.models import AgentManifest, McpServer
from arctl.agent.preflight import PreflightReport, run_preflight
from arctl.agent.project import (
    construct_image_name,
    construct_mcp_server_image_name,
    normalize_registry,
    validate_project_dir,
)
from arctl.agent.providers import PROVIDER_API_KEYS, required_api_key, validate_api_key
from arctl.agent.servers import has_registry_servers

__all__ = [
    "PROVIDER_API_KEYS",
    "AgentManifest",
    "McpServer",
    "PreflightReport",
    "construct_image_name",
    "construct_mcp_server_image_name",
    "has_registry_servers",
    "normalize_registry",
    "required_api_key",
    "run_preflight",
    "validate_api_key",
    "validate_project_dir",
]
