"""Agent manifest models: the parsed form of a project's ``agent.yaml``.

The precondition checks only read ``name``, ``image``, ``model_provider``
and the ``type``/``name`` pair of each MCP server.  The remaining fields
are carried for the build and run steps that consume the resolved plan.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

MCP_TYPE_COMMAND = "command"
MCP_TYPE_REMOTE = "remote"
MCP_TYPE_REGISTRY = "registry"


class McpServer(BaseModel):
    """One MCP server the agent depends on.

    ``type`` is matched exactly.  Tags other than ``command``, ``remote`` and
    ``registry`` are accepted so that detection never fails on them.
    """

    type: str
    name: str
    image: str = ""
    command: str = ""
    args: list[str] = []
    env: dict[str, str] = {}
    url: str = ""
    registry_server_name: str = ""
    registry_server_version: str = ""


class AgentManifest(BaseModel):
    """Validated representation of an ``agent.yaml`` file.

    Example YAML::

        name: weather-agent
        image: ghcr.io/acme/weather-agent:v1
        model_provider: anthropic
        model_name: claude-sonnet
        mcp_servers:
          - type: command
            name: weather
            command: python
            args: [server.py]
          - type: registry
            name: search
            registry_server_name: io.example/search
    """

    model_config = {"protected_namespaces": ()}

    name: str = Field(min_length=1)
    image: str = ""
    description: str = ""
    version: str = ""
    model_provider: str = ""
    model_name: str = ""
    mcp_servers: list[McpServer] | None = None
