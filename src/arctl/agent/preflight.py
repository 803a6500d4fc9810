"""Preflight: run every precondition check before an agent build or run.

Typical usage::

    settings = Settings.from_env()
    report = run_preflight(Path("."), settings=settings, flag_image="")
    build(report.agent_image, report.server_images)

Each check is all-or-nothing and nothing is mutated, so a failure can be
reported to the user and the operation abandoned as-is.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

from arctl.agent.manifest import load_manifest
from arctl.agent.project import (
    construct_image_name,
    construct_mcp_server_image_name,
    validate_project_dir,
)
from arctl.agent.providers import validate_api_key
from arctl.agent.servers import command_servers, has_registry_servers, registry_servers
from arctl.config import Settings
from arctl.utils.telemetry import (
    ATTR_AGENT_IMAGE,
    ATTR_AGENT_NAME,
    ATTR_MODEL_PROVIDER,
    ATTR_NEEDS_REGISTRY,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class PreflightReport(BaseModel):
    """Everything the build/run step needs once preconditions hold."""

    model_config = {"protected_namespaces": ()}

    project_dir: str
    agent_name: str
    model_provider: str = ""
    agent_image: str
    needs_registry_resolution: bool = False
    registry_servers: list[str] = []
    server_images: dict[str, str] = {}


def run_preflight(
    project_dir: Path,
    *,
    settings: Settings,
    flag_image: str = "",
    environ: Mapping[str, str] | None = None,
    check_credentials: bool = True,
) -> PreflightReport:
    """Validate *project_dir* and resolve the images for its agent.

    Steps:
    1. The project directory must exist and be a directory.
    2. Load ``agent.yaml`` from it.
    3. The manifest's model provider must have its API key set (skipped
       when *check_credentials* is false).
    4. Detect MCP servers that need registry resolution.
    5. Resolve the agent image and one sidecar image per command server.

    Raises:
        PreflightError: The first failing check.
    """
    with _tracer.start_as_current_span("arctl.preflight") as span:
        validate_project_dir(project_dir)
        manifest = load_manifest(project_dir)
        span.set_attribute(ATTR_AGENT_NAME, manifest.name)
        span.set_attribute(ATTR_MODEL_PROVIDER, manifest.model_provider)

        if check_credentials:
            validate_api_key(manifest.model_provider, environ)

        needs_registry = has_registry_servers(manifest)
        span.set_attribute(ATTR_NEEDS_REGISTRY, needs_registry)

        registry = settings.docker_registry
        agent_image = construct_image_name(
            flag_image, manifest.image, manifest.name, registry=registry
        )
        span.set_attribute(ATTR_AGENT_IMAGE, agent_image)

        server_images = {
            server.name: construct_mcp_server_image_name(
                manifest.name, server.name, registry=registry
            )
            for server in command_servers(manifest)
        }

        logger.debug(
            "Preflight for %s: image=%s, %d sidecar(s), registry resolution=%s",
            manifest.name,
            agent_image,
            len(server_images),
            needs_registry,
        )

        return PreflightReport(
            project_dir=str(project_dir),
            agent_name=manifest.name,
            model_provider=manifest.model_provider,
            agent_image=agent_image,
            needs_registry_resolution=needs_registry,
            registry_servers=[s.name for s in registry_servers(manifest)],
            server_images=server_images,
        )
