"""Project-level checks and image naming for agent builds.

Image references follow the ``[registry/]repository[:tag|@digest]`` form.
Explicit references (flag or manifest) are passed through untouched; only
the computed defaults are assembled here.
"""

from __future__ import annotations

import logging
import os
import stat

from arctl.errors import ProjectDirNotADirectoryError, ProjectDirNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY = "localhost:5001"
DEFAULT_TAG = "latest"
DEFAULT_AGENT_NAME = "agent"


def validate_project_dir(project_dir: str | os.PathLike[str]) -> None:
    """Ensure *project_dir* exists and is a directory.

    Only the entry's metadata is looked up; the directory is never listed.

    Raises:
        ProjectDirNotFoundError: If nothing exists at the path.
        ProjectDirNotADirectoryError: If the path is not a directory.
    """
    path = os.fspath(project_dir)
    try:
        info = os.stat(path)
    except FileNotFoundError as exc:
        raise ProjectDirNotFoundError(path) from exc
    except NotADirectoryError as exc:
        # A parent component is a regular file, so the path cannot exist.
        raise ProjectDirNotFoundError(path) from exc

    if not stat.S_ISDIR(info.st_mode):
        raise ProjectDirNotADirectoryError(path)

    logger.debug("Project directory %s validated", path)


def normalize_registry(registry: str) -> str:
    """Return the registry prefix used for computed image references.

    An empty value maps to :data:`DEFAULT_REGISTRY`; otherwise exactly one
    trailing ``/`` is removed.
    """
    if not registry:
        return DEFAULT_REGISTRY
    if registry.endswith("/"):
        return registry[:-1]
    return registry


def construct_image_name(
    flag_image: str,
    manifest_image: str,
    agent_name: str,
    *,
    registry: str = "",
) -> str:
    """Resolve the image reference for an agent.

    Precedence: *flag_image*, then *manifest_image*, then
    ``{registry}/{agent_name}:latest``.
    """
    if flag_image:
        return flag_image
    if manifest_image:
        return manifest_image
    return f"{normalize_registry(registry)}/{agent_name}:{DEFAULT_TAG}"


def construct_mcp_server_image_name(
    agent_name: str,
    server_name: str,
    *,
    registry: str = "",
) -> str:
    """Compute the sidecar image reference for one of an agent's MCP servers."""
    agent_name = agent_name or DEFAULT_AGENT_NAME
    return f"{normalize_registry(registry)}/{agent_name}-{server_name}:{DEFAULT_TAG}"
