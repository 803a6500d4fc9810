"""Agent manifest loader: read ``agent.yaml`` from a project directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from arctl.agent.models import AgentManifest
from arctl.errors import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAMES = ("agent.yaml", "agent.yml")


def parse_manifest(raw: str) -> AgentManifest:
    """Parse a raw YAML string into a validated :class:`AgentManifest`.

    Raises:
        ManifestError: On YAML parse errors, non-mapping documents, or
            schema validation failures.
    """
    try:
        data: Any = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ManifestError(f"YAML parse error: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError("Agent manifest must be a mapping")

    try:
        return AgentManifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestError(str(exc)) from exc


def find_manifest(project_dir: Path) -> Path:
    """Return the manifest path inside *project_dir*.

    Raises:
        ManifestError: If no manifest file is present.
    """
    for filename in MANIFEST_FILENAMES:
        candidate = project_dir / filename
        if candidate.is_file():
            return candidate
    raise ManifestError(f"No agent manifest ({' or '.join(MANIFEST_FILENAMES)}) found in {project_dir}")


def load_manifest(project_dir: Path) -> AgentManifest:
    """Locate, read and validate the agent manifest of a project."""
    path = find_manifest(project_dir)
    logger.debug("Loading agent manifest from %s", path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Cannot read {path}: {exc}") from exc
    return parse_manifest(raw)
