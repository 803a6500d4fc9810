"""Tests for the preflight orchestration."""

from __future__ import annotations

from pathlib import Path

import pytest

from arctl.agent.preflight import run_preflight
from arctl.config import Settings
from arctl.errors import (
    ManifestError,
    MissingCredentialError,
    ProjectDirNotADirectoryError,
    ProjectDirNotFoundError,
)

_MANIFEST = """\
name: myagent
model_provider: openai
mcp_servers:
  - type: command
    name: weather
  - type: remote
    name: api
    url: https://mcp.example.com
  - type: registry
    name: search
  - type: command
    name: my-db
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "agent.yaml").write_text(_MANIFEST)
    return tmp_path


class TestRunPreflight:
    def test_full_report(self, project: Path) -> None:
        report = run_preflight(
            project,
            settings=Settings(docker_registry="ghcr.io/myorg/"),
            environ={"OPENAI_API_KEY": "sk-test"},
        )
        assert report.agent_name == "myagent"
        assert report.model_provider == "openai"
        assert report.agent_image == "ghcr.io/myorg/myagent:latest"
        assert report.needs_registry_resolution is True
        assert report.registry_servers == ["search"]
        assert report.server_images == {
            "weather": "ghcr.io/myorg/myagent-weather:latest",
            "my-db": "ghcr.io/myorg/myagent-my-db:latest",
        }

    def test_flag_image_overrides(self, project: Path) -> None:
        report = run_preflight(
            project,
            settings=Settings(),
            flag_image="ghcr.io/myorg/myagent:v1.0",
            environ={"OPENAI_API_KEY": "sk-test"},
        )
        assert report.agent_image == "ghcr.io/myorg/myagent:v1.0"
        # Sidecars are always computed
        assert report.server_images["weather"] == "localhost:5001/myagent-weather:latest"

    def test_manifest_image_used(self, tmp_path: Path) -> None:
        (tmp_path / "agent.yaml").write_text(
            "name: myagent\nimage: docker.io/user/agent@sha256:abc123\n"
        )
        report = run_preflight(tmp_path, settings=Settings(), environ={})
        assert report.agent_image == "docker.io/user/agent@sha256:abc123"
        assert report.needs_registry_resolution is False
        assert report.server_images == {}

    def test_missing_dir(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectDirNotFoundError):
            run_preflight(tmp_path / "nope", settings=Settings(), environ={})

    def test_file_as_dir(self, tmp_path: Path) -> None:
        f = tmp_path / "agent.yaml"
        f.write_text(_MANIFEST)
        with pytest.raises(ProjectDirNotADirectoryError):
            run_preflight(f, settings=Settings(), environ={})

    def test_missing_manifest(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError):
            run_preflight(tmp_path, settings=Settings(), environ={})

    def test_missing_credential(self, project: Path) -> None:
        with pytest.raises(MissingCredentialError, match="OPENAI_API_KEY"):
            run_preflight(project, settings=Settings(), environ={})

    def test_skip_credential_check(self, project: Path) -> None:
        report = run_preflight(
            project, settings=Settings(), environ={}, check_credentials=False
        )
        assert report.agent_image == "localhost:5001/myagent:latest"
