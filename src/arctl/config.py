"""Process configuration: container registry, logging level and tracing."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, field_validator

ENV_DOCKER_REGISTRY = "ARCTL_DOCKER_REGISTRY"
ENV_LOG_LEVEL = "ARCTL_LOG_LEVEL"
ENV_OTLP_ENDPOINT = "ARCTL_OTLP_ENDPOINT"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Configuration established once at start-up and passed down explicitly.

    ``docker_registry`` is the host/path prefix used to qualify computed
    image references.  An empty value means the local development registry
    (see :func:`arctl.agent.project.normalize_registry`).

    ``otlp_endpoint``, when set, turns on span export via OTLP/gRPC.
    """

    model_config = {"frozen": True}

    docker_registry: str = ""
    log_level: LogLevel = "WARNING"
    otlp_endpoint: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper() or "WARNING"
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``ARCTL_*`` environment variables.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        return cls(
            docker_registry=env.get(ENV_DOCKER_REGISTRY, ""),
            log_level=env.get(ENV_LOG_LEVEL, "WARNING"),
            otlp_endpoint=env.get(ENV_OTLP_ENDPOINT) or None,
        )

    def with_registry(self, registry: str | None) -> Settings:
        """Return a copy with the registry overridden, if one is given."""
        if registry is None:
            return self
        return self.model_copy(update={"docker_registry": registry})
