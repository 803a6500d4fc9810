"""Error types raised by the agent precondition checks."""

from __future__ import annotations


class PreflightError(Exception):
    """Base error for all precondition failures before a build or run."""


class ProjectDirError(PreflightError):
    """The project directory cannot be used as a build context root."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"project directory {path!r} {reason}")


class ProjectDirNotFoundError(ProjectDirError):
    """Nothing exists at the project directory path."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "does not exist")


class ProjectDirNotADirectoryError(ProjectDirError):
    """The project directory path exists but is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "is not a directory")


class MissingCredentialError(PreflightError):
    """The API key required by a model provider is unset or empty."""

    def __init__(self, provider: str, env_var: str) -> None:
        self.provider = provider
        self.env_var = env_var
        super().__init__(
            f"{env_var} environment variable is not set "
            f"(required for model provider {provider!r})"
        )


class ManifestError(PreflightError):
    """The agent manifest could not be read or failed validation."""
