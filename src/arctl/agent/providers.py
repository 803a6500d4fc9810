"""Model provider credentials.

Each supported provider reads its API key from one environment variable.
Providers missing from :data:`PROVIDER_API_KEYS` are let through: their
credentials are handled elsewhere.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from arctl.errors import MissingCredentialError

logger = logging.getLogger(__name__)

PROVIDER_API_KEYS: Mapping[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GOOGLE_API_KEY",
    "azureopenai": "AZUREOPENAI_API_KEY",
}


def required_api_key(model_provider: str) -> str | None:
    """Return the env var holding the provider's API key, or ``None`` if unknown."""
    return PROVIDER_API_KEYS.get(model_provider.lower())


def validate_api_key(
    model_provider: str,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Check that the API key for *model_provider* is set and non-empty.

    The provider name is matched case-insensitively.  Empty and unknown
    providers always pass.

    Raises:
        MissingCredentialError: If the provider is known and its variable is
            unset or empty.
    """
    env_var = required_api_key(model_provider)
    if env_var is None:
        if model_provider:
            logger.debug("No API key check for model provider %s", model_provider)
        return

    env = os.environ if environ is None else environ
    if not env.get(env_var):
        raise MissingCredentialError(model_provider, env_var)

    logger.debug("Found %s for model provider %s", env_var, model_provider)
