"""Gemini client acquisition.

Builds a fresh ``google.genai.Client`` for every caller. The credential comes
from an explicit ``ClientConfig`` or, when none is given, from the environment
variable named in probe_config.yaml (``API_KEY`` by default).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from google import genai

from modules.config.constants import API_KEY_ENV_VAR
from modules.config.service import get_client_config
from modules.diagnostics.errors import ConfigurationError


def _configured_env_var() -> str:
    """Name of the environment variable holding the API key."""
    try:
        return get_client_config().get("api_key_env_var") or API_KEY_ENV_VAR
    except (FileNotFoundError, ValueError):
        return API_KEY_ENV_VAR


@dataclass(frozen=True)
class ClientConfig:
    """Credential used to construct a Gemini client."""
    api_key: Optional[str] = None
    api_key_env_var: str = API_KEY_ENV_VAR

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_var: Optional[str] = None,
    ) -> ClientConfig:
        """Read the credential from the process environment (or ``environ``)."""
        source = os.environ if environ is None else environ
        name = env_var or _configured_env_var()
        return cls(api_key=source.get(name), api_key_env_var=name)

    def __repr__(self) -> str:
        masked = "set" if self.api_key else "missing"
        return f"ClientConfig(api_key=<{masked}>, api_key_env_var={self.api_key_env_var!r})"


def get_ai_client(config: Optional[ClientConfig] = None) -> genai.Client:
    """Return a new client bound to the configured credential.

    Args:
        config: Explicit credential. If None, it is read from the environment.

    Returns:
        A ``google.genai.Client``; callers use it once and drop it.

    Raises:
        ConfigurationError: If no API key is available.
    """
    if config is None:
        config = ClientConfig.from_env()
    api_key = (config.api_key or "").strip()
    if not api_key:
        raise ConfigurationError(
            f"API key not found. Set the {config.api_key_env_var} environment variable."
        )
    return genai.Client(api_key=api_key)
