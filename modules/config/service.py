"""Centralized configuration service with caching and singleton pattern.

Provides a single point of access to the probe configuration sections,
eliminating redundant ConfigLoader instantiations and ensuring consistent
configuration state across the application.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Dict, Optional

from modules.config.config_loader import ConfigLoader


class ConfigService:
    """Thread-safe singleton configuration service with lazy loading and caching."""

    _instance: Optional[ConfigService] = None
    _lock = threading.Lock()

    def __new__(cls) -> ConfigService:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        # Prevent re-initialization
        if self._initialized:
            return

        self._loader: Optional[ConfigLoader] = None
        self._general_config: Optional[Dict[str, Any]] = None
        self._models_config: Optional[Dict[str, Any]] = None
        self._client_config: Optional[Dict[str, Any]] = None
        self._initialized = True

    def load(self, config_path: Optional[Path] = None) -> None:
        """Load all configurations.

        Args:
            config_path: Optional path to probe_config.yaml. If None, uses default.
        """
        with self._lock:
            loader = ConfigLoader(config_path)
            loader.load_configs()
            self._loader = loader
            # Clear cached configs to force reload
            self._general_config = None
            self._models_config = None
            self._client_config = None

    def _ensure_loaded(self) -> None:
        """Ensure configuration is loaded, loading with defaults if necessary."""
        if self._loader is None:
            self.load()

    def get_general_config(self) -> Dict[str, Any]:
        """Get general configuration (cached).

        Returns:
            General configuration dictionary (interactive_mode, logs_dir).
        """
        self._ensure_loaded()
        if self._general_config is None:
            with self._lock:
                if self._general_config is None:
                    self._general_config = self._loader.get_general_config()
        return self._general_config.copy()

    def get_models_config(self) -> Dict[str, Any]:
        """Get model configuration (cached).

        Returns:
            Dictionary with default_model and embedding_model.
        """
        self._ensure_loaded()
        if self._models_config is None:
            with self._lock:
                if self._models_config is None:
                    self._models_config = self._loader.get_models_config()
        return self._models_config.copy()

    def get_client_config(self) -> Dict[str, Any]:
        """Get client configuration (cached).

        Returns:
            Dictionary with api_key_env_var.
        """
        self._ensure_loaded()
        if self._client_config is None:
            with self._lock:
                if self._client_config is None:
                    self._client_config = self._loader.get_client_config()
        return self._client_config.copy()

    def reload(self, config_path: Optional[Path] = None) -> None:
        """Force reload of all configurations.

        Args:
            config_path: Optional path to probe_config.yaml. If None, uses default.
        """
        self.load(config_path)

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        with cls._lock:
            cls._instance = None


# Convenience functions for direct access
def get_config_service() -> ConfigService:
    """Get the singleton ConfigService instance.

    Returns:
        ConfigService singleton.
    """
    return ConfigService()


def get_general_config() -> Dict[str, Any]:
    """Get general configuration."""
    return get_config_service().get_general_config()


def get_models_config() -> Dict[str, Any]:
    """Get model configuration."""
    return get_config_service().get_models_config()


def get_client_config() -> Dict[str, Any]:
    """Get client configuration."""
    return get_config_service().get_client_config()
