# modules/config/config_loader.py

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from modules.config.constants import (
    API_KEY_ENV_VAR,
    DEFAULT_EMBEDDING_MODEL_ID,
    DEFAULT_MODEL_ID,
)


PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def _expand_path_str(p: str) -> Path:
    """
    Expand ~ and environment variables in a path string and return a Path.
    """
    return Path(os.path.expandvars(os.path.expanduser(p)))


def _compute_config_dir() -> Path:
    """
    Resolve PROBE_CONFIG_DIR robustly:
    - If absolute: use it.
    - If relative: resolve against PROJECT_ROOT.
    - If unset: default to PROJECT_ROOT/config.
    """
    raw = os.environ.get("PROBE_CONFIG_DIR")
    if raw:
        expanded = _expand_path_str(raw)
        return (expanded if expanded.is_absolute()
                else (PROJECT_ROOT / expanded)).resolve()
    return (PROJECT_ROOT / "config").resolve()


CONFIG_DIR = _compute_config_dir()
DEFAULT_CONFIG_PATH = CONFIG_DIR / "probe_config.yaml"

_SECTIONS = ("general", "models", "client")


@dataclass(slots=True)
class _ModelSettings:
    default_model: str = DEFAULT_MODEL_ID
    embedding_model: str = DEFAULT_EMBEDDING_MODEL_ID


class ConfigLoader:
    """
    Loads the probe configuration file and exposes normalized dictionaries to callers.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._raw: Dict[str, Any] = {}

    @staticmethod
    def _load_yaml_file(path: Path) -> Any:
        if not path.exists():
            raise FileNotFoundError(f"Missing configuration file: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(
                f"YAML parsing error in {path}.\n"
                f"Tip: Windows paths in double quotes require escaped backslashes "
                f'(e.g., "C:\\\\Users\\\\name"), or use single quotes '
                f"(e.g., 'C:\\Users\\name'), or forward slashes "
                f"(e.g., C:/Users/name).\nOriginal error: {e}"
            ) from e

    @staticmethod
    def _validate_shape(raw: Any, path: Path) -> Dict[str, Any]:
        if not isinstance(raw, dict):
            raise ValueError(
                f"Invalid configuration in {path}: expected a mapping at the top level, "
                f"got {type(raw).__name__}."
            )
        for section in _SECTIONS:
            value = raw.get(section)
            if value is not None and not isinstance(value, dict):
                raise ValueError(
                    f"Invalid configuration in {path}: section '{section}' must be a "
                    f"mapping, got {type(value).__name__}."
                )
        return raw

    def load_configs(self) -> None:
        """
        Load YAML configuration into memory.

        Raises ValueError when the file or one of its sections is not a mapping.
        """
        raw = self._load_yaml_file(self.config_path)
        self._raw = self._validate_shape(raw, self.config_path)

    def get_general_config(self) -> Dict[str, Any]:
        """
        Return the `general` section with defaults filled in.
        """
        general = dict(self._raw.get("general") or {})
        general.setdefault("interactive_mode", False)
        general.setdefault("logs_dir", "logs")
        return general

    def get_models_config(self) -> Dict[str, Any]:
        """
        Return the `models` section. Blank or missing names fall back to the
        built-in defaults so probes always have a model to address.
        """
        raw = self._raw.get("models") or {}
        models = _ModelSettings()
        if raw.get("default_model"):
            models.default_model = str(raw["default_model"]).strip()
        if raw.get("embedding_model"):
            models.embedding_model = str(raw["embedding_model"]).strip()
        return {
            "default_model": models.default_model,
            "embedding_model": models.embedding_model,
        }

    def get_client_config(self) -> Dict[str, Any]:
        """
        Return the `client` section (credential lookup settings).
        """
        raw = self._raw.get("client") or {}
        env_var = str(raw.get("api_key_env_var") or API_KEY_ENV_VAR).strip()
        return {"api_key_env_var": env_var}
