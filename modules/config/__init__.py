"""Configuration management package.

Provides configuration loading, constants, and the centralized configuration
service.

Submodules:
- config_loader: YAML configuration loading (ConfigLoader, PROJECT_ROOT, CONFIG_DIR)
- constants: Application constants (DEFAULT_MODEL_ID, probe prompts, SAMPLE_IMAGE_BASE64)
- service: Configuration service singleton (ConfigService, get_config_service, etc.)

Note: Use direct imports from submodules:
    from modules.config.config_loader import ConfigLoader, PROJECT_ROOT
    from modules.config.constants import DEFAULT_MODEL_ID
    from modules.config.service import get_config_service
"""
