"""Config package - configuration loading and API key lookup."""

from .loader import load_config, get_config_path, get_api_key, DEFAULT_CONFIG

__all__ = ["load_config", "get_config_path", "get_api_key", "DEFAULT_CONFIG"]
