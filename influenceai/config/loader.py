"""
Configuration loading for InfluenceAI.

Handles loading configuration from ~/.influenceai/config.json with sensible defaults.
The search API key is never stored in the file; it is read from the environment
on every request.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    # Name of the environment variable holding the search provider key
    "api_key_env": "SERPAPI_KEY",

    # Outbound search provider
    "search": {
        "endpoint": "https://serpapi.com/search",
        "engine": "google",
        "timeout_seconds": 30.0,
        "connect_timeout_seconds": 10.0,
    },

    # Web dashboard
    "server": {
        "host": "127.0.0.1",
        "port": 8080,
    },

    # Display options
    "display": {
        "color_enabled": True,
        "bar_width": 20,
    },
}


def get_config_path() -> Path:
    """Get path to config file."""
    return Path.home() / ".influenceai" / "config.json"


def load_config() -> Dict[str, Any]:
    """
    Load configuration from file, merging with defaults.

    Returns a complete configuration with all default values filled in.
    User config overrides defaults where specified.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)

            # Shallow merge sections
            for key in ['search', 'server', 'display']:
                if key in user_config and isinstance(user_config[key], dict):
                    config[key].update(user_config[key])

            # Direct override for simple values
            if isinstance(user_config.get('api_key_env'), str):
                config['api_key_env'] = user_config['api_key_env']

        except json.JSONDecodeError as e:
            logger.warning("Could not parse config file %s: %s", config_path, e)
        except (OSError, AttributeError) as e:
            logger.warning("Error loading config file %s: %s", config_path, e)

    return config


def get_api_key(config: Dict[str, Any]) -> Optional[str]:
    """
    Read the search provider API key from the process environment.

    Called once per request so a key exported after startup is picked up.
    Returns None when the variable is unset or blank.
    """
    env_name = config.get('api_key_env') or DEFAULT_CONFIG['api_key_env']
    key = os.environ.get(env_name, '').strip()
    return key or None
