"""
Configuration module for propchain.

Uses pydantic-settings for environment variable and YAML file loading.
"""

from propchain.config.settings import Settings
from propchain.config.sources import ConfigFileError, get_user_config_dir, get_user_config_path

__all__ = ["ConfigFileError", "Settings", "get_user_config_dir", "get_user_config_path"]
