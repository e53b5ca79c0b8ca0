"""Configuration management package."""

from .config_manager import ConfigManager, resolve_config_path
from .config_validator import ConfigValidator
from .config_converter import ConfigConverter

__all__ = ['ConfigManager', 'ConfigValidator', 'ConfigConverter', 'resolve_config_path']
