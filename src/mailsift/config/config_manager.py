"""Manages configuration loading and validation."""

import os
import yaml
import logging
from typing import List, Optional
from dotenv import load_dotenv

from ..models import Config, LoggingConfig, ViewConfig
from .config_validator import ConfigValidator

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MAILSIFT_CONFIG"


def resolve_config_path(config_path: Optional[str] = None) -> Optional[str]:
    """Pick the config path from the argument or the MAILSIFT_CONFIG environment variable.
    
    Args:
        config_path: Explicit path, wins over the environment
        
    Returns:
        The path to load, or None if neither is set
    """
    if config_path:
        return config_path
    load_dotenv()
    return os.getenv(CONFIG_ENV_VAR)


class ConfigManager:
    """Manages configuration loading and validation."""
    
    def __init__(self, config_path: str):
        """Initialize the configuration manager.
        
        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = config_path
        self.config: Optional[Config] = None
        
        # Load configuration
        self._load_config()
    
    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, "r") as f:
                yaml_config = yaml.safe_load(f) or {}
            
            self.config = Config(**yaml_config)
            ConfigValidator.validate(self.config)
            
            logger.debug(f"Configuration loaded from {self.config_path} with {len(self.config.views)} views")
        except Exception as e:
            logger.error(f"Error loading configuration: {e}")
            raise
    
    def validate(self) -> None:
        """Validate the loaded configuration."""
        ConfigValidator.validate(self.config)
    
    @property
    def views(self) -> List[ViewConfig]:
        """Get the saved views."""
        if not self.config:
            return []
        return list(self.config.views)
    
    def get_view(self, name: str) -> Optional[ViewConfig]:
        """Get a view by its name, ignoring case."""
        name_lower = name.lower()
        for view in self.views:
            if view.name.lower() == name_lower:
                return view
        return None
    
    @property
    def logging(self) -> LoggingConfig:
        """Get logging settings."""
        return self.config.logging if self.config else LoggingConfig()
