"""Validates configuration values."""

import logging
from typing import List
from ..filter import FILTER_KINDS, VALUE_KINDS
from ..models import Config, ViewConfig

logger = logging.getLogger(__name__)

class ConfigValidator:
    """Validates configuration values."""
    
    @staticmethod
    def validate(config: Config) -> None:
        """Validate the configuration.
        
        Args:
            config: The configuration to validate
            
        Raises:
            ValueError: If configuration is invalid
        """
        if not config:
            raise ValueError("Configuration not loaded")
        
        ConfigValidator._validate_views(config.views)
    
    @staticmethod
    def _validate_views(views: List[ViewConfig]) -> None:
        """Validate saved views.
        
        Args:
            views: List of view configurations
            
        Raises:
            ValueError: If a view is invalid or defined twice
        """
        view_names = set()
        for view in views:
            if not view.name or not view.name.strip():
                raise ValueError("View name cannot be empty")
            if view.name.lower() in view_names:
                raise ValueError(f"Duplicate view name '{view.name}'")
            view_names.add(view.name.lower())
            
            ConfigValidator._validate_filters(view)
    
    @staticmethod
    def _validate_filters(view: ViewConfig) -> None:
        """Validate the filter chain of a view.
        
        Args:
            view: The view configuration
            
        Raises:
            ValueError: If a filter kind is unknown or lacks its value
        """
        for rule in view.filters:
            if rule.kind not in FILTER_KINDS:
                raise ValueError(f"Unknown filter kind '{rule.kind}' in view {view.name}")
            if rule.kind in VALUE_KINDS and rule.value is None:
                raise ValueError(f"Filter '{rule.kind}' in view {view.name} requires a value")
            if rule.kind not in VALUE_KINDS and rule.value is not None:
                logger.warning(f"Ignoring value '{rule.value}' of '{rule.kind}' filter in view {view.name}")
