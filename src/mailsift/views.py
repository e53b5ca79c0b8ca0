"""Saved views: named filter chains defined in the configuration."""

import logging
from typing import List, Sequence

from .config import ConfigConverter, ConfigManager
from .filter import apply_filters
from .models import Email, ViewConfig

logger = logging.getLogger(__name__)


class UnknownViewError(ValueError):
    """Raised when a view name is not defined in the configuration."""


def apply_view(emails: Sequence[Email], view: ViewConfig) -> List[Email]:
    """Apply every filter of a view, in order."""
    predicates = ConfigConverter.to_predicates(view)
    result = apply_filters(emails, predicates)
    logger.info(f"View '{view.name}' matched {len(result)} of {len(emails)} emails")
    return result


def apply_named_view(emails: Sequence[Email], config_manager: ConfigManager, name: str) -> List[Email]:
    """Look up a view by name and apply it.

    Raises:
        UnknownViewError: If no view has that name
    """
    view = config_manager.get_view(name)
    if view is None:
        raise UnknownViewError(f"No view named '{name}' in {config_manager.config_path}")
    return apply_view(emails, view)
