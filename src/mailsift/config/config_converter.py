"""Converts configuration models into filter objects."""

from typing import List
from ..filter import EmailPredicate, build_predicate
from ..models import FilterRuleConfig, ViewConfig

class ConfigConverter:
    """Converts configuration models into filter objects."""
    
    @staticmethod
    def to_predicate(rule: FilterRuleConfig) -> EmailPredicate:
        """Convert a FilterRuleConfig to a predicate.
        
        Args:
            rule: The filter rule configuration
            
        Returns:
            The matching predicate
        """
        return build_predicate(rule.kind, rule.value)
    
    @staticmethod
    def to_predicates(view: ViewConfig) -> List[EmailPredicate]:
        """Convert a view's filter chain to predicates, keeping its order.
        
        Args:
            view: The view configuration
            
        Returns:
            The predicates in application order
        """
        return [ConfigConverter.to_predicate(rule) for rule in view.filters]
