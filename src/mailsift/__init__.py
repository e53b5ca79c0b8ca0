"""Email filtering and search package."""

from .models import Email
from .filter import (
    DRAFT, SENT, STAR, TRASH,
    EmailPredicate, FlagTypePredicate, FolderPredicate, SubstringSearchPredicate,
    apply_filter, apply_filters, build_predicate, filter_emails,
)
from .views import apply_view

__version__ = "0.1.0"

__all__ = [
    "Email",
    "EmailPredicate",
    "FolderPredicate",
    "FlagTypePredicate",
    "SubstringSearchPredicate",
    "build_predicate",
    "apply_filter",
    "apply_filters",
    "filter_emails",
    "apply_view",
    "STAR",
    "TRASH",
    "SENT",
    "DRAFT",
]
