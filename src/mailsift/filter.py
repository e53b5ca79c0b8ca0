"""Email filtering functionality."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from .models import Email

logger = logging.getLogger(__name__)

STAR = "star"
TRASH = "trash"
SENT = "sent"
DRAFT = "draft"

FLAG_KINDS = (STAR, TRASH, SENT, DRAFT)
VALUE_KINDS = ("folder", "type", "search")
FILTER_KINDS = VALUE_KINDS + FLAG_KINDS

FilterCriteria = Union[Dict[str, Optional[str]], Iterable[Tuple[str, Optional[str]]]]


class EmailPredicate(Protocol):
    """Anything that can decide whether a single email matches."""

    def evaluate(self, email: Email) -> bool: ...


@dataclass(frozen=True)
class FolderPredicate:
    """Matches emails filed under a folder (exact, case-sensitive)."""
    folder: Optional[str]

    def evaluate(self, email: Email) -> bool:
        if not email.folder_names:
            return False
        return self.folder in email.folder_names


@dataclass(frozen=True)
class FlagTypePredicate:
    """Matches emails whose type equals the flag, ignoring case."""
    flag: Optional[str]

    def evaluate(self, email: Email) -> bool:
        if self.flag is None or not isinstance(email.type, str):
            return False
        return email.type.lower() == self.flag.lower()


@dataclass(frozen=True)
class SubstringSearchPredicate:
    """Matches emails whose recipient address contains the query, ignoring case."""
    query: Optional[str]

    def evaluate(self, email: Email) -> bool:
        if self.query is None:
            return False
        query = self.query.lower()
        return any(query in addr.lower() for addr in email.recipients)


def build_predicate(kind: str, value: Optional[str] = None) -> EmailPredicate:
    """
    Build a predicate from its kind name.

    Args:
        kind: One of 'folder', 'type', 'search'; any other name is taken
            as a flag ('star', 'trash', 'received', ...) and ignores ``value``
        value: Selector for the value-taking kinds

    Returns:
        The predicate instance. A flag nobody uses simply matches nothing.
    """
    normalized = kind.strip().lower() if isinstance(kind, str) else kind
    if normalized == "folder":
        return FolderPredicate(value)
    if normalized == "type":
        return FlagTypePredicate(value)
    if normalized == "search":
        return SubstringSearchPredicate(value)
    return FlagTypePredicate(normalized)


def apply_filter(emails: Sequence[Email], predicate: EmailPredicate) -> List[Email]:
    """
    Keep the emails matching a predicate, in their original order.

    The input sequence is left untouched; a new list is always returned.
    """
    matched = [email for email in emails if predicate.evaluate(email)]
    logger.debug(f"{predicate} kept {len(matched)} of {len(emails)} emails")
    return matched


def apply_filters(emails: Sequence[Email], predicates: Iterable[EmailPredicate]) -> List[Email]:
    """Apply predicates one after another; an email survives only if all match."""
    result = list(emails)
    for predicate in predicates:
        result = apply_filter(result, predicate)
    return result


def filter_emails(
    emails: Sequence[Email],
    filters: Optional[FilterCriteria] = None
) -> List[Email]:
    """
    Filter emails based on provided criteria.

    Args:
        emails: List of Email records
        filters: Mapping or sequence of (kind, value) pairs, e.g.
            {'folder': 'Inbox', 'star': None} or
            [('folder', 'Inbox'), ('folder', 'Work')]

    Returns:
        List of emails that match every filter, in input order
    """
    if not filters:
        return list(emails)

    pairs = filters.items() if isinstance(filters, dict) else filters
    predicates = [build_predicate(kind, value) for kind, value in pairs]
    return apply_filters(emails, predicates)


def filter_by_folder(emails: Sequence[Email], folder: str) -> List[Email]:
    """Return emails filed under ``folder``."""
    return apply_filter(emails, FolderPredicate(folder))


def filter_by_type(emails: Sequence[Email], flag: str) -> List[Email]:
    """Return emails whose type is ``flag``."""
    return apply_filter(emails, FlagTypePredicate(flag))


def filter_starred(emails: Sequence[Email]) -> List[Email]:
    return filter_by_type(emails, STAR)


def filter_trash(emails: Sequence[Email]) -> List[Email]:
    return filter_by_type(emails, TRASH)


def search_by_recipient(emails: Sequence[Email], query: str) -> List[Email]:
    """Return emails whose recipient address contains ``query``."""
    return apply_filter(emails, SubstringSearchPredicate(query))
