"""Tests for saved views."""

import pytest

from mailsift.config import ConfigManager
from mailsift.models import Email, FilterRuleConfig, ViewConfig
from mailsift.views import UnknownViewError, apply_named_view, apply_view


def test_apply_view(sample_emails):
    view = ViewConfig(
        name="starred-inbox",
        filters=[FilterRuleConfig(kind="folder", value="Inbox"), FilterRuleConfig(kind="star")],
    )
    assert apply_view(sample_emails, view) == [sample_emails[0]]


def test_view_without_filters_passes_everything(sample_emails):
    assert apply_view(sample_emails, ViewConfig(name="all")) == sample_emails


def test_apply_named_view(mock_config, wire_emails):
    emails = [Email.from_dict(item) for item in wire_emails]
    config_manager = ConfigManager(mock_config)

    work = apply_named_view(emails, config_manager, "work")
    assert [email.extra["id"] for email in work] == [2, 3]


def test_apply_unknown_view(mock_config, sample_emails):
    with pytest.raises(UnknownViewError):
        apply_named_view(sample_emails, ConfigManager(mock_config), "nope")


def test_unknown_view_message(mock_config, sample_emails):
    with pytest.raises(UnknownViewError, match="^No view named 'nope' in "):
        apply_named_view(sample_emails, ConfigManager(mock_config), "nope")
