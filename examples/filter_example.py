#!/usr/bin/env python3
"""Example script demonstrating how to use the mailsift package."""

import json
import os
from pprint import pprint
from typing import List

from mailsift import Email, FolderPredicate, FlagTypePredicate
from mailsift.filter import STAR, apply_filters, filter_by_folder, search_by_recipient
from mailsift.config import ConfigManager
from mailsift.views import apply_named_view

# Get the directory of this script
script_dir = os.path.dirname(os.path.abspath(__file__))
sample_file = os.path.join(script_dir, "sample_emails.json")
config_file = os.path.join(script_dir, "config.yaml")

# Load sample emails
with open(sample_file, "r") as f:
    emails: List[Email] = [Email.from_dict(item) for item in json.load(f)]

print("All emails:")
print(f"Total: {len(emails)}")
print("-" * 50)

# Emails in the Inbox folder
inbox_emails = filter_by_folder(emails, "Inbox")

print("\nInbox emails:")
print(f"Total: {len(inbox_emails)}")
pprint([email.to_dict() for email in inbox_emails])
print("-" * 50)

# Starred emails in the Inbox, chained
starred_inbox = apply_filters(emails, [FolderPredicate("Inbox"), FlagTypePredicate(STAR)])

print("\nStarred inbox emails:")
print(f"Total: {len(starred_inbox)}")
pprint([email.to_dict() for email in starred_inbox])
print("-" * 50)

# Emails addressed to company.com
company_emails = search_by_recipient(emails, "company.com")

print("\nEmails to company.com:")
print(f"Total: {len(company_emails)}")
pprint([email.to_dict() for email in company_emails])
print("-" * 50)

# The saved "trash" view from config.yaml
trash_emails = apply_named_view(emails, ConfigManager(config_file), "trash")

print("\nTrash view:")
print(f"Total: {len(trash_emails)}")
pprint([email.to_dict() for email in trash_emails])
