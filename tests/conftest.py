import os
import tempfile

import pytest
import yaml

from mailsift.models import Email


@pytest.fixture
def sample_emails():
    """The three-record mailbox used across the filter tests."""
    return [
        Email(to_addr="a@x.com", type="Star", folder_names=["Inbox"], subject="Lunch"),
        Email(to_addr="b@x.com", type="trash", folder_names=[], subject="Old receipt"),
        Email(to_addr="c@X.com", type=None, folder_names=["Inbox", "Work"], subject="Standup"),
    ]


@pytest.fixture
def sparse_emails():
    """Records with missing fields."""
    return [
        Email(),
        Email(to_addr="", type="", folder_names=None),
        Email(to_addr=None, type="STAR", folder_names=["Inbox"]),
    ]


@pytest.fixture
def wire_emails():
    """Emails in the JSON form sent by the mail server."""
    return [
        {"toAddress": "alice@example.com", "fromAddress": "bob@example.com", "subject": "Hi",
         "type": "star", "folderNames": ["Inbox"], "id": 1},
        {"toAddress": "carol@work.org", "subject": "Report", "type": "sent",
         "folderNames": ["Work"], "id": 2},
        {"toAddress": ["dave@example.com", "erin@work.org"], "type": "trash", "id": 3},
        {"subject": "Draft without recipient", "type": "draft", "folderNames": ["Inbox"], "id": 4},
    ]


@pytest.fixture
def mock_config():
    """Create a mock configuration file for testing."""
    config = {
        'version': '1.0',
        'views': [
            {
                'name': 'starred-inbox',
                'description': 'Starred mail in the inbox',
                'filters': [
                    {'kind': 'folder', 'value': 'Inbox'},
                    {'kind': 'star'}
                ]
            },
            {
                'name': 'work',
                'filters': [
                    {'kind': 'search', 'value': 'work.org'}
                ]
            },
            {
                'name': 'everything',
                'filters': []
            }
        ],
        'logging': {
            'level': 'DEBUG',
            'file': None
        }
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config, f)
        temp_path = f.name

    yield temp_path

    os.unlink(temp_path)


@pytest.fixture
def write_config(tmp_path):
    """Write an arbitrary config dict to a YAML file and return its path."""
    def _write(config):
        path = tmp_path / "config.yaml"
        with open(path, "w") as f:
            yaml.dump(config, f)
        return str(path)
    return _write
