"""Tests for the data models."""

from mailsift.filter import search_by_recipient
from mailsift.models import Email


def test_from_dict_wire_keys():
    """camelCase keys map onto attributes and unknown keys are kept."""
    email = Email.from_dict({
        "toAddress": "a@x.com",
        "fromAddress": "me@x.com",
        "type": "star",
        "folderNames": ["Inbox"],
        "id": 7,
    })

    assert email.to_addr == "a@x.com"
    assert email.from_addr == "me@x.com"
    assert email.type == "star"
    assert email.folder_names == ["Inbox"]
    assert email.extra == {"id": 7}


def test_from_dict_snake_case_and_legacy_folder_key():
    email = Email.from_dict({"to_addr": "a@x.com", "foldersNames": ("Inbox", "Work")})
    assert email.to_addr == "a@x.com"
    assert email.folder_names == ["Inbox", "Work"]


def test_from_dict_keeps_recipient_list():
    email = Email.from_dict({"toAddress": ["a@x.com", "b@y.org"]})
    assert email.to_addr == ["a@x.com", "b@y.org"]
    assert email.recipients == ["a@x.com", "b@y.org"]
    assert email.to_dict() == {"toAddress": ["a@x.com", "b@y.org"]}


def test_from_dict_drops_missing_recipients():
    """None entries in a recipient list are not turned into text."""
    email = Email.from_dict({"toAddress": ["a@x.com", None]})
    assert email.recipients == ["a@x.com"]
    assert search_by_recipient([email], "none") == []


def test_recipients():
    assert Email(to_addr="a@x.com").recipients == ["a@x.com"]
    assert Email().recipients == []
    assert str(Email(subject="Hi", to_addr=["a@x.com", "b@y.org"])) == "Hi -> a@x.com, b@y.org"


def test_from_dict_single_folder_string():
    email = Email.from_dict({"folderNames": "Inbox"})
    assert email.folder_names == ["Inbox"]


def test_from_dict_missing_fields_stay_absent():
    email = Email.from_dict({})
    assert email.to_addr is None
    assert email.type is None
    assert email.folder_names is None


def test_to_dict_round_trip(wire_emails):
    """to_dict gives back the wire form, minus absent fields."""
    original = wire_emails[0]
    assert Email.from_dict(original).to_dict() == original


def test_to_dict_omits_absent_fields():
    assert Email(type="star").to_dict() == {"type": "star"}
