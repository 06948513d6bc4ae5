"""Tests for load / save / add / find / remove against a real catalog file."""

from __future__ import annotations

import json

import pytest

from message_catalog.catalog.errors import CatalogInitError
from message_catalog.catalog.store import (
    CatalogStore,
    add_message,
    find_message,
    initialize_catalog,
    load_catalog,
    remove_messages,
    save_catalog,
)
from message_catalog.messages import SMS, ElectronicMessage, Email, Letter, sample_messages


@pytest.fixture()
def catalog_path(tmp_path):
    return tmp_path / "messages.json"


def test_load_missing_file_is_empty_without_error(catalog_path):
    result = load_catalog(catalog_path)
    assert result.messages == []
    assert result.error is None


def test_load_malformed_file_degrades_to_empty(catalog_path):
    catalog_path.write_text("{broken", encoding="utf-8")
    result = load_catalog(catalog_path)
    assert result.messages == []
    assert result.error


def test_load_invalid_utf8_degrades_to_empty(catalog_path):
    catalog_path.write_bytes(b"\xff\xfe{")
    result = load_catalog(catalog_path)
    assert result.messages == []
    assert result.error


def test_load_directory_degrades_to_empty(tmp_path):
    result = load_catalog(tmp_path)
    assert result.messages == []
    assert result.error


def test_load_deeply_nested_document_degrades_to_empty(catalog_path):
    depth = 200_000
    catalog_path.write_text('{"messages": ' + "[" * depth + "]" * depth + "}", encoding="utf-8")
    result = load_catalog(catalog_path)
    assert result.messages == []
    assert result.error


def test_wrong_case_tag_yields_empty_catalog_not_partial(catalog_path):
    doc = {
        "messages": [
            {"$type": "Email", "sender": "a@x", "recipient": "b@x", "subject": "Hello!"},
            {"$type": "Sms", "phoneNumber": "+1", "text": "Hi!"},
        ]
    }
    catalog_path.write_text(json.dumps(doc), encoding="utf-8")
    result = load_catalog(catalog_path)
    assert result.messages == []
    assert "Sms" in result.error


def test_save_then_load(catalog_path):
    messages = sample_messages()
    assert save_catalog(catalog_path, messages).ok
    assert load_catalog(catalog_path).messages == messages
    assert not (catalog_path.parent / ".messages.json.tmp").exists()


def test_save_failure_is_returned(tmp_path):
    path = tmp_path / "missing-dir" / "messages.json"
    result = save_catalog(path, [ElectronicMessage("x")])
    assert not result.ok
    assert result.error
    assert not path.exists()


def test_save_unencodable_text_is_returned_and_cleans_up(catalog_path):
    result = save_catalog(catalog_path, [SMS("+1", "\ud800")])
    assert not result.ok
    assert "surrogates" in result.error
    assert not catalog_path.exists()
    assert not (catalog_path.parent / ".messages.json.tmp").exists()


def test_add_after_loading_lone_surrogate_reports_save_error(catalog_path):
    catalog_path.write_text('{"messages": [{"$type": "SMS", "text": "\\ud800"}]}', encoding="utf-8")
    before = catalog_path.read_bytes()

    result = add_message(catalog_path, SMS("+1", "ok"))

    assert result.load_error is None
    assert not result.added
    assert result.save_error
    assert catalog_path.read_bytes() == before
    assert not (catalog_path.parent / ".messages.json.tmp").exists()


def test_add_then_find_is_case_sensitive(catalog_path):
    email = Email("a@x", "b@x", "Hello!")
    result = add_message(catalog_path, email)
    assert result.added
    assert result.tag == "Email"

    found = find_message(catalog_path, "Hello!")
    assert found.found
    assert found.message == email

    assert not find_message(catalog_path, "hello!").found


def test_find_is_substring_and_returns_first_hit(catalog_path):
    add_message(catalog_path, Letter("x", "y", "first letter"))
    add_message(catalog_path, ElectronicMessage("second letter"))
    found = find_message(catalog_path, "letter")
    assert isinstance(found.message, Letter)
    assert isinstance(find_message(catalog_path, "cond").message, ElectronicMessage)


def test_find_skips_unset_fields(catalog_path):
    add_message(catalog_path, Email(sender="a@x"))
    add_message(catalog_path, SMS(text="needle"))
    assert isinstance(find_message(catalog_path, "needle").message, SMS)


def test_add_preserves_order_and_duplicates(catalog_path):
    add_message(catalog_path, SMS("+1", "Hi!"))
    add_message(catalog_path, SMS("+1", "Hi!"))
    add_message(catalog_path, Email("a", "b", "c"))
    messages = load_catalog(catalog_path).messages
    assert messages == [SMS("+1", "Hi!"), SMS("+1", "Hi!"), Email("a", "b", "c")]


def test_add_over_corrupt_document_starts_fresh(catalog_path):
    catalog_path.write_text("not json", encoding="utf-8")
    result = add_message(catalog_path, ElectronicMessage("new"))
    assert result.load_error
    assert result.added
    assert load_catalog(catalog_path).messages == [ElectronicMessage("new")]


def test_remove_is_asymmetric(catalog_path):
    add_message(catalog_path, Email("a@x", "b@x", "Hi!"))
    add_message(catalog_path, SMS("+1", "Hi!"))
    add_message(catalog_path, Letter("x", "y", "Hi!"))

    result = remove_messages(catalog_path, "Hi!")
    assert result.removed == 1

    remaining = load_catalog(catalog_path).messages
    assert remaining == [Email("a@x", "b@x", "Hi!"), Letter("x", "y", "Hi!")]


def test_remove_deletes_every_exact_match(catalog_path):
    add_message(catalog_path, SMS("+1", "dup"))
    add_message(catalog_path, ElectronicMessage("dup"))
    add_message(catalog_path, ElectronicMessage("dup!"))
    assert remove_messages(catalog_path, "dup").removed == 2
    assert load_catalog(catalog_path).messages == [ElectronicMessage("dup!")]


def test_remove_without_match_does_not_write(catalog_path):
    for msg in sample_messages():
        add_message(catalog_path, msg)
    before = catalog_path.read_bytes()

    result = remove_messages(catalog_path, "nonexistent")

    assert result.removed == 0
    assert result.save_error is None
    assert catalog_path.read_bytes() == before


def test_remove_on_missing_catalog_creates_nothing(catalog_path):
    assert remove_messages(catalog_path, "Hi!").removed == 0
    assert not catalog_path.exists()


def test_initialize_creates_directories_and_deletes_stale_document(tmp_path):
    path = tmp_path / "nested" / "dir" / "messages.json"
    initialize_catalog(path)
    assert path.parent.is_dir()

    add_message(path, ElectronicMessage("stale"))
    initialize_catalog(path)
    assert not path.exists()


def test_initialize_failure_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(CatalogInitError):
        initialize_catalog(blocker / "messages.json")


def test_end_to_end_scenario(catalog_path):
    store = CatalogStore(catalog_path)
    store.initialize()
    for msg in sample_messages():
        assert store.add(msg).added

    hit = store.find("Hello!")
    assert isinstance(hit.message, Email)

    assert store.remove("Hi!").removed == 1
    assert not store.find("Hi!").found

    final = store.load().messages
    assert [type(m) for m in final] == [Email, Letter, ElectronicMessage]
    assert final[1].content == "This is a letter."
    assert final[2].content == "This is an electronic message."
