"""
Tests for SignatureStore against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from guestbook.domain.signatures import Found, NotFound, Signature, SIGNATURE_ID_PATTERN
from guestbook.repositories.signature_store import SignatureStore, StorageError


@pytest.fixture()
def store(temp_db):
    return SignatureStore()


def test_create_then_get_returns_same_record(store):
    created = store.create({"name": "Ada", "message": "hi"})
    assert SIGNATURE_ID_PATTERN.fullmatch(created.id)
    assert created.name == "Ada"
    assert created.message == "hi"

    result = store.get_by_id(created.id)
    assert result == Found(created)


def test_create_without_message_leaves_it_absent(store):
    created = store.create({"name": "Grace"})
    assert created.message is None
    assert created.to_dict() == {"id": created.id, "name": "Grace"}


def test_create_keeps_empty_message(store):
    created = store.create({"name": "Linus", "message": ""})
    assert created.to_dict()["message"] == ""


def test_create_ignores_client_supplied_id(store):
    created = store.create({"id": "a" * 24, "name": "Ada"})
    assert created.id != "a" * 24


def test_created_ids_are_unique(store):
    ids = {store.create({"name": f"guest {i}"}).id for i in range(20)}
    assert len(ids) == 20


def test_create_without_name_raises_storage_error(store):
    with pytest.raises(StorageError):
        store.create({"message": "anonymous"})
    assert store.get_all() == []


def test_create_with_non_object_raises_storage_error(store):
    with pytest.raises(StorageError):
        store.create(["Ada", "hi"])


def test_create_fails_when_record_cannot_be_reread(store, monkeypatch):
    monkeypatch.setattr(store, "_find", lambda signature_id: None)
    with pytest.raises(StorageError):
        store.create({"name": "Ada"})


def test_get_unknown_and_malformed_ids_are_not_found(store):
    assert store.get_by_id("0" * 24) == NotFound("0" * 24)
    assert store.get_by_id("not-an-id") == NotFound("not-an-id")
    assert isinstance(store.get_by_id(""), NotFound)


def test_get_all_contains_every_created_record(store):
    assert store.get_all() == []
    created = [store.create({"name": name}) for name in ("Ada", "Grace", "Linus")]
    listed = store.get_all()
    assert len(listed) == 3
    assert sorted(listed, key=lambda s: s.id) == sorted(created, key=lambda s: s.id)


def test_update_message_preserves_name_and_id(store):
    created = store.create({"name": "Ada", "message": "hi"})
    result = store.update_by_id(created.id, {"message": "x"})
    assert isinstance(result, Found)
    assert result.signature.id == created.id
    assert result.signature.name == "Ada"
    assert result.signature.message == "x"
    assert store.get_by_id(created.id) == result


def test_update_ignores_id_and_unknown_fields(store):
    created = store.create({"name": "Ada"})
    result = store.update_by_id(created.id, {"id": "b" * 24, "name": "Ada L.", "extra": 1})
    assert result == Found(Signature(id=created.id, name="Ada L.", message=None))
    assert isinstance(store.get_by_id("b" * 24), NotFound)


def test_update_with_no_fields_returns_current_record(store):
    created = store.create({"name": "Ada", "message": "hi"})
    assert store.update_by_id(created.id, {}) == Found(created)


def test_update_unknown_id_has_no_side_effects(store):
    assert store.update_by_id("c" * 24, {"name": "X"}) == NotFound("c" * 24)
    assert store.update_by_id("nope", {"name": "X"}) == NotFound("nope")
    assert store.get_all() == []


def test_delete_returns_record_and_removes_it(store):
    created = store.create({"name": "Ada", "message": "bye"})
    assert store.delete_by_id(created.id) == Found(created)
    assert store.get_by_id(created.id) == NotFound(created.id)
    assert store.delete_by_id(created.id) == NotFound(created.id)


def test_delete_unknown_id_leaves_collection_untouched(store):
    kept = store.create({"name": "Grace"})
    assert isinstance(store.delete_by_id("d" * 24), NotFound)
    assert store.get_all() == [kept]


def test_lookups_accept_uppercase_ids(store):
    created = store.create({"name": "Ada", "message": "hi"})
    upper = created.id.upper()

    assert store.get_by_id(upper) == Found(created)
    updated = store.update_by_id(upper, {"message": "x"})
    assert updated == Found(Signature(id=created.id, name="Ada", message="x"))
    assert store.delete_by_id(upper) == updated
    assert isinstance(store.get_by_id(created.id), NotFound)


def test_update_unknown_id_with_bad_body_is_not_found(store):
    assert store.update_by_id("f" * 24, None) == NotFound("f" * 24)
    assert store.update_by_id("f" * 24, ["X"]) == NotFound("f" * 24)


def test_update_existing_with_non_object_raises_storage_error(store):
    created = store.create({"name": "Ada"})
    with pytest.raises(StorageError):
        store.update_by_id(created.id, ["X"])
    assert store.get_by_id(created.id) == Found(created)
